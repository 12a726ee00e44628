# Static vocabularies for multi-valued fields.
# canonical term -> aliases matched on word boundaries (case-insensitive).
# These are configuration, not scoring logic: edit freely.

from typing import Dict, List

SPORTS_VOCAB: Dict[str, List[str]] = {
    "padel": ["padel"],
    "hockey": ["hockey"],
    "basket": ["basket", "basketball"],
    "running": ["running", "course à pied", "jogging"],
    "football": ["football", "foot", "soccer"],
    "tennis": ["tennis"],
    "cyclisme": ["cyclisme", "vélo", "cycling"],
}

OBJECTIVES_VOCAB: Dict[str, List[str]] = {
    "awareness": ["notoriété", "awareness", "visibilité", "visibility"],
    "consideration": ["considération", "consideration"],
    "conversion": ["conversion", "conversions", "ventes", "sales"],
    "engagement": ["engagement"],
    "traffic": ["trafic", "traffic", "drive-to-store"],
    "brand image": ["image de marque", "brand image"],
}

# Full language names only: two-letter codes ("en", "de") collide with French words.
LANGUAGES_VOCAB: Dict[str, List[str]] = {
    "FR": ["français", "francais", "french", "francophone"],
    "NL": ["néerlandais", "neerlandais", "dutch", "nederlands", "néerlandophone"],
    "EN": ["anglais", "english"],
    "DE": ["allemand", "german", "deutsch"],
}

MEDIA_PREFERENCES_VOCAB: Dict[str, List[str]] = {
    "video": ["vidéo", "video", "vidéos", "videos"],
    "social": ["social", "social media", "réseaux sociaux", "instagram", "tiktok", "facebook"],
    "display": ["display", "bannières", "banners"],
    "podcast": ["podcast", "podcasts"],
    "ooh": ["ooh", "dooh", "affichage"],
    "tv": ["tv", "télévision", "television"],
    "radio": ["radio"],
    "influence": ["influence", "influenceurs", "influencers"],
    "branded content": ["branded content", "contenu sponsorisé", "native"],
    "events": ["événement", "événements", "event", "events", "activation"],
}

EXCLUSIONS_VOCAB: Dict[str, List[str]] = {
    "alcohol": ["alcool", "alcohol"],
    "gambling": ["paris sportifs", "jeux d'argent", "gambling", "betting"],
    "politics": ["politique", "politics"],
    "tobacco": ["tabac", "tobacco"],
    "competitors": ["concurrents", "concurrence", "competitors"],
    "adult content": ["contenu adulte", "adult content"],
}

# Exclusions are only searched in sentences carrying one of these cues.
EXCLUSION_CUES: List[str] = [
    "exclu", "exclure", "exclusion", "à éviter", "a eviter", "éviter", "interdit",
    "avoid", "exclude", "not allowed", "no association",
]

# Decision vocabulary
PASS = "PASS"
FAIL = "FAIL"

GO = "GO"
CONDITIONAL = "CONDITIONAL"
NO_GO = "NO-GO"
