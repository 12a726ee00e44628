"""
Ordered pattern rules for brief extraction.

Each scalar field owns a list of FieldRule, tried top to bottom; the first
rule that matches wins. Known entities (names, brands, the usual persona)
sit above the generic "label: value" rules so that recognising a known
entity always beats the weaker label heuristic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Pattern, Sequence, Tuple

from ..core.constants import (
    EXCLUSION_CUES,
    EXCLUSIONS_VOCAB,
    LANGUAGES_VOCAB,
    MEDIA_PREFERENCES_VOCAB,
    OBJECTIVES_VOCAB,
    SPORTS_VOCAB,
)
from ..core.errors import MalformedBudgetToken, MalformedDateToken
from ..core.types import BudgetRange

MAX_VALUE_CHARS = 200

_FLAGS = re.IGNORECASE


@dataclass(frozen=True)
class FieldRule:
    pattern: Pattern[str]
    group: Optional[int] = None     # None -> whole match


def literal(regex: str) -> FieldRule:
    return FieldRule(re.compile(regex, _FLAGS))


# "Label: value" / "Label - value". The value stops at a line break, a list
# separator, or right before the next "Word:" label on the same line.
_SEP = r"\s*[:\-–]\s*"
_VALUE = r"([^\n:;|•]{2,120}?)(?=\s*(?:[\n;|•]|$)|\s+[\w'’-]+\s*:)"


def labeled(label: str) -> FieldRule:
    return FieldRule(re.compile(r"\b" + label + _SEP + _VALUE, _FLAGS), group=1)


# -------------------------------------------------
# 1) Normalization
# -------------------------------------------------

def normalize_value(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    t = re.sub(r"\s+", " ", raw).strip()
    t = re.sub(r"^[:\-–]\s*", "", t)
    t = t[:MAX_VALUE_CHARS].strip()
    return t or None


def normalize_text(text: str) -> str:
    """Page breaks (form feed) and CR/LF variants become plain newlines."""
    t = (text or "").replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n\n")
    return t.strip()


# -------------------------------------------------
# 2) Scalar fields (specific -> generic)
# -------------------------------------------------

FIELD_RULES: Dict[str, List[FieldRule]] = {
    "responsible_person": [
        literal(r"karolien\s+van\s+gaever"),
        labeled(r"responsable(?:\s+commercial)?"),
        labeled(r"account\s+manager"),
        labeled(r"contact"),
    ],
    "media_agency": [
        literal(r"group\s*m\s*[-–]?\s*essence\s*mediacom"),
        labeled(r"agence(?:\s+m[ée]dia)?"),
        labeled(r"media\s+agency"),
    ],
    "advertiser_group": [
        literal(r"coca[-\s]?cola"),
        labeled(r"groupe?\s+annonceur"),
        labeled(r"annonceur"),
        labeled(r"advertiser(?:\s+group)?"),
    ],
    "brand_or_product": [
        literal(r"powerade"),
        labeled(r"marque"),
        labeled(r"produit"),
        labeled(r"brand"),
        labeled(r"product"),
    ],
    "target_persona": [
        literal(r"18[-\s]*54\s*[-–]?\s*sportifs"),
        labeled(r"cible"),
        labeled(r"persona"),
        labeled(r"target(?:\s+audience)?"),
    ],
    "key_messages": [
        literal(r"choi?s+is+ez\s*powerade\s*quand\s*vous\s*faites\s*du\s*sport"),
        labeled(r"messages?\s+cl[ée]s?"),
        labeled(r"key\s+messages?"),
        labeled(r"communiquer"),
    ],
}

# Notes: label followed by 50-400 chars up to the next sentence boundary.
NOTE_RULES: List[FieldRule] = [
    FieldRule(re.compile(r"\bint[ée]ress[ée]e?s?\s+par\b\s*([^\n.]{50,400})", _FLAGS), 1),
    FieldRule(re.compile(r"\binterested\s+in\b\s*([^\n.]{50,400})", _FLAGS), 1),
    FieldRule(re.compile(r"\bcompl[ée]ments?\b(?:\s+d'information)?\s*[:\-–]?\s*([^\n.]{50,400})", _FLAGS), 1),
    FieldRule(re.compile(r"\badditional\s+information\b\s*[:\-–]?\s*([^\n.]{50,400})", _FLAGS), 1),
    FieldRule(re.compile(r"\bnotes?\b\s*[:\-–]?\s*([^\n.]{50,400})", _FLAGS), 1),
    FieldRule(re.compile(r"\bdivers\b\s*[:\-–]?\s*([^\n.]{50,400})", _FLAGS), 1),
]


def first_match(text: str, rules: Sequence[FieldRule]) -> Optional[str]:
    for rule in rules:
        m = rule.pattern.search(text)
        if not m:
            continue
        value = normalize_value(m.group(rule.group) if rule.group else m.group(0))
        if value:
            return value
    return None


# -------------------------------------------------
# 3) Budget
# -------------------------------------------------

_NUM = r"(?<![\d.,])(\d{1,3})"
_GROUP_SEP = r"[., \u00a0\u202f]"
# 15.000, 1.200.000, 20 000 (all groups consumed; a dangling group is no amount)
_AMOUNT = r"(?<![\d.,])(\d{1,3}(?:" + _GROUP_SEP + r"\d{3})+)(?![.,\u00a0\u202f]?\d)"
_DASH = r"\s*[-–]\s*"
_EUR = r"(?:€\s*)?"


def _digits(raw: str) -> int:
    return int(re.sub(r"\D", "", raw))


def _k_range(m: re.Match) -> BudgetRange:
    return make_budget(int(m.group(1)) * 1000, int(m.group(2)) * 1000)


def _grouped_range(m: re.Match) -> BudgetRange:
    return make_budget(_digits(m.group(1)), _digits(m.group(2)))


def _k_single(m: re.Match) -> BudgetRange:
    amount = int(m.group(1)) * 1000
    return make_budget(amount, amount)


def _grouped_single(m: re.Match) -> BudgetRange:
    amount = _digits(m.group(1))
    return make_budget(amount, amount)


def make_budget(low: int, high: int) -> BudgetRange:
    if low < 0 or high < 0 or low > high:
        raise MalformedBudgetToken(f"invalid budget range {low}-{high}")
    return BudgetRange(min_amount=low, max_amount=high)


BudgetBuilder = Callable[[re.Match], BudgetRange]

BUDGET_RULES: List[Tuple[Pattern[str], BudgetBuilder]] = [
    # 20-25K, 20K - 25K, 20 – 25 k€
    (re.compile(_NUM + r"\s*k?" + _DASH + _EUR + r"(\d{1,3})\s*k\b", _FLAGS), _k_range),
    # 20.000 - 25.000, €150.000 - €200.000, 20 000 € – 25 000 €, 1.200.000 - 1.500.000
    (
        re.compile(_AMOUNT + r"\s*(?:€|eur)?" + _DASH + _EUR + _AMOUNT, _FLAGS),
        _grouped_range,
    ),
    # budget: 15K
    (re.compile(r"\bbudget[^\n\d]{0,40}?(\d{1,3})\s*k\b", _FLAGS), _k_single),
    # budget: 15.000 €
    (re.compile(r"\bbudget[^\n\d]{0,40}?" + _AMOUNT, _FLAGS), _grouped_single),
]


def extract_budget(text: str) -> Optional[BudgetRange]:
    for pattern, build in BUDGET_RULES:
        for m in pattern.finditer(text):
            try:
                return build(m)
            except MalformedBudgetToken:
                continue
    return None


# -------------------------------------------------
# 4) Dates (DD/MM/YYYY or DD-MM-YYYY)
# -------------------------------------------------

DATE_TOKEN = re.compile(r"(?<!\d)(\d{1,2})([/\-])(\d{1,2})\2(\d{4})(?!\d)")


def parse_date_token(day: str, month: str, year: str) -> date:
    try:
        return date(int(year), int(month), int(day))
    except ValueError as e:
        raise MalformedDateToken(f"{day}/{month}/{year}: {e}") from e


def find_dates(text: str) -> List[date]:
    """All calendar-valid date tokens, in text order. Invalid tokens are skipped."""
    out: List[date] = []
    for m in DATE_TOKEN.finditer(text):
        try:
            out.append(parse_date_token(m.group(1), m.group(3), m.group(4)))
        except MalformedDateToken:
            continue
    return out


# -------------------------------------------------
# 5) Vocabulary fields (every term tested independently)
# -------------------------------------------------

def _term_pattern(alias: str) -> Pattern[str]:
    return re.compile(r"(?<!\w)" + re.escape(alias) + r"(?!\w)", _FLAGS)


def match_vocabulary(text: str, vocab: Dict[str, List[str]]) -> Optional[List[str]]:
    found = [
        term for term, aliases in vocab.items()
        if any(_term_pattern(a).search(text) for a in aliases)
    ]
    return found or None


def exclusion_scope(text: str) -> str:
    """Sentences that carry an exclusion cue, joined; empty when none do."""
    sentences = re.split(r"[.\n;!?]+", text)
    cues = [c.lower() for c in EXCLUSION_CUES]
    return " . ".join(s for s in sentences if any(c in s.lower() for c in cues))


VOCABULARIES = {
    "sports_focus": SPORTS_VOCAB,
    "objectives": OBJECTIVES_VOCAB,
    "languages": LANGUAGES_VOCAB,
    "preferences": MEDIA_PREFERENCES_VOCAB,
    "exclusions": EXCLUSIONS_VOCAB,
}


# -------------------------------------------------
# 6) Urgency (ordered, first match wins; negations first)
# -------------------------------------------------

URGENCY_RULES: List[Tuple[str, Pattern[str]]] = [
    ("low", re.compile(r"\b(?:pas|non)\s+urgent|\bno\s+rush\b|\bnot\s+urgent\b|\bdélai\s+flexible\b", _FLAGS)),
    ("high", re.compile(r"\burgent|\basap\b|au\s+plus\s+vite|d[èe]s\s+que\s+possible|priorit[ée]\s+haute|high\s+priority", _FLAGS)),
    ("medium", re.compile(r"priorit[ée]\s+(?:moyenne|normale)|medium\s+priority", _FLAGS)),
]


def extract_urgency(text: str) -> Optional[str]:
    for level, pattern in URGENCY_RULES:
        if pattern.search(text):
            return level
    return None
