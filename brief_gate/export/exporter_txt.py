from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

# (section, key, label) in display order
FIELD_ORDER: List[Tuple[str, str, str]] = [
    ("contact", "responsible_person", "Responsible Person"),
    ("contact", "media_agency", "Media Agency"),
    ("advertiser", "advertiser_group", "Advertiser Group"),
    ("advertiser", "brand_or_product", "Brand / Product"),
    ("brief", "target_persona", "Target Persona"),
    ("brief", "key_messages", "Key Messages"),
    ("brief", "sports_focus", "Sports Focus"),
    ("brief", "objectives", "Objectives"),
    ("brief", "languages", "Languages"),
    ("brief", "urgency", "Urgency"),
    ("brief", "notes", "Notes"),
    ("constraints", "budget", "Budget"),
    ("constraints", "proposal_deadline", "Proposal Deadline"),
    ("constraints", "campaign_end_date", "Campaign End Date"),
    ("constraints", "exclusions", "Exclusions"),
    ("constraints", "preferences", "Media Preferences"),
]

BANNERS = {
    "GO": "GO - Brief Approved",
    "CONDITIONAL": "CONDITIONAL - Review Required",
    "NO-GO": "NO-GO - Brief Rejected",
}


def format_value(value: Any) -> str:
    if value is None or value == "" or value == []:
        return "(not specified)"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if isinstance(value, dict) and "min_amount" in value:
        return f"€{value['min_amount']:,} - €{value['max_amount']:,}"
    return str(value).strip()


def iter_fields(briefing: Dict[str, Any]):
    for section, key, label in FIELD_ORDER:
        yield label, (briefing.get(section) or {}).get(key)


def render_txt(payload: Dict[str, Any]) -> str:
    briefing = payload.get("briefing") or {}
    decision = payload.get("decision") or {}
    meta = briefing.get("meta") or {}

    lines = []
    lines.append("BRIEFING ANALYSIS")
    lines.append("=" * 17)
    lines.append(f"Source: {meta.get('source_file') or '-'}")
    lines.append(f"Reference date: {meta.get('extraction_date') or '-'}")
    lines.append("")

    status = decision.get("status", "NO-GO")
    lines.append(BANNERS.get(status, status))
    lines.append(f"Score: {decision.get('score')}/{decision.get('max_score')}")
    lines.append("")

    lines.append("CRITERIA")
    lines.append("-" * 8)
    for name, c in (decision.get("criteria") or {}).items():
        lines.append(f"[{c.get('status')}] {name} ({c.get('score')}/{c.get('max_score')}): {c.get('message')}")
    lines.append("")

    for title, key in (("ISSUES", "issues"), ("RECOMMENDATIONS", "recommendations")):
        items = decision.get(key) or []
        if items:
            lines.append(title)
            lines.append("-" * len(title))
            for item in items:
                lines.append(f" - {item}")
            lines.append("")

    lines.append("EXTRACTED DATA")
    lines.append("-" * 14)
    for label, value in iter_fields(briefing):
        lines.append(f"{label}: {format_value(value)}")
    lines.append("")

    return "\n".join(lines)


def export_txt_file(
    out_dir: str,
    result_id: str,
    payload: Dict[str, Any],
    filename: Optional[str] = None,
) -> str:
    os.makedirs(out_dir, exist_ok=True)
    if not filename:
        filename = f"brief_{result_id}.txt"
    path = os.path.join(out_dir, filename)

    content = render_txt(payload)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    return path
