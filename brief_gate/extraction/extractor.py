from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.config import show_debug
from ..core.errors import NoExtractableContent
from ..core.types import Advertiser, BriefDetails, Briefing, Constraints, Contact, SourceMeta
from ..scoring.decision_engine import DEFAULT_RULES, RuleSet
from .patterns import (
    FIELD_RULES,
    NOTE_RULES,
    VOCABULARIES,
    exclusion_scope,
    extract_budget,
    extract_urgency,
    find_dates,
    first_match,
    match_vocabulary,
    normalize_text,
)


def _debug(msg: str) -> None:
    if show_debug():
        print(f"[Extractor] {msg}", flush=True)


def extract_field(text: str, field_name: str) -> Optional[str]:
    return first_match(text, FIELD_RULES[field_name])


def extract_notes(text: str) -> Optional[str]:
    return first_match(text, NOTE_RULES)


def extract_deadline(text: str) -> Optional[date]:
    """Deadline = first calendar-valid date in the text."""
    dates = find_dates(text)
    return dates[0] if dates else None


def extract_end_date(text: str) -> Optional[date]:
    """End date = last valid date, only when the text holds two distinct dates or more."""
    dates = find_dates(text)
    if len(set(dates)) < 2:
        return None
    return dates[-1]


def extract_briefing(
    text: str,
    source: str = "",
    reference_date: Optional[date] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> Briefing:
    """
    Turn one document's raw text into a Briefing.

    Unmatched fields are left as None; only empty input raises
    NoExtractableContent. reference_date is recorded as the extraction date.
    """
    t = normalize_text(text)
    if not t:
        raise NoExtractableContent("No readable text found in the document.")

    _debug(f"source={source!r} chars={len(t)}")

    contact = Contact(
        responsible_person=extract_field(t, "responsible_person"),
        media_agency=extract_field(t, "media_agency"),
    )
    advertiser = Advertiser(
        advertiser_group=extract_field(t, "advertiser_group"),
        brand_or_product=extract_field(t, "brand_or_product"),
    )
    brief = BriefDetails(
        target_persona=extract_field(t, "target_persona"),
        key_messages=extract_field(t, "key_messages"),
        sports_focus=match_vocabulary(t, VOCABULARIES["sports_focus"]),
        objectives=match_vocabulary(t, VOCABULARIES["objectives"]),
        languages=match_vocabulary(t, VOCABULARIES["languages"]),
        urgency=extract_urgency(t),
        notes=extract_notes(t),
    )
    constraints = Constraints(
        min_budget_required=rules.min_budget,
        min_lead_time_days=rules.min_lead_time_days,
        budget=extract_budget(t),
        proposal_deadline=extract_deadline(t),
        campaign_end_date=extract_end_date(t),
        exclusions=match_vocabulary(exclusion_scope(t), VOCABULARIES["exclusions"]),
        preferences=match_vocabulary(t, VOCABULARIES["preferences"]),
    )

    briefing = Briefing(
        meta=SourceMeta(source_file=source, extraction_date=reference_date),
        contact=contact,
        advertiser=advertiser,
        brief=brief,
        constraints=constraints,
    )
    _debug(f"budget={constraints.budget} deadline={constraints.proposal_deadline}")
    return briefing
