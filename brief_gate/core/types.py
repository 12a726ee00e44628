from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


# Multi-valued fields keep vocabulary order so serialized output is stable.
TermList = List[str]


@dataclass
class BudgetRange:
    min_amount: int
    max_amount: int

    @property
    def range(self) -> str:
        return f"{self.min_amount}-{self.max_amount}"


@dataclass
class SourceMeta:
    source_file: str = ""
    extraction_date: Optional[date] = None   # injected reference date, never the clock


@dataclass
class Contact:
    responsible_person: Optional[str] = None
    media_agency: Optional[str] = None


@dataclass
class Advertiser:
    advertiser_group: Optional[str] = None
    brand_or_product: Optional[str] = None


@dataclass
class BriefDetails:
    target_persona: Optional[str] = None
    key_messages: Optional[str] = None
    sports_focus: Optional[TermList] = None
    objectives: Optional[TermList] = None
    languages: Optional[TermList] = None
    urgency: Optional[str] = None            # "low" | "medium" | "high"
    notes: Optional[str] = None


@dataclass
class Constraints:
    min_budget_required: int
    min_lead_time_days: int
    budget: Optional[BudgetRange] = None
    proposal_deadline: Optional[date] = None
    campaign_end_date: Optional[date] = None
    exclusions: Optional[TermList] = None
    preferences: Optional[TermList] = None


@dataclass
class Briefing:
    meta: SourceMeta
    contact: Contact
    advertiser: Advertiser
    brief: BriefDetails
    constraints: Constraints

    def to_dict(self) -> Dict[str, Any]:
        data = _jsonable(asdict(self))
        budget = self.constraints.budget
        if budget is not None:
            data["constraints"]["budget"] = {
                "range": budget.range,
                "min_amount": budget.min_amount,
                "max_amount": budget.max_amount,
            }
        return data


@dataclass
class CriterionResult:
    status: str                              # "PASS" | "FAIL"
    score: int
    max_score: int
    message: str
    required: bool = True


@dataclass
class Decision:
    status: str                              # "GO" | "CONDITIONAL" | "NO-GO"
    score: int
    max_score: int
    criteria: Dict[str, CriterionResult] = field(default_factory=dict)
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value
