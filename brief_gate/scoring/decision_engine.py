"""
DECISION ENGINE (rule based) - GO / CONDITIONAL / NO-GO

- Input is an already extracted Briefing (no text parsing here)
- Three independent criteria, scores summed to 0-100:
    budget           40  (critical)
    timeline         30  (critical)
    required fields  30  (linear penalty per missing field)
- Budget + timeline form a hard gate: a brief failing either one is NO-GO
  whatever its total score.
- "Today" is never read here: the caller passes the reference date.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Optional, Tuple

from ..core import config
from ..core.constants import CONDITIONAL, FAIL, GO, NO_GO, PASS
from ..core.types import Briefing, CriterionResult, Decision

# -------------------------------------------------
# 1) Rule set & weights (total = 100)
# -------------------------------------------------

BUDGET_WEIGHT = 40
TIMELINE_WEIGHT = 30
REQUIRED_FIELDS_WEIGHT = 30
MAX_SCORE = BUDGET_WEIGHT + TIMELINE_WEIGHT + REQUIRED_FIELDS_WEIGHT

MISSING_FIELD_PENALTY = 10

GO_THRESHOLD = 80
CONDITIONAL_THRESHOLD = 60

REVIEW_RECOMMENDATION = "Review missing information before proceeding"

# dotted path -> label used in messages
REQUIRED_FIELD_LABELS = {
    "contact.responsible_person": "responsible person",
    "advertiser.advertiser_group": "advertiser group",
    "brief.target_persona": "target persona",
}


@dataclass(frozen=True)
class RuleSet:
    min_budget: int = 10000
    min_lead_time_days: int = 10
    required_fields: Tuple[str, ...] = tuple(REQUIRED_FIELD_LABELS)


DEFAULT_RULES = RuleSet()


def rules_from_env() -> RuleSet:
    return RuleSet(min_budget=config.min_budget(), min_lead_time_days=config.min_lead_time_days())


# -------------------------------------------------
# 2) Helpers
# -------------------------------------------------

def _eur(amount: int) -> str:
    return f"€{amount:,}"


def _is_empty(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, str):
        return v.strip() == ""
    return isinstance(v, (list, tuple, set)) and len(v) == 0


def get_field(briefing: Briefing, path: str) -> Any:
    current: Any = briefing
    for part in path.split("."):
        current = getattr(current, part, None)
        if current is None:
            return None
    return current


def lead_time_days(deadline: date, reference: date) -> int:
    """
    Whole days from reference to deadline, rounded up.
    A datetime reference counts its elapsed part of the day (deadline = midnight).
    """
    if isinstance(reference, datetime):
        deadline_dt = datetime(deadline.year, deadline.month, deadline.day, tzinfo=reference.tzinfo)
        return math.ceil((deadline_dt - reference).total_seconds() / 86400)
    return (deadline - reference).days


# -------------------------------------------------
# 3) Criterion scorers -> (result, issue or None)
# -------------------------------------------------

def score_budget(briefing: Briefing, rules: RuleSet) -> Tuple[CriterionResult, Optional[str]]:
    budget = briefing.constraints.budget
    required = rules.min_budget
    if budget is None:
        return (
            CriterionResult(FAIL, 0, BUDGET_WEIGHT, "Budget not confirmed or found in briefing"),
            "No confirmed budget found",
        )
    if budget.min_amount >= required:
        return (
            CriterionResult(
                PASS, BUDGET_WEIGHT, BUDGET_WEIGHT,
                f"Budget confirmed: {_eur(budget.min_amount)} ≥ {_eur(required)}",
            ),
            None,
        )
    return (
        CriterionResult(
            FAIL, 0, BUDGET_WEIGHT,
            f"Budget insufficient: {_eur(budget.min_amount)} < {_eur(required)} required",
        ),
        "Budget below minimum requirement",
    )


def score_timeline(
    briefing: Briefing, rules: RuleSet, reference_date: date
) -> Tuple[CriterionResult, Optional[str]]:
    deadline = briefing.constraints.proposal_deadline
    required = rules.min_lead_time_days
    if deadline is None:
        return (
            CriterionResult(FAIL, 0, TIMELINE_WEIGHT, "No proposal deadline specified"),
            "Missing proposal deadline",
        )
    days = lead_time_days(deadline, reference_date)
    if days >= required:
        return (
            CriterionResult(
                PASS, TIMELINE_WEIGHT, TIMELINE_WEIGHT,
                f"Timeline adequate: {days} days ≥ {required} days required",
            ),
            None,
        )
    return (
        CriterionResult(
            FAIL, 0, TIMELINE_WEIGHT,
            f"Timeline insufficient: {days} days < {required} days required",
        ),
        "Insufficient lead time for deliverables",
    )


def score_required_fields(briefing: Briefing, rules: RuleSet) -> Tuple[CriterionResult, Optional[str]]:
    missing: List[str] = [
        REQUIRED_FIELD_LABELS.get(path, path)
        for path in rules.required_fields
        if _is_empty(get_field(briefing, path))
    ]
    if not missing:
        return (
            CriterionResult(PASS, REQUIRED_FIELDS_WEIGHT, REQUIRED_FIELDS_WEIGHT, "All required fields present"),
            None,
        )
    score = max(0, REQUIRED_FIELDS_WEIGHT - len(missing) * MISSING_FIELD_PENALTY)
    listed = ", ".join(missing)
    return (
        CriterionResult(FAIL, score, REQUIRED_FIELDS_WEIGHT, f"Missing fields: {listed}"),
        f"Missing required information: {listed}",
    )


# -------------------------------------------------
# 4) Final decision
# -------------------------------------------------

def decide_status(budget_ok: bool, timeline_ok: bool, score: int) -> str:
    if not (budget_ok and timeline_ok):
        return NO_GO
    if score >= GO_THRESHOLD:
        return GO
    if score >= CONDITIONAL_THRESHOLD:
        return CONDITIONAL
    return NO_GO


def evaluate_briefing(
    briefing: Briefing,
    reference_date: date,
    rules: RuleSet = DEFAULT_RULES,
) -> Decision:
    evaluated = [
        ("budget", score_budget(briefing, rules)),
        ("timeline", score_timeline(briefing, rules, reference_date)),
        ("required_fields", score_required_fields(briefing, rules)),
    ]

    criteria = {name: result for name, (result, _) in evaluated}
    issues = [issue for _, (_, issue) in evaluated if issue]
    total = sum(c.score for c in criteria.values())

    status = decide_status(
        criteria["budget"].status == PASS,
        criteria["timeline"].status == PASS,
        total,
    )
    recommendations: List[str] = []
    if status == CONDITIONAL:
        recommendations.append(REVIEW_RECOMMENDATION)

    return Decision(
        status=status,
        score=total,
        max_score=MAX_SCORE,
        criteria=criteria,
        issues=issues,
        recommendations=recommendations,
    )
