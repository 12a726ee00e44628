"""
Pytest configuration and fixtures
"""
import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports in tests
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from brief_gate.core.types import (  # noqa: E402
    Advertiser,
    BriefDetails,
    Briefing,
    BudgetRange,
    Constraints,
    Contact,
    SourceMeta,
)

REFERENCE_DATE = date(2025, 3, 1)

# Deadline 31/03/2025 is 30 days after REFERENCE_DATE.
SCENARIO_A_LINES = [
    "BRIEF CREATE - Powerade 2025",
    "Responsable commercial: Karolien Van Gaever",
    "Agence: GroupM - Essence Mediacom",
    "Annonceur: Coca-Cola",
    "Marque: Powerade",
    "Cible: 18-54 sportifs",
    "Message clé: Choisissez Powerade quand vous faites du sport",
    "Budget: 20-25K",
    "Deadline proposition: 31/03/2025",
    "Sports: padel, running, football",
    "Objectifs: notoriété et engagement",
    "Langues: français et néerlandais",
    "Formats: vidéo, réseaux sociaux",
    "Exclusions: pas d'association avec l'alcool ni les paris sportifs.",
    "Intéressé par une activation autour des tournois de padel en Belgique avec des ambassadeurs locaux",
]


@pytest.fixture(autouse=True)
def _clean_rule_env(monkeypatch):
    """Rule thresholds come from env in the service layer; keep tests on defaults."""
    for key in ("MIN_BUDGET", "MIN_LEAD_TIME_DAYS", "MAX_FILE_SIZE_MB", "MAX_PDF_PAGES", "SHOW_DEBUG"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


@pytest.fixture
def scenario_a_text():
    return "\n".join(SCENARIO_A_LINES)


@pytest.fixture
def scenario_d_text():
    """Scenario A without the target persona line."""
    return "\n".join(line for line in SCENARIO_A_LINES if not line.startswith("Cible"))


@pytest.fixture
def make_briefing():
    """Build a Briefing directly, bypassing extraction."""

    def _make(
        budget=(20000, 25000),
        deadline=date(2025, 3, 31),
        person="Karolien Van Gaever",
        group="Coca-Cola",
        persona="18-54 sportifs",
    ):
        return Briefing(
            meta=SourceMeta(source_file="test.pdf", extraction_date=REFERENCE_DATE),
            contact=Contact(responsible_person=person),
            advertiser=Advertiser(advertiser_group=group),
            brief=BriefDetails(target_persona=persona),
            constraints=Constraints(
                min_budget_required=10000,
                min_lead_time_days=10,
                budget=BudgetRange(*budget) if budget else None,
                proposal_deadline=deadline,
            ),
        )

    return _make
