"""
Unit tests for pattern rules, normalization and token converters
"""
import pytest

from brief_gate.core.constants import SPORTS_VOCAB
from brief_gate.core.errors import MalformedBudgetToken, MalformedDateToken
from brief_gate.extraction.patterns import (
    exclusion_scope,
    extract_budget,
    extract_urgency,
    first_match,
    labeled,
    literal,
    make_budget,
    match_vocabulary,
    normalize_value,
    parse_date_token,
)


class TestNormalization:
    def test_collapses_whitespace_and_strips_leading_colon(self):
        assert normalize_value("  :  Jean   \n Dupont ") == "Jean Dupont"

    def test_strips_leading_dash(self):
        assert normalize_value("- Mindshare") == "Mindshare"

    def test_truncates_to_200_chars(self):
        assert len(normalize_value("x" * 300)) == 200

    def test_empty_becomes_none(self):
        assert normalize_value("  :  ") is None
        assert normalize_value(None) is None


class TestFirstMatch:
    def test_order_decides_not_position(self):
        rules = [literal(r"powerade"), labeled(r"marque")]
        assert first_match("Marque: Aquarius\nProduit phare Powerade", rules) == "Powerade"

    def test_capture_group_used_when_defined(self):
        assert first_match("Marque: Aquarius", [labeled(r"marque")]) == "Aquarius"

    def test_whole_match_without_group(self):
        assert first_match("chez COCA-COLA", [literal(r"coca[-\s]?cola")]) == "COCA-COLA"

    def test_no_rule_matches(self):
        assert first_match("rien ici", [literal(r"powerade"), labeled(r"marque")]) is None


class TestBudget:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Budget: 20-25K", (20000, 25000)),
            ("budget entre 20 – 25 k€", (20000, 25000)),
            ("Budget: 20.000 - 25.000 €", (20000, 25000)),
            ("Enveloppe 20,000-25,000", (20000, 25000)),
            ("Budget 20 000 € – 25 000 €", (20000, 25000)),
            ("Budget confirmé de 15K", (15000, 15000)),
            ("Budget: 15.000 €", (15000, 15000)),
            ("Budget: 5-8K", (5000, 8000)),
            ("Budget: 20K - 25K", (20000, 25000)),
            ("Budget: €150.000 - €200.000", (150000, 200000)),
            ("Budget: 1.200.000 - 1.500.000", (1200000, 1500000)),
            ("Budget: 1 200 000 €", (1200000, 1200000)),
        ],
    )
    def test_recognised_forms(self, text, expected):
        b = extract_budget(text)
        assert (b.min_amount, b.max_amount) == expected

    def test_range_string(self):
        assert extract_budget("Budget: 20-25K").range == "20000-25000"

    def test_no_budget(self):
        assert extract_budget("Cible: 18-54 sportifs") is None

    def test_inverted_range_is_absent(self):
        assert extract_budget("Budget: 25-20K") is None

    def test_inverted_range_falls_through_to_next_rule(self):
        b = extract_budget("Options 25-20K, budget: 15.000 €")
        assert (b.min_amount, b.max_amount) == (15000, 15000)

    def test_make_budget_rejects_inverted(self):
        with pytest.raises(MalformedBudgetToken):
            make_budget(25000, 20000)

    def test_dangling_group_is_not_an_amount(self):
        assert extract_budget("Budget: 15.0000") is None


class TestDateToken:
    def test_valid(self):
        assert parse_date_token("5", "4", "2025").isoformat() == "2025-04-05"

    @pytest.mark.parametrize("day, month", [("31", "13"), ("30", "02"), ("00", "05")])
    def test_invalid_calendar_dates(self, day, month):
        with pytest.raises(MalformedDateToken):
            parse_date_token(day, month, "2025")


class TestVocabulary:
    def test_each_term_tested_independently(self):
        assert match_vocabulary("Hockey, tennis et basketball", SPORTS_VOCAB) == ["hockey", "basket", "tennis"]

    def test_word_boundaries(self):
        assert match_vocabulary("footing et tennistique", SPORTS_VOCAB) is None

    def test_nothing_found(self):
        assert match_vocabulary("aucun sport", SPORTS_VOCAB) is None

    def test_exclusion_scope_keeps_cue_sentences_only(self):
        text = "Sponsor de paris sportifs bienvenu. À éviter: alcool et tabac"
        scope = exclusion_scope(text)
        assert "alcool" in scope
        assert "paris sportifs" not in scope


class TestUrgency:
    @pytest.mark.parametrize(
        "text, level",
        [
            ("Ce n'est pas urgent", "low"),
            ("Réponse urgente svp", "high"),
            ("Merci de revenir ASAP", "high"),
            ("Priorité moyenne sur ce dossier", "medium"),
            ("Rien de spécial", None),
        ],
    )
    def test_levels(self, text, level):
        assert extract_urgency(text) == level
