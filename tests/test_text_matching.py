"""Tests for text normalization, phrase matching and confidence classification."""

import pytest

from relevance_engine.services.text_matching import (
    ConfidenceThresholds,
    classify_confidence,
    contains_term,
    count_term_matches,
    normalize_text,
)


class TestNormalizeText:
    """Test suite for normalize_text."""

    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_text("  Minimum   WAGE\n effects ") == "minimum wage effects"

    @pytest.mark.parametrize("dash", ["-", "–", "—"])
    def test_dashes_become_spaces(self, dash):
        assert normalize_text(f"difference{dash}in{dash}differences") == "difference in differences"

    def test_punctuation_becomes_space(self):
        assert normalize_text("Employment: A (Quasi) Experiment!") == "employment a quasi experiment"

    def test_empty_text(self):
        assert normalize_text("") == ""


class TestContainsTerm:
    """Test suite for contains_term."""

    def test_long_term_matches_as_substring(self):
        assert contains_term("Effects on teenage workers", "worker")

    def test_hyphenated_term_matches_spaced_text(self):
        assert contains_term("a difference in differences design", "difference-in-differences")

    def test_short_term_requires_word_boundary(self):
        assert not contains_term("individual level data", "did")
        assert contains_term("we use a did estimator", "did")

    def test_empty_inputs(self):
        assert not contains_term("", "wage")
        assert not contains_term("wage", "")
        assert not contains_term("wage", "---")


class TestCountTermMatches:
    """Test suite for count_term_matches."""

    def test_counts_distinct_terms_in_order(self):
        result = count_term_matches(
            "Panel data with two-way fixed effects",
            ["fixed effects", "random effects", "panel data"],
        )
        assert result.count == 2
        assert result.matched == ["fixed effects", "panel data"]

    def test_no_matches(self):
        result = count_term_matches("nothing relevant here", ("regression discontinuity",))
        assert result.count == 0
        assert result.matched == []


class TestClassifyConfidence:
    """Test suite for classify_confidence with method-style thresholds."""

    @pytest.mark.parametrize("strong,moderate,weak,expected", [
        (2, 0, 0, "high"),
        (1, 1, 0, "high"),
        (1, 0, 0, "medium"),
        (0, 2, 0, "medium"),
        (0, 1, 1, "low"),
        (0, 1, 0, None),
        (0, 0, 3, None),
    ])
    def test_tiers(self, strong, moderate, weak, expected):
        assert classify_confidence(strong, moderate, weak) == expected

    def test_negative_demotes_medium_to_low(self):
        assert classify_confidence(0, 2, 0, negative_count=1) == "low"

    def test_negative_drops_low(self):
        assert classify_confidence(0, 1, 1, negative_count=1) is None

    def test_negative_never_overrides_high(self):
        assert classify_confidence(2, 0, 0, negative_count=3) == "high"
        assert classify_confidence(1, 1, 0, negative_count=1) == "high"

    def test_corroboration_upgrades_single_strong(self):
        assert classify_confidence(1, 0, corroboration=1) == "high"

    def test_topic_thresholds(self):
        topic = ConfidenceThresholds(high_strong=2, medium_moderate=3, low_moderate=2, low_weak=0)
        assert classify_confidence(0, 3, thresholds=topic) == "medium"
        assert classify_confidence(0, 2, thresholds=topic) == "low"
        assert classify_confidence(0, 1, thresholds=topic) is None
