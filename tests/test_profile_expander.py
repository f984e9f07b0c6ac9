"""Tests for user profile expansion."""

import math

import pytest

from relevance_engine.models.schemas import UserProfile
from relevance_engine.services.profile_expander import (
    adjacent_depth,
    expand_user_profile,
    is_generalist,
    related_depth,
    resolve_exploration_level,
)
from relevance_engine.taxonomy.graph import method_family


class TestExplorationLevel:
    """Test suite for exploration level handling."""

    def test_none_uses_configured_default(self):
        assert resolve_exploration_level(None) == 0.5

    def test_explicit_default(self):
        assert resolve_exploration_level(None, default=0.2) == 0.2

    def test_nan_uses_default(self):
        assert resolve_exploration_level(math.nan, default=0.3) == 0.3

    @pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (0.4, 0.4), (7.0, 1.0)])
    def test_clamped(self, value, expected):
        assert resolve_exploration_level(value) == expected

    def test_default_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_EXPLORATION_LEVEL", "0.9")
        assert resolve_exploration_level(None) == 0.9

    @pytest.mark.parametrize("level,expected", [(0.0, 1), (0.7, 1), (0.71, 2), (1.0, 2)])
    def test_related_depth(self, level, expected):
        assert related_depth(level) == expected

    @pytest.mark.parametrize("level,expected", [(0.0, 1), (0.24, 1), (0.25, 2), (0.5, 2), (0.75, 3), (1.0, 3)])
    def test_adjacent_depth(self, level, expected):
        assert adjacent_depth(level) == expected


class TestTopicInterests:
    """Test suite for topic interest expansion."""

    def test_direct_and_related_sets(self):
        expanded = expand_user_profile(UserProfile(interests=["Immigration"], exploration_level=0.0))

        assert expanded.direct_topic_ids == frozenset({"immigration"})
        assert "labor" in expanded.expanded_topic_ids
        assert "immigration" not in expanded.expanded_topic_ids
        assert expanded.has_interests
        assert not expanded.has_methods

    def test_sets_are_disjoint(self):
        expanded = expand_user_profile(UserProfile(interests=["Labor Markets", "Inequality"], exploration_level=1.0))

        assert not expanded.direct_topic_ids & expanded.expanded_topic_ids
        assert not expanded.direct_topic_ids & expanded.adjacent_topic_ids
        assert not expanded.expanded_topic_ids & expanded.adjacent_topic_ids

    def test_exploration_widens_the_adjacent_ring(self):
        narrow = expand_user_profile(UserProfile(interests=["Immigration"], exploration_level=0.0))
        broad = expand_user_profile(UserProfile(interests=["Immigration"], exploration_level=1.0))

        assert len(broad.adjacent_topic_ids | broad.expanded_topic_ids) > len(
            narrow.adjacent_topic_ids | narrow.expanded_topic_ids
        )

    def test_high_exploration_walks_two_related_hops(self):
        one_hop = expand_user_profile(UserProfile(interests=["Immigration"], exploration_level=0.5))
        two_hops = expand_user_profile(UserProfile(interests=["Immigration"], exploration_level=0.9))
        assert one_hop.expanded_topic_ids < two_hops.expanded_topic_ids

    def test_unknown_interest_is_skipped(self):
        expanded = expand_user_profile(UserProfile(interests=["Astrology"]))
        assert expanded.direct_topic_ids == frozenset()
        assert expanded.has_interests


class TestMethodologicalInterests:
    """Interests that name methods seed both topic and method sets."""

    def test_causal_inference_interest(self, causal_inference_profile):
        expanded = expand_user_profile(causal_inference_profile)

        assert {"causal_inference", "diff_in_diff", "regression_discontinuity", "rct"} <= expanded.direct_topic_ids
        assert "panel_data" in expanded.expanded_topic_ids
        assert "diff_in_diff" in expanded.direct_method_ids
        assert "panel_data" in expanded.expanded_method_ids
        assert expanded.has_methods
        assert expanded.exploration_level == 0.0


class TestMethodExpansion:
    """Test suite for method list expansion."""

    def test_method_family(self):
        expanded = expand_user_profile(UserProfile(methods=["Regression Discontinuity"]))

        assert expanded.direct_method_ids == frozenset({"regression_discontinuity", "causal_inference"})
        family = method_family("regression_discontinuity") | method_family("causal_inference")
        assert expanded.expanded_method_ids == family - expanded.direct_method_ids
        assert expanded.has_methods

    def test_unknown_method_only(self):
        expanded = expand_user_profile(UserProfile(methods=["Tarot Reading"]))
        assert expanded.direct_method_ids == frozenset()
        assert not expanded.has_methods


class TestGeneralist:
    """Test suite for generalist detection."""

    def test_no_interests(self):
        assert is_generalist(UserProfile(primary_field="Labor Economics"))

    def test_generalist_field(self):
        assert is_generalist(UserProfile(primary_field="Interdisciplinary", interests=["Health"]))

    def test_generalist_level(self):
        assert is_generalist(UserProfile(academic_level="Curious Learner", interests=["Health"]))

    @pytest.mark.parametrize("experience", ["generalist", "explorer", "Explorer"])
    def test_experience_type(self, experience):
        assert is_generalist(UserProfile(experience_type=experience, interests=["Health"]))

    def test_specialist(self, labor_profile):
        assert not is_generalist(labor_profile)
        assert not expand_user_profile(labor_profile).is_generalist

    def test_default_profile(self, generalist_profile):
        expanded = expand_user_profile(generalist_profile)
        assert expanded.is_generalist
        assert not expanded.has_interests
        assert expanded.exploration_level == 0.5
