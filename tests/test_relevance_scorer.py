"""Tests for the relevance scorer."""

import pytest

from relevance_engine.models.schemas import Paper, UserProfile
from relevance_engine.services.relevance_scorer import (
    RelevanceScorer,
    calculate_quality_baseline,
    classify_match_tier,
    round_half_up,
)
from relevance_engine.services.scoring_weights import interpolate_weights


class TestHelpers:
    """Test suite for the small scoring helpers."""

    @pytest.mark.parametrize("total,tier", [
        (10.0, "core"),
        (7.0, "core"),
        (6.9, "explore"),
        (5.0, "explore"),
        (4.999, "discovery"),
        (1.0, "discovery"),
    ])
    def test_classify_match_tier(self, total, tier):
        assert classify_match_tier(total) == tier

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(0.25, 1) == pytest.approx(0.3)
        assert round_half_up(8.31, 1) == pytest.approx(8.3)

    def test_quality_baseline_range(self):
        assert calculate_quality_baseline(0.0, interpolate_weights(0.0)) == 3.0
        assert calculate_quality_baseline(1.0, interpolate_weights(0.0)) == 5.0
        assert calculate_quality_baseline(1.0, interpolate_weights(1.0)) == 5.5


class TestFocusedMethodologist:
    """A single methodological interest at exploration 0."""

    def test_minimum_wage_paper_is_a_core_match(self, causal_inference_profile, minimum_wage_paper, fixed_now):
        match = RelevanceScorer(causal_inference_profile, now=fixed_now).score_paper(minimum_wage_paper)

        assert match.topic_match_type == "direct"
        assert match.discovery_bonus == 0.0
        assert match.total >= 8.0
        assert match.total == pytest.approx(8.3)
        assert match.match_tier == "core"
        assert "Difference-in-Differences" in match.matched_interests
        assert "Difference-in-Differences" in match.matched_methods
        assert "Top journal" in match.explanation

    def test_breakdown_adds_up(self, causal_inference_profile, minimum_wage_paper, fixed_now):
        match = RelevanceScorer(causal_inference_profile, now=fixed_now).score_paper(minimum_wage_paper)

        assert match.baseline_score == pytest.approx(4.92)
        assert match.topic_bonus == pytest.approx(2.13)
        assert match.method_bonus == pytest.approx(1.26)
        assert match.field_relevance_score == 1.0
        assert match.weights == interpolate_weights(0.0)

    def test_unrelated_paper_scores_lower(self, causal_inference_profile, minimum_wage_paper, theory_paper, fixed_now):
        scorer = RelevanceScorer(causal_inference_profile, now=fixed_now)
        assert scorer.score_paper(theory_paper).total < scorer.score_paper(minimum_wage_paper).total


class TestGeneralist:
    """A profile with no interests or methods at the default exploration level."""

    def test_neutral_affinities_and_quality_discovery(self, generalist_profile, minimum_wage_paper, fixed_now):
        scorer = RelevanceScorer(generalist_profile, now=fixed_now)
        match = scorer.score_paper(minimum_wage_paper)

        assert scorer.expanded_profile.exploration_level == 0.5
        assert match.topic_score == 0.5
        assert match.method_score == 0.5
        assert match.topic_match_type == "none"
        assert match.discovery_bonus == pytest.approx(0.96 * 1.75 * 0.5)
        assert match.total == pytest.approx(6.4)
        assert match.match_tier == "explore"

    def test_explanation_names_the_papers_topics(self, generalist_profile, minimum_wage_paper, fixed_now):
        match = RelevanceScorer(generalist_profile, now=fixed_now).score_paper(minimum_wage_paper)

        assert "Minimum Wage" in match.explanation
        assert "Employment & Unemployment" in match.explanation
        assert match.explanation.endswith("Top journal")

    def test_paper_without_signals(self, generalist_profile, obscure_paper, fixed_now):
        match = RelevanceScorer(generalist_profile, now=fixed_now).score_paper(obscure_paper)
        assert match.explanation == "Recent research"
        assert match.match_tier == "discovery"

    def test_default_exploration_override(self, generalist_profile):
        scorer = RelevanceScorer(generalist_profile, default_exploration=0.9)
        assert scorer.weights == interpolate_weights(0.9)


class TestDiscoveryBonus:
    """Test suite for the discovery bonus with interests set."""

    def test_off_topic_quality_paper_gets_a_bonus(self, labor_profile, theory_paper, fixed_now):
        scorer = RelevanceScorer(labor_profile, now=fixed_now)
        match = scorer.score_paper(theory_paper)

        assert match.topic_match_type != "direct"
        assert 0.0 < match.discovery_bonus <= scorer.weights.discovery_max

    def test_low_quality_paper_gets_none(self, labor_profile, obscure_paper, fixed_now):
        match = RelevanceScorer(labor_profile, now=fixed_now).score_paper(obscure_paper)
        assert match.discovery_bonus == 0.0
        assert match.explanation == "Related research"

    def test_direct_match_gets_none(self, labor_profile, minimum_wage_paper, fixed_now):
        match = RelevanceScorer(labor_profile, now=fixed_now).score_paper(minimum_wage_paper)
        assert match.topic_match_type == "direct"
        assert match.discovery_bonus == 0.0


class TestFieldModifier:
    """Papers from adjacent disciplines are scaled down."""

    def test_adjacent_field_default(self, labor_profile, interview_paper, fixed_now):
        match = RelevanceScorer(labor_profile, now=fixed_now).score_paper(interview_paper)
        assert match.is_adjacent_field
        assert match.field_relevance_score == pytest.approx(0.85)

    def test_modifier_grows_with_exploration(self, labor_profile, interview_paper, fixed_now):
        focused = labor_profile.model_copy(update={"exploration_level": 0.0})
        match = RelevanceScorer(focused, now=fixed_now).score_paper(interview_paper)
        assert match.field_relevance_score == pytest.approx(0.8)

    def test_opted_in_field(self, labor_profile, interview_paper, fixed_now):
        opted_in = labor_profile.model_copy(update={
            "include_adjacent_fields": True,
            "selected_adjacent_fields": ["Sociology"],
        })
        match = RelevanceScorer(opted_in, now=fixed_now).score_paper(interview_paper)
        assert match.is_adjacent_field
        assert match.field_relevance_score == pytest.approx(0.95)

    def test_selection_without_opt_in_is_ignored(self, labor_profile, interview_paper, fixed_now):
        selected = labor_profile.model_copy(update={"selected_adjacent_fields": ["sociology"]})
        match = RelevanceScorer(selected, now=fixed_now).score_paper(interview_paper)
        assert match.field_relevance_score == pytest.approx(0.85)

    def test_home_field_is_not_scaled(self, labor_profile, class_size_paper, fixed_now):
        match = RelevanceScorer(labor_profile, now=fixed_now).score_paper(class_size_paper)
        assert not match.is_adjacent_field
        assert match.field_relevance_score == 1.0


class TestScoreInvariants:
    """Properties that hold for every profile and paper."""

    @pytest.mark.parametrize("profile_fixture", ["causal_inference_profile", "labor_profile", "generalist_profile"])
    def test_bounds_and_tiers(self, request, profile_fixture, sample_papers, fixed_now):
        scorer = RelevanceScorer(request.getfixturevalue(profile_fixture), now=fixed_now)
        for paper in sample_papers:
            match = scorer.score_paper(paper)
            assert 1.0 <= match.total <= 10.0
            assert match.total == round(match.total, 1)
            assert match.match_tier == classify_match_tier(match.total)
            assert match.explanation

    def test_idempotent(self, labor_profile, minimum_wage_paper, fixed_now):
        scorer = RelevanceScorer(labor_profile, now=fixed_now)
        assert scorer.score_paper(minimum_wage_paper) == scorer.score_paper(minimum_wage_paper)

    def test_empty_paper(self, labor_profile, fixed_now):
        match = RelevanceScorer(labor_profile, now=fixed_now).score_paper(Paper(id="W0"))
        assert 1.0 <= match.total <= 10.0
        assert match.matched_topics == []

    def test_unknown_names_only(self, minimum_wage_paper, fixed_now):
        profile = UserProfile(interests=["Astrology"], methods=["Tarot Reading"], exploration_level=0.2)
        match = RelevanceScorer(profile, now=fixed_now).score_paper(minimum_wage_paper)
        assert match.topic_match_type == "none"
        assert 1.0 <= match.total <= 10.0


class TestScoredPaper:
    """Test suite for to_scored_paper."""

    def test_preserves_input_keys(self, labor_profile, fixed_now):
        paper = Paper(id="W9", title="Minimum wage effects", source_url="https://example.org/w9")
        scored = RelevanceScorer(labor_profile, now=fixed_now).to_scored_paper(paper)

        assert scored.id == "W9"
        assert scored.model_dump()["source_url"] == "https://example.org/w9"
        assert scored.match_explanation

    def test_uses_supplied_match(self, labor_profile, minimum_wage_paper, fixed_now):
        scorer = RelevanceScorer(labor_profile, now=fixed_now)
        match = scorer.score_paper(minimum_wage_paper)
        scored = scorer.to_scored_paper(minimum_wage_paper, match)

        assert scored.relevance_score == match.total
        assert scored.match_tier == match.match_tier
        assert scored.matched_methods == match.matched_methods
        assert scored.is_adjacent_field == match.is_adjacent_field

    def test_replaces_result_keys_already_on_the_record(self, labor_profile, fixed_now):
        paper = Paper.model_validate({
            "id": "W1",
            "title": "Minimum wage",
            "relevance_score": 7.1,
            "match_tier": "core",
            "match_explanation": "Cached reason",
        })
        scorer = RelevanceScorer(labor_profile, now=fixed_now)
        match = scorer.score_paper(paper)
        scored = scorer.to_scored_paper(paper)

        assert scored.relevance_score == match.total
        assert scored.match_tier == match.match_tier
        assert scored.match_explanation == match.explanation
