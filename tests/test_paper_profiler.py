"""Tests for the paper profiler: detection, quality and meta-characteristics."""

from datetime import datetime, timezone

import pytest

from relevance_engine.models.schemas import Concept, Paper
from relevance_engine.services.paper_profiler import (
    analyze_paper,
    calculate_quality_score,
    detect_methods,
    detect_topics,
    get_method_tags,
    get_paper_type,
    get_topic_tags,
)


def _by_id(detections):
    return {d.id: d for d in detections}


def _paper(**overrides):
    fields = {"id": "W1", "title": "", "abstract": ""}
    fields.update(overrides)
    return Paper(**fields)


class TestMethodDetection:
    """Test suite for method detection."""

    def test_minimum_wage_paper_methods(self, minimum_wage_paper):
        methods = _by_id(detect_methods(minimum_wage_paper.title, minimum_wage_paper.abstract))

        assert methods["diff_in_diff"].confidence == "high"
        assert methods["diff_in_diff"].name == "Difference-in-Differences"
        assert methods["panel_data"].confidence == "high"
        assert "regression_discontinuity" not in methods

    def test_child_suppresses_parent(self):
        methods = _by_id(detect_methods(
            "Causal identification of school spending effects",
            "Our difference-in-differences design compares districts before and after the reform.",
        ))
        assert "diff_in_diff" in methods
        assert "causal_inference" not in methods

    def test_parent_reported_without_children(self):
        methods = _by_id(detect_methods(
            "Causal identification in observational studies",
            "We discuss the identification strategy and the causal effect of interest.",
        ))
        assert methods["causal_inference"].confidence == "high"

    def test_negative_signal_demotes_medium(self):
        methods = _by_id(detect_methods(
            "Policy responses",
            "We check parallel trends and pre-trends around the eligibility threshold.",
        ))
        assert methods["diff_in_diff"].confidence == "low"

    def test_negative_signal_drops_low(self):
        methods = _by_id(detect_methods(
            "Policy responses",
            "Outcomes before and after the reform satisfy parallel trends near the cutoff.",
        ))
        assert "diff_in_diff" not in methods

    def test_negative_signal_never_overrides_high(self):
        methods = _by_id(detect_methods(
            "A difference-in-differences approach",
            "Parallel trends hold; no discontinuity is visible.",
        ))
        assert methods["diff_in_diff"].confidence == "high"

    def test_short_terms_match_whole_words_only(self):
        methods = _by_id(detect_methods("Individual behavior", "A study of individual choices."))
        assert "diff_in_diff" not in methods

    def test_evidence_is_capped(self, minimum_wage_paper):
        methods = detect_methods(minimum_wage_paper.title, minimum_wage_paper.abstract)
        assert all(1 <= len(m.evidence) <= 3 for m in methods)

    def test_ordered_high_to_low(self):
        methods = detect_methods(
            "A regression discontinuity design",
            "Regression-discontinuity estimates; we also check parallel trends and pre-trends around the threshold.",
        )
        order = {"high": 0, "medium": 1, "low": 2}
        ranks = [order[m.confidence] for m in methods]
        assert ranks == sorted(ranks)

    def test_empty_text(self):
        assert detect_methods("", "") == []


class TestTopicDetection:
    """Test suite for topic detection over text and concept tags."""

    def test_minimum_wage_paper_topics(self, minimum_wage_paper):
        topics = _by_id(detect_topics(
            minimum_wage_paper.title, minimum_wage_paper.abstract, minimum_wage_paper.concepts
        ))

        assert topics["minimum_wage"].confidence == "high"
        assert topics["employment"].confidence == "high"
        # Labor is a high-confidence parent of high-confidence children.
        assert "labor" not in topics

    def test_contextual_signal_corroborates_strong_hit(self):
        topics = _by_id(detect_topics("Labour market frictions", "Evidence from workers and their employers."))
        assert topics["labor"].confidence == "high"

    def test_contextual_signal_needs_companion_term(self):
        topics = _by_id(detect_topics("Labour market frictions", "Evidence from workers."))
        assert topics["labor"].confidence == "medium"

    def test_topic_parent_kept_when_child_not_high(self):
        topics = _by_id(detect_topics(
            "Labour market frictions",
            "Evidence from workers, their employers and wage dispersion.",
        ))
        assert topics["labor"].confidence == "high"
        assert topics["wages"].confidence == "medium"

    def test_text_only_source(self, class_size_paper):
        topics = _by_id(detect_topics(class_size_paper.title, class_size_paper.abstract))
        assert topics["education"].confidence == "high"
        assert topics["education"].source == "text"
        assert topics["education"].evidence

    def test_concept_only_detection(self):
        topics = _by_id(detect_topics("", "", [Concept(name="Immigration", score=0.8)]))
        assert topics["immigration"].confidence == "high"
        assert topics["immigration"].source == "externalTags"
        assert topics["immigration"].evidence == ()

    def test_concept_confidence_scales_with_tag_score(self):
        topics = _by_id(detect_topics("", "", [Concept(name="Immigration", score=0.3)]))
        assert topics["immigration"].confidence == "medium"

    def test_both_channels_upgrade_to_high(self):
        text_only = _by_id(detect_topics("Labour market frictions", "Evidence from workers."))
        assert text_only["labor"].confidence == "medium"

        combined = _by_id(detect_topics(
            "Labour market frictions", "Evidence from workers.", [Concept(name="Labor market", score=0.3)]
        ))
        assert combined["labor"].confidence == "high"
        assert combined["labor"].source == "both"

    def test_empty_concept_name_matches_nothing(self):
        assert detect_topics("", "", [Concept(name="!!!", score=0.9)]) == []


class TestQualityScore:
    """Test suite for calculate_quality_score."""

    def test_scenario_top_journal_eighty_citations(self, minimum_wage_paper, fixed_now):
        assert calculate_quality_score(minimum_wage_paper, now=fixed_now) == pytest.approx(0.96)

    @pytest.mark.parametrize("tier,expected", [(1, 1.0), (2, 0.8), (3, 0.6), (4, 0.35)])
    def test_tier_component(self, tier, expected, fixed_now):
        paper = _paper(journal_tier=tier, cited_by_count=100)
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(expected * 0.6 + 0.4)

    @pytest.mark.parametrize("cites,expected", [
        (100, 1.0), (50, 0.9), (20, 0.75), (10, 0.6), (5, 0.45), (1, 0.35), (0, 0.25),
    ])
    def test_citation_bands(self, cites, expected, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=cites, publication_date="2010-01-01")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + expected * 0.4)

    def test_recent_paper_floor(self, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=0, publication_date="2024-03-01")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + 0.5 * 0.4)

    def test_under_a_year_floor(self, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=0, publication_date="2023-09-01")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + 0.4 * 0.4)

    def test_floor_never_lowers_citation_score(self, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=9, publication_date="2023-09-01")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + 0.45 * 0.4)

    def test_no_floor_with_ten_citations(self, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=10, publication_date="2024-05-01")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + 0.6 * 0.4)

    @pytest.mark.parametrize("date,expected", [("2024-05", 0.41), ("2024", 0.41), ("2023", 0.31)])
    def test_partial_dates(self, date, expected, fixed_now):
        paper = _paper(journal_tier=4, cited_by_count=0, publication_date=date)
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(expected)

    def test_unparseable_date_skips_recency(self, fixed_now):
        paper = _paper(journal_tier=1, cited_by_count=0, publication_date="spring 2024")
        assert calculate_quality_score(paper, now=fixed_now) == pytest.approx(0.6 + 0.25 * 0.4)

    def test_naive_reference_time(self):
        paper = _paper(journal_tier=1, cited_by_count=0, publication_date="2024-05-01T00:00:00Z")
        score = calculate_quality_score(paper, now=datetime(2024, 6, 1))
        assert score == pytest.approx(0.6 + 0.5 * 0.4)

    def test_bounds(self, sample_papers, fixed_now):
        for paper in sample_papers:
            assert 0.0 <= calculate_quality_score(paper, now=fixed_now) <= 1.0


class TestMetaCharacteristics:
    """Test suite for paper-type flags."""

    def test_quantitative_empirical(self, minimum_wage_paper, fixed_now):
        profile = analyze_paper(minimum_wage_paper, now=fixed_now)
        assert profile.is_quantitative
        assert profile.is_empirical
        assert not profile.is_theoretical
        assert not profile.is_review
        assert get_paper_type(profile) == "Empirical"

    def test_theoretical(self, theory_paper, fixed_now):
        profile = analyze_paper(theory_paper, now=fixed_now)
        assert profile.is_theoretical
        assert not profile.is_quantitative
        assert not profile.is_empirical
        assert get_paper_type(profile) == "Theoretical"

    def test_qualitative(self, interview_paper, fixed_now):
        profile = analyze_paper(interview_paper, now=fixed_now)
        assert profile.is_qualitative
        assert not profile.is_quantitative
        assert profile.is_empirical
        assert get_paper_type(profile) == "Qualitative"

    def test_review_is_never_empirical(self, fixed_now):
        paper = _paper(
            title="Minimum wages: a systematic review",
            abstract="We review the literature and summarize the evidence from regression estimates.",
        )
        profile = analyze_paper(paper, now=fixed_now)
        assert profile.is_review
        assert not profile.is_empirical
        assert get_paper_type(profile) == "Review/Synthesis"

    def test_nothing_recognizable(self, obscure_paper, fixed_now):
        profile = analyze_paper(obscure_paper, now=fixed_now)
        assert profile.methods == ()
        assert not profile.is_empirical
        assert get_paper_type(profile) == "Research"


class TestAnalyzePaper:
    """Test suite for analyze_paper and the display helpers."""

    def test_profile_for_minimum_wage_paper(self, minimum_wage_paper, fixed_now):
        profile = analyze_paper(minimum_wage_paper, now=fixed_now)

        assert profile.quality_score == pytest.approx(0.96)
        assert "Difference-in-Differences" in get_method_tags(profile)
        assert {"Minimum Wage", "Employment & Unemployment"} <= set(get_topic_tags(profile))
        assert _by_id(profile.topics)["minimum_wage"].source == "both"

    def test_idempotent(self, minimum_wage_paper, fixed_now):
        assert analyze_paper(minimum_wage_paper, now=fixed_now) == analyze_paper(minimum_wage_paper, now=fixed_now)

    def test_does_not_mutate_paper(self, minimum_wage_paper, fixed_now):
        before = minimum_wage_paper.model_dump()
        analyze_paper(minimum_wage_paper, now=fixed_now)
        assert minimum_wage_paper.model_dump() == before

    def test_tag_helpers_respect_limits(self, class_size_paper, fixed_now):
        profile = analyze_paper(class_size_paper, now=fixed_now)
        assert len(get_method_tags(profile)) <= 2
        assert len(get_topic_tags(profile)) <= 3

    def test_profile_is_frozen(self, minimum_wage_paper, fixed_now):
        profile = analyze_paper(minimum_wage_paper, now=fixed_now)
        with pytest.raises(Exception):
            profile.quality_score = 0.1
