"""
Relevance Scorer service.

Scores one paper for one user in four layers:

1. QUALITY BASELINE (3.0 up to the baseline cap)
   Every paper starts from journal tier and citations.
2. TOPIC AFFINITY (up to the topic cap)
   Direct, related and adjacent topic hits, weighted by detection
   confidence and by how far the topic sits from the user's selections.
3. METHOD AFFINITY (up to the method cap)
   Direct method hits plus partial credit for the method family.
4. DISCOVERY BONUS (up to the discovery cap)
   High-quality papers just outside the user's direct interests.

The caps move with the user's exploration level (see ``scoring_weights``).
Papers from adjacent disciplines are scaled down by a field modifier.

Score interpretation:
    7.0-10.0: core match
    5.0-6.9:  worth exploring
    1.0-4.9:  discovery / low relevance
"""

import logging
import math
from datetime import datetime
from typing import NamedTuple

from relevance_engine.models.analysis import (
    ExpandedUserProfile,
    MatchScore,
    MethodAffinity,
    PaperProfile,
    ScoringWeights,
    TopicAffinity,
)
from relevance_engine.models.schemas import MatchTier, Paper, ScoredPaper, UserProfile
from relevance_engine.services.paper_profiler import analyze_paper, get_method_tags, get_topic_tags
from relevance_engine.services.profile_expander import expand_user_profile
from relevance_engine.services.scoring_weights import interpolate_weights
from relevance_engine.taxonomy.fields import get_field_affinity, is_adjacent_field, map_paper_field
from relevance_engine.taxonomy.profile_options import is_generalist_field

logger = logging.getLogger(__name__)

MIN_SCORE = 1.0
MAX_SCORE = 10.0
CORE_THRESHOLD = 7.0
EXPLORE_THRESHOLD = 5.0
NEUTRAL_AFFINITY = 0.5

TOPIC_CONFIDENCE_WEIGHTS: dict[str, float] = {"high": 1.0, "medium": 0.7, "low": 0.4}
METHOD_CONFIDENCE_WEIGHTS: dict[str, float] = {"high": 1.0, "medium": 0.6, "low": 0.3}

# Topic bucket caps and mix
DIRECT_TOPIC_CAP = 1.0
RELATED_TOPIC_CAP = 0.85
ADJACENT_TOPIC_CAP = 0.6
TOPIC_MIX = (0.5, 0.3, 0.2)

# Method bucket caps and mix
DIRECT_METHOD_CAP = 1.0
FAMILY_METHOD_CAP = 0.7
FAMILY_METHOD_CREDIT = 0.6
METHOD_MIX = (0.6, 0.4)

QUALITY_BASELINE_FLOOR = 3.0
DISCOVERY_MIN_QUALITY = 0.5

# Bonus multipliers when the user left interests/methods empty
NO_INTEREST_TOPIC_FACTOR = 0.5
NO_METHOD_FACTOR = 0.3

OPTED_IN_ADJACENT_MODIFIER = 0.95


class _Signal(NamedTuple):
    id: str
    name: str
    confidence: str


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def classify_match_tier(total: float) -> MatchTier:
    if total >= CORE_THRESHOLD:
        return "core"
    if total >= EXPLORE_THRESHOLD:
        return "explore"
    return "discovery"


def calculate_topic_affinity(
    paper_profile: PaperProfile,
    user: ExpandedUserProfile,
    weights: ScoringWeights,
) -> TopicAffinity:
    """
    Topic alignment in [0, 1].

    Detected methods take part too when their ids sit in the user's topic
    sets, which is how methodological interests are matched.
    """
    if not user.has_interests:
        return TopicAffinity(
            score=NEUTRAL_AFFINITY,
            matched_topics=tuple(t.name for t in paper_profile.topics if t.confidence == "high")[:2],
            match_type="none",
        )

    topic_sets = user.direct_topic_ids | user.expanded_topic_ids | user.adjacent_topic_ids
    signals = [_Signal(t.id, t.name, t.confidence) for t in paper_profile.topics]
    signals.extend(
        _Signal(m.id, m.name, m.confidence)
        for m in paper_profile.methods
        if m.id in topic_sets
    )

    matched: list[str] = []
    direct = related = adjacent = 0.0
    for signal in signals:
        weight = TOPIC_CONFIDENCE_WEIGHTS[signal.confidence]
        if signal.id in user.direct_topic_ids:
            direct += weight
            matched.append(signal.name)
        elif signal.id in user.expanded_topic_ids:
            related += weight * weights.direct_hop_weight
            if signal.confidence != "low":
                matched.append(signal.name)
        elif signal.id in user.adjacent_topic_ids:
            adjacent += weight * weights.adjacent_hop_weight

    direct = min(DIRECT_TOPIC_CAP, direct)
    related = min(RELATED_TOPIC_CAP, related)
    adjacent = min(ADJACENT_TOPIC_CAP, adjacent)
    direct_mix, related_mix, adjacent_mix = TOPIC_MIX
    score = direct * direct_mix + related * related_mix + adjacent * adjacent_mix

    if direct > 0.3:
        match_type = "direct"
    elif related > 0.3:
        match_type = "related"
    elif adjacent > 0.2:
        match_type = "adjacent"
    else:
        match_type = "none"

    return TopicAffinity(
        score=max(0.0, min(1.0, score)),
        matched_topics=tuple(dict.fromkeys(matched))[:3],
        match_type=match_type,
    )


def calculate_method_affinity(paper_profile: PaperProfile, user: ExpandedUserProfile) -> MethodAffinity:
    """Method alignment in [0, 1]; neutral when the user has no method preferences."""
    if not user.has_methods:
        return MethodAffinity(
            score=NEUTRAL_AFFINITY,
            matched_methods=tuple(get_method_tags(paper_profile)),
            paradigm_match=False,
        )

    matched: list[str] = []
    direct = family = 0.0
    for method in paper_profile.methods:
        weight = METHOD_CONFIDENCE_WEIGHTS[method.confidence]
        if method.id in user.direct_method_ids:
            direct += weight
            matched.append(method.name)
        elif method.id in user.expanded_method_ids:
            family += weight * FAMILY_METHOD_CREDIT
            if method.confidence != "low":
                matched.append(method.name)

    direct = min(DIRECT_METHOD_CAP, direct)
    family = min(FAMILY_METHOD_CAP, family)
    direct_mix, family_mix = METHOD_MIX

    return MethodAffinity(
        score=max(0.0, min(1.0, direct * direct_mix + family * family_mix)),
        matched_methods=tuple(matched[:2]),
        paradigm_match=direct > 0.4 or family > 0.3,
    )


def calculate_quality_baseline(quality_score: float, weights: ScoringWeights) -> float:
    return QUALITY_BASELINE_FLOOR + quality_score * (weights.quality_baseline_max - QUALITY_BASELINE_FLOOR)


def calculate_discovery_bonus(
    paper: Paper,
    paper_profile: PaperProfile,
    topic_affinity: TopicAffinity,
    user: ExpandedUserProfile,
    weights: ScoringWeights,
) -> float:
    """
    Bonus for high-quality papers outside the user's direct interests.

    Users without interests get quality alone as the discovery signal.
    Otherwise adjacent-topic papers get the larger bump, and a paper from a
    field related to (but not the same as) the user's field adds an affinity
    bump scaled by the field-affinity cap.
    """
    quality = paper_profile.quality_score
    if not user.has_interests:
        return quality * weights.discovery_max * 0.5
    if topic_affinity.match_type == "direct" or quality < DISCOVERY_MIN_QUALITY:
        return 0.0

    adjacent_bump = 0.4 if topic_affinity.match_type == "adjacent" else 0.15
    quality_bump = (quality - DISCOVERY_MIN_QUALITY) * 1.5

    field_bump = 0.0
    user_field = user.primary_field
    if user_field and not is_generalist_field(user_field):
        paper_field = map_paper_field(paper.journal_field, [t.id for t in paper_profile.topics])
        if paper_field and paper_field != user_field:
            field_bump = get_field_affinity(user_field, paper_field) * weights.field_affinity_max

    bonus = (adjacent_bump + quality_bump) * weights.discovery_max / 3.0 + field_bump
    return min(weights.discovery_max, bonus)


def build_explanation(
    paper: Paper,
    paper_profile: PaperProfile,
    topic_affinity: TopicAffinity,
    method_affinity: MethodAffinity,
    user: ExpandedUserProfile,
) -> str:
    """Up to three short reasons joined with " · "."""
    parts: list[str] = []

    if topic_affinity.matched_topics and (topic_affinity.match_type != "none" or not user.has_interests):
        parts.append(", ".join(topic_affinity.matched_topics[:2]))

    if user.has_methods and method_affinity.paradigm_match and method_affinity.matched_methods:
        parts.append(method_affinity.matched_methods[0])

    if paper.journal_tier == 1 and len(parts) < 3:
        parts.append("Top journal")
    elif paper.journal_tier == 2 and len(parts) < 2:
        parts.append("Top field journal")

    if len(parts) < 2:
        if paper_profile.is_review:
            parts.append("Review")
        elif paper_profile.is_theoretical:
            parts.append("Theoretical")

    if not parts:
        if user.is_generalist:
            topic_tags = get_topic_tags(paper_profile)
            return ", ".join(topic_tags[:2]) if topic_tags else "Recent research"
        return "Related research"

    return " · ".join(parts)


class RelevanceScorer:
    """
    Scores papers against one user profile.

    The profile is expanded and the weights interpolated once per scorer;
    each ``score_paper`` call builds a fresh paper profile and shares no
    mutable state, so one scorer can be used from several threads.
    """

    def __init__(
        self,
        profile: UserProfile,
        now: datetime | None = None,
        default_exploration: float | None = None,
    ):
        self._profile = profile
        self._now = now
        self._user = expand_user_profile(profile, default_exploration=default_exploration)
        self._weights = interpolate_weights(self._user.exploration_level)
        self._selected_adjacent = {f.lower() for f in profile.selected_adjacent_fields}

    @property
    def expanded_profile(self) -> ExpandedUserProfile:
        return self._user

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def _field_modifier(self, paper: Paper) -> tuple[float, bool]:
        if not is_adjacent_field(paper.journal_field):
            return 1.0, False
        if self._profile.include_adjacent_fields and paper.journal_field.lower() in self._selected_adjacent:
            return OPTED_IN_ADJACENT_MODIFIER, True
        return 0.8 + 0.1 * self._user.exploration_level, True

    def score_paper(self, paper: Paper) -> MatchScore:
        """Full score breakdown for one paper."""
        user = self._user
        weights = self._weights
        paper_profile = analyze_paper(paper, now=self._now)

        topic = calculate_topic_affinity(paper_profile, user, weights)
        method = calculate_method_affinity(paper_profile, user)

        baseline = calculate_quality_baseline(paper_profile.quality_score, weights)
        topic_bonus = topic.score * (weights.topic_max if user.has_interests else NO_INTEREST_TOPIC_FACTOR)
        method_bonus = method.score * (weights.method_max if user.has_methods else NO_METHOD_FACTOR)
        discovery_bonus = calculate_discovery_bonus(paper, paper_profile, topic, user, weights)

        field_modifier, is_adjacent = self._field_modifier(paper)

        raw = (baseline + topic_bonus + method_bonus + discovery_bonus) * field_modifier
        total = round_half_up(max(MIN_SCORE, min(MAX_SCORE, raw)), 1)
        tier = classify_match_tier(total)

        logger.debug(
            "Paper %s: total=%.1f tier=%s baseline=%.2f topic=%.2f(%s) method=%.2f discovery=%.2f field=%.2f",
            paper.id, total, tier, baseline, topic_bonus, topic.match_type,
            method_bonus, discovery_bonus, field_modifier,
        )

        return MatchScore(
            total=total,
            match_tier=tier,
            baseline_score=round_half_up(baseline, 2),
            topic_score=round_half_up(topic.score, 3),
            method_score=round_half_up(method.score, 3),
            quality_score=round_half_up(paper_profile.quality_score, 3),
            field_relevance_score=round_half_up(field_modifier, 3),
            discovery_score=round_half_up(discovery_bonus / weights.discovery_max, 3),
            topic_bonus=round_half_up(topic_bonus, 3),
            method_bonus=round_half_up(method_bonus, 3),
            discovery_bonus=round_half_up(discovery_bonus, 3),
            topic_match_type=topic.match_type,
            matched_interests=list(topic.matched_topics),
            matched_methods=list(method.matched_methods),
            matched_topics=[t.name for t in paper_profile.topics if t.confidence != "low"][:3],
            explanation=build_explanation(paper, paper_profile, topic, method, user),
            is_adjacent_field=is_adjacent,
            weights=weights,
        )

    def to_scored_paper(self, paper: Paper, match: MatchScore | None = None) -> ScoredPaper:
        """The input record extended with its relevance result."""
        if match is None:
            match = self.score_paper(paper)
        # Result keys already on the input record are replaced.
        return ScoredPaper.model_validate({
            **paper.model_dump(),
            "relevance_score": match.total,
            "matched_interests": match.matched_interests,
            "matched_methods": match.matched_methods,
            "matched_topics": match.matched_topics,
            "match_explanation": match.explanation,
            "is_adjacent_field": match.is_adjacent_field,
            "match_tier": match.match_tier,
        })
