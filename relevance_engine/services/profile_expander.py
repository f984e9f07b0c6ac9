"""
User profile expansion.

Maps the display names a user selected onto taxonomy ids and widens them
over the knowledge graph: related topics feed the expanded set, the outer
ring feeds the adjacent (discovery) set, and method choices pull in their
method family. How far the walk goes depends on the exploration level.
"""

import logging
import math

from relevance_engine.config import get_settings
from relevance_engine.models.analysis import ExpandedUserProfile
from relevance_engine.models.schemas import UserProfile
from relevance_engine.taxonomy.graph import (
    METHOD_TAXONOMY,
    TOPIC_TAXONOMY,
    method_descendants,
    method_family,
    topic_neighborhood,
)
from relevance_engine.taxonomy.mappings import lookup_interest, lookup_method
from relevance_engine.taxonomy.profile_options import (
    GENERALIST_EXPERIENCE,
    is_generalist_field,
    is_generalist_level,
)

logger = logging.getLogger(__name__)

# Exploration above this walks related edges two hops instead of one.
WIDE_RELATED_THRESHOLD = 0.7


def resolve_exploration_level(value: float | None, default: float | None = None) -> float:
    """Clamp an exploration level to [0, 1]; None/NaN fall back to the default."""
    if value is None or math.isnan(value):
        value = default if default is not None else get_settings().default_exploration_level
    return max(0.0, min(1.0, float(value)))


def related_depth(exploration_level: float) -> int:
    return 2 if exploration_level > WIDE_RELATED_THRESHOLD else 1


def adjacent_depth(exploration_level: float) -> int:
    """1, 2 or 3 hops for the discovery ring."""
    return int(math.floor(1 + 2 * exploration_level + 0.5))


def is_generalist(profile: UserProfile) -> bool:
    return (
        is_generalist_field(profile.primary_field)
        or is_generalist_level(profile.academic_level)
        or (profile.experience_type or "").lower() in GENERALIST_EXPERIENCE
        or not profile.interests
    )


def expand_user_profile(profile: UserProfile, default_exploration: float | None = None) -> ExpandedUserProfile:
    """
    Expand a raw profile into taxonomy id sets.

    Interest ids that name topics are walked over related/adjacent edges.
    Interest ids that name methods (e.g. "Causal Inference") contribute the
    method and its descendants as direct topics and the method family as
    expanded topics, and seed the method sets as well. Unknown names are
    skipped.
    """
    exploration = resolve_exploration_level(profile.exploration_level, default_exploration)
    direct_depth = related_depth(exploration)
    ring_depth = adjacent_depth(exploration)

    direct_topics: set[str] = set()
    expanded_topics: set[str] = set()
    adjacent_topics: set[str] = set()
    direct_methods: set[str] = set()
    expanded_methods: set[str] = set()

    for interest in profile.interests:
        taxonomy_ids = lookup_interest(interest)
        if not taxonomy_ids:
            logger.debug("Skipping unknown interest %r", interest)
            continue
        for taxonomy_id in taxonomy_ids:
            if taxonomy_id in METHOD_TAXONOMY:
                specific = {taxonomy_id} | method_descendants(taxonomy_id)
                family: set[str] = set()
                for method_id in specific:
                    family |= method_family(method_id)
                direct_topics |= specific
                direct_methods |= specific
                expanded_topics |= family
                expanded_methods |= family
            elif taxonomy_id in TOPIC_TAXONOMY:
                neighborhood = topic_neighborhood(taxonomy_id, direct_depth, ring_depth)
                direct_topics.add(taxonomy_id)
                expanded_topics |= neighborhood.related
                adjacent_topics |= neighborhood.adjacent

    for method in profile.methods:
        taxonomy_ids = lookup_method(method)
        if not taxonomy_ids:
            logger.debug("Skipping unknown method %r", method)
            continue
        for method_id in taxonomy_ids:
            direct_methods.add(method_id)
            expanded_methods |= method_family(method_id)

    expanded_topics -= direct_topics
    adjacent_topics -= direct_topics | expanded_topics
    expanded_methods -= direct_methods

    expanded = ExpandedUserProfile(
        direct_topic_ids=frozenset(direct_topics),
        expanded_topic_ids=frozenset(expanded_topics),
        adjacent_topic_ids=frozenset(adjacent_topics),
        direct_method_ids=frozenset(direct_methods),
        expanded_method_ids=frozenset(expanded_methods),
        is_generalist=is_generalist(profile),
        has_interests=bool(profile.interests),
        has_methods=bool(direct_methods),
        exploration_level=exploration,
        primary_field=profile.primary_field,
    )
    logger.debug(
        "Expanded profile: %d direct, %d related, %d adjacent topics; %d direct, %d family methods (e=%.2f)",
        len(expanded.direct_topic_ids),
        len(expanded.expanded_topic_ids),
        len(expanded.adjacent_topic_ids),
        len(expanded.direct_method_ids),
        len(expanded.expanded_method_ids),
        exploration,
    )
    return expanded
