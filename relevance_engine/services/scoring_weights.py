"""
Exploration-aware scoring weights.

Every cap is a straight line between a focused endpoint (exploration 0) and
an exploratory endpoint (exploration 1). The endpoint values are tuned by
hand and kept as literals.
"""

from relevance_engine.models.analysis import ScoringWeights

# weight name -> (value at exploration 0, value at exploration 1)
WEIGHT_ENDPOINTS: dict[str, tuple[float, float]] = {
    "topic_max": (3.0, 1.0),
    "method_max": (1.5, 0.5),
    "discovery_max": (0.5, 3.0),
    "field_affinity_max": (0.0, 1.0),
    "quality_baseline_max": (5.0, 5.5),
    "direct_hop_weight": (0.7, 0.8),
    "adjacent_hop_weight": (0.4, 0.6),
}


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def interpolate_weights(exploration_level: float) -> ScoringWeights:
    """Weights for an exploration level (clamped to [0, 1])."""
    e = max(0.0, min(1.0, exploration_level))
    return ScoringWeights(**{
        name: _lerp(focused, exploratory, e)
        for name, (focused, exploratory) in WEIGHT_ENDPOINTS.items()
    })
