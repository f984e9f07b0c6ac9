"""Tests for exploration-aware weight interpolation."""

import pytest

from relevance_engine.services.scoring_weights import WEIGHT_ENDPOINTS, interpolate_weights


class TestInterpolateWeights:
    """Test suite for interpolate_weights."""

    def test_focused_endpoint(self):
        weights = interpolate_weights(0.0)
        assert weights.topic_max == 3.0
        assert weights.method_max == 1.5
        assert weights.discovery_max == 0.5
        assert weights.field_affinity_max == 0.0
        assert weights.quality_baseline_max == 5.0

    def test_exploratory_endpoint(self):
        weights = interpolate_weights(1.0)
        assert weights.topic_max == 1.0
        assert weights.method_max == 0.5
        assert weights.discovery_max == 3.0
        assert weights.field_affinity_max == 1.0
        assert weights.quality_baseline_max == 5.5
        assert weights.direct_hop_weight == pytest.approx(0.8)
        assert weights.adjacent_hop_weight == pytest.approx(0.6)

    def test_midpoint(self):
        weights = interpolate_weights(0.5)
        assert weights.topic_max == pytest.approx(2.0)
        assert weights.discovery_max == pytest.approx(1.75)
        assert weights.quality_baseline_max == pytest.approx(5.25)

    def test_topic_falls_and_discovery_rises(self):
        levels = [i / 10 for i in range(11)]
        topic = [interpolate_weights(e).topic_max for e in levels]
        discovery = [interpolate_weights(e).discovery_max for e in levels]

        assert all(a > b for a, b in zip(topic, topic[1:]))
        assert all(a < b for a, b in zip(discovery, discovery[1:]))

    @pytest.mark.parametrize("level,clamped", [(-0.5, 0.0), (1.5, 1.0)])
    def test_out_of_range_is_clamped(self, level, clamped):
        assert interpolate_weights(level) == interpolate_weights(clamped)

    def test_every_endpoint_is_used(self):
        assert set(interpolate_weights(0.3).model_dump()) == set(WEIGHT_ENDPOINTS)
