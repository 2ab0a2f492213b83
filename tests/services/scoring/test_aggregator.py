"""Tests for overall/potential aggregation."""
import math

import pytest
from pydantic import ValidationError

from faceiq.domain.value_objects.weights import DEFAULT_WEIGHTS, ScoringWeights
from faceiq.services.random_source import SeededRandomSource
from faceiq.services.scoring.aggregator import aggregate
from tests.conftest import ScriptedRandom, make_metrics


class TestAggregate:
    """Test suite for score aggregation."""

    def test_weighted_overall(self):
        metrics = make_metrics(
            skin_quality=80, symmetry=90, proportions=70, jawline=60, eye_area=50
        )
        overall, _ = aggregate(metrics, 40, ScriptedRandom([0.0]))

        expected = 40 * 0.3 + 80 * 0.15 + 90 * 0.15 + 70 * 0.1 + 60 * 0.15 + 50 * 0.15
        assert overall == pytest.approx(expected)

    def test_potential_floor(self):
        overall, potential = aggregate(make_metrics(), 60, ScriptedRandom([0.0]))
        assert potential == pytest.approx(overall + 5)

    def test_potential_upper_growth(self):
        overall, potential = aggregate(make_metrics(), 60, ScriptedRandom([0.999]))
        assert overall + 5 <= potential < overall + 15

    def test_potential_capped_at_100(self):
        metrics = make_metrics(
            skin_quality=100, symmetry=100, proportions=100, jawline=100, eye_area=100
        )
        overall, potential = aggregate(metrics, 100, ScriptedRandom([0.7]))
        assert overall == pytest.approx(100.0)
        assert potential == 100.0

    @pytest.mark.parametrize("draw", [-50.0, math.nan, -math.inf])
    def test_potential_never_below_overall_with_bad_random_source(self, draw):
        overall, potential = aggregate(make_metrics(), 70, ScriptedRandom([draw]))
        assert potential >= overall
        assert potential <= 100

    def test_base_attractiveness_is_clamped(self):
        high, _ = aggregate(make_metrics(), 500, ScriptedRandom([0.0]))
        capped, _ = aggregate(make_metrics(), 100, ScriptedRandom([0.0]))
        assert high == pytest.approx(capped)

    def test_potential_dominance_over_many_draws(self):
        rng = SeededRandomSource(seed=1234)
        for base in range(0, 101, 5):
            metrics = make_metrics(skin_quality=base, jawline=100 - base)
            overall, potential = aggregate(metrics, base, rng)
            assert 0 <= overall <= potential <= 100

    def test_custom_weights(self):
        weights = ScoringWeights(
            beauty=0.2, skin_quality=0.1, symmetry=0.2,
            proportions=0.2, jawline=0.2, eye_area=0.1,
        )
        metrics = make_metrics(
            skin_quality=50, symmetry=50, proportions=50, jawline=50, eye_area=50
        )
        overall, _ = aggregate(metrics, 100, ScriptedRandom([0.0]), weights)
        assert overall == pytest.approx(60.0)


class TestScoringWeights:
    """Weighting policy validation."""

    def test_default_weights_sum_to_one(self):
        total = (
            DEFAULT_WEIGHTS.beauty + DEFAULT_WEIGHTS.skin_quality + DEFAULT_WEIGHTS.symmetry
            + DEFAULT_WEIGHTS.proportions + DEFAULT_WEIGHTS.jawline + DEFAULT_WEIGHTS.eye_area
        )
        assert total == pytest.approx(1.0)
        assert DEFAULT_WEIGHTS.structural >= DEFAULT_WEIGHTS.skin_quality + DEFAULT_WEIGHTS.eye_area

    def test_rejects_weights_not_summing_to_one(self):
        with pytest.raises(ValidationError):
            ScoringWeights(beauty=0.5)

    def test_rejects_skin_heavy_policy(self):
        with pytest.raises(ValidationError):
            ScoringWeights(
                beauty=0.1, skin_quality=0.3, symmetry=0.1,
                proportions=0.1, jawline=0.1, eye_area=0.3,
            )
