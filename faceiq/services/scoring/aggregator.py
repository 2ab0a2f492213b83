"""Combine sub-scores into the overall and potential scores."""
import math
from typing import Tuple

from faceiq.domain.entities.face import METRIC_MAX, METRIC_MIN, FaceMetrics
from faceiq.domain.interfaces.random_source import RandomSource
from faceiq.domain.value_objects.weights import DEFAULT_WEIGHTS, ScoringWeights

POTENTIAL_FLOOR = 5.0
POTENTIAL_SPREAD = 10.0


def _clamp(value: float) -> float:
    if math.isnan(value):
        return METRIC_MIN
    return min(METRIC_MAX, max(METRIC_MIN, value))


def aggregate(
    metrics: FaceMetrics,
    base_attractiveness: float,
    rng: RandomSource,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Tuple[float, float]:
    """Compute ``(overall, potential)`` from normalized metrics.

    Args:
        metrics: Normalized sub-scores
        base_attractiveness: Detector beauty figure on a 0-100 scale
        rng: Source of the random growth added to the potential score
        weights: Weighting policy for the overall score

    Returns:
        Tuple of clamped overall and potential scores, with potential >= overall
    """
    overall = _clamp(
        _clamp(base_attractiveness) * weights.beauty
        + metrics.skin_quality * weights.skin_quality
        + metrics.symmetry * weights.symmetry
        + metrics.proportions * weights.proportions
        + metrics.jawline * weights.jawline
        + metrics.eye_area * weights.eye_area
    )

    growth = POTENTIAL_FLOOR + rng.next() * POTENTIAL_SPREAD
    potential = _clamp(overall + growth)
    # Holds even for a misbehaving random source (negative or NaN draws)
    potential = max(potential, overall)
    return overall, potential
