"""Improvement planning: surface the weakest areas, worst first."""
from typing import List, NamedTuple

from faceiq.domain.entities.face import FaceMetrics
from faceiq.domain.value_objects.scoring import Improvement, Priority

NEEDS_IMPROVEMENT_THRESHOLD = 75.0
HIGH_PRIORITY_BELOW = 60.0
MEDIUM_PRIORITY_BELOW = 75.0
MIN_IMPROVEMENTS = 2
MAX_IMPROVEMENTS = 4


class _Candidate(NamedTuple):
    area: str
    score: float
    advice: str


def priority_for(score: float) -> Priority:
    """Priority derived from an area's own score."""
    if score < HIGH_PRIORITY_BELOW:
        return Priority.HIGH
    if score < MEDIUM_PRIORITY_BELOW:
        return Priority.MEDIUM
    return Priority.LOW


def _candidates(metrics: FaceMetrics) -> List[_Candidate]:
    return [
        _Candidate(
            "Skin Quality",
            metrics.skin_quality,
            "Start a consistent routine: cleanser, tretinoin, moisturizer, SPF. "
            "Consider a dermatologist for active acne or pigmentation.",
        ),
        _Candidate(
            "Jawline",
            metrics.jawline,
            "Lower body fat to 10-15% and keep proper tongue posture to sharpen jaw definition.",
        ),
        _Candidate(
            "Eye Area",
            metrics.eye_area,
            "Prioritize 7-9 hours of sleep, use a caffeine eye serum and shape your brows.",
        ),
        _Candidate(
            "Cheekbones",
            metrics.cheekbones,
            "A leaner face reveals cheekbone structure; pair fat loss with a haircut that adds width up top.",
        ),
        _Candidate(
            "Facial Symmetry",
            metrics.symmetry,
            "Chew evenly on both sides, avoid sleeping on one side and keep a neutral head posture.",
        ),
        _Candidate(
            "Facial Proportions",
            metrics.proportions,
            "Use hairstyle and facial hair to rebalance your facial thirds.",
        ),
    ]


def plan(metrics: FaceMetrics) -> List[Improvement]:
    """Build 2-4 improvement suggestions ordered from weakest to strongest area.

    Every area below the needs-improvement threshold is included, bounded to
    [2, 4] entries, so a strong face still gets its two weakest areas.
    """
    ranked = sorted(_candidates(metrics), key=lambda c: c.score)
    weak = sum(1 for c in ranked if c.score < NEEDS_IMPROVEMENT_THRESHOLD)
    count = min(MAX_IMPROVEMENTS, max(MIN_IMPROVEMENTS, weak))

    return [
        Improvement(area=c.area, advice=c.advice, priority=priority_for(c.score))
        for c in ranked[:count]
    ]
