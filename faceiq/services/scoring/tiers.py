"""Tier classification from the overall score."""
from typing import List, Tuple

from faceiq.domain.value_objects.scoring import Tier

# Ascending thresholds; the last one not exceeding the score wins
TIER_THRESHOLDS: List[Tuple[float, Tier]] = [
    (0, Tier.SUB_5),
    (50, Tier.LOW_TIER_NORMIE),
    (60, Tier.MID_TIER_NORMIE),
    (70, Tier.HIGH_TIER_NORMIE),
    (80, Tier.CHAD_LITE),
    (90, Tier.CHAD),
    (95, Tier.TRUE_ADAM),
]


def classify(overall: float) -> Tier:
    """Map any real score to a tier; scores below 0 (or NaN) are Sub 5."""
    tier = TIER_THRESHOLDS[0][1]
    for minimum, label in TIER_THRESHOLDS:
        if overall >= minimum:
            tier = label
    return tier
