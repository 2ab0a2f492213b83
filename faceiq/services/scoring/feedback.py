"""Human-readable commentary for an analysis."""
from typing import List

from faceiq.domain.entities.face import METRIC_MAX, METRIC_MIN, FaceAttributes

FEEDBACK_LINES = 3


def _reading(value: float) -> int:
    return round(min(METRIC_MAX, max(METRIC_MIN, value)))


def generate_feedback(attributes: FaceAttributes, overall: float) -> List[str]:
    """Return exactly three feedback lines for the given attributes and score."""
    feedback: List[str] = []
    skin = attributes.skinstatus

    if overall >= 80:
        feedback.append("Strong facial aesthetics. You're in the top tier of attractiveness.")
    elif overall >= 60:
        feedback.append("Above average features with clear room for optimization.")
    else:
        feedback.append("Below average baseline, but significant improvement potential exists.")

    if skin.health < 50:
        feedback.append(
            f"Skin health is a weak point ({_reading(skin.health)}/100). "
            "Acne, texture, or dark circles are holding you back."
        )
    elif skin.health >= 80:
        feedback.append(f"Excellent skin quality ({_reading(skin.health)}/100). This is a major positive.")

    if attributes.age < 25:
        feedback.append(
            "Your features are still developing. Collagen and bone structure will mature over the next few years."
        )
    elif attributes.age > 35:
        feedback.append("Focus on skin maintenance and anti-aging protocols to preserve your baseline.")

    if len(feedback) < FEEDBACK_LINES and skin.acne > 30:
        feedback.append(
            f"Acne detected (severity: {_reading(skin.acne)}). Consider retinoids or professional treatment."
        )
    if len(feedback) < FEEDBACK_LINES and skin.dark_circle > 40:
        feedback.append(
            f"Dark circles are noticeable ({_reading(skin.dark_circle)}/100). "
            "Sleep optimization and eye cream recommended."
        )
    while len(feedback) < FEEDBACK_LINES:
        feedback.append("Maintain current grooming standards and focus on fitness for further gains.")

    return feedback[:FEEDBACK_LINES]
