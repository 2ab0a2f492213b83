"""
Prompt assembly for the aesthetics coach.

The prompt is plain text in four blocks: persona, user context built from the
latest analysis, the conversation so far, and the new message followed by an
open ``Model:`` turn for the model to complete.
"""
from typing import Iterable, Optional

from faceiq.domain.value_objects.coach import ChatMessage
from faceiq.domain.value_objects.scoring import AnalysisResult

COACH_PERSONA = (
    "You are Coach Chad, a blunt aesthetics coach helping the user reach their facial potential. "
    "Reply in under 50 words with concrete, actionable steps. "
    "Looksmaxxing vocabulary (canthal tilt, forward growth, mewing) is fine. Skip pleasantries."
)
NOT_ANALYZED_CONTEXT = "User has not been analyzed yet. Ask them to scan their face."


def build_context(analysis: Optional[AnalysisResult]) -> str:
    """Describe the user's latest analysis; failed analyses count as none."""
    if analysis is None or analysis.is_error:
        return NOT_ANALYZED_CONTEXT
    weak_points = ", ".join(item.area for item in analysis.improvements) or "none flagged"
    return (
        f"User Context: Overall Score {analysis.scores.overall}, "
        f"Tier: {analysis.tier.value}. Weak points: {weak_points}."
    )


def format_history(history: Iterable[ChatMessage]) -> str:
    return "\n".join(f"{message.role.value}: {message.text}" for message in history)


def build_prompt(
    message: str,
    history: Iterable[ChatMessage] = (),
    analysis: Optional[AnalysisResult] = None,
) -> str:
    return (
        f"System: {COACH_PERSONA}\n\n"
        f"{build_context(analysis)}\n\n"
        f"Current Conversation:\n{format_history(history)}\n\n"
        f"User: {message}\n"
        "Model:"
    )
