"""Value objects package."""
from .coach import ChatMessage, ChatRole
from .scoring import AnalysisResult, Improvement, MogResult, Priority, Scores, Tier
from .weights import DEFAULT_WEIGHTS, ScoringWeights

__all__ = [
    "AnalysisResult",
    "ChatMessage",
    "ChatRole",
    "Improvement",
    "MogResult",
    "Priority",
    "Scores",
    "Tier",
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
]
