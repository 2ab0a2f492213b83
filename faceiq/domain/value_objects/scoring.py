"""Face scoring value objects."""
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from faceiq.domain.entities.face import FaceAttributes, FaceMetrics

DEFAULT_ERROR_MESSAGE = "Analysis failed. Please try a clearer photo with good lighting."


class Tier(str, Enum):
    """Lookism tier labels, lowest to highest, plus the error marker."""
    SUB_5 = "Sub 5"
    LOW_TIER_NORMIE = "Low Tier Normie"
    MID_TIER_NORMIE = "Mid Tier Normie"
    HIGH_TIER_NORMIE = "High Tier Normie"
    CHAD_LITE = "Chad Lite"
    CHAD = "Chad"
    TRUE_ADAM = "True Adam"
    ERROR = "Error"

    @property
    def rank(self) -> int:
        """Position in the tier ladder; the error marker ranks below everything."""
        if self is Tier.ERROR:
            return -1
        return list(Tier).index(self)


class Priority(str, Enum):
    """Urgency of an improvement suggestion."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Improvement(_CamelModel):
    """A single prioritized improvement suggestion."""
    area: str = Field(..., description="Facial area the advice targets")
    advice: str = Field(..., description="Actionable advice")
    priority: Priority = Field(..., description="Urgency derived from the area's score")


class Scores(_CamelModel):
    """Rounded 0-100 score bundle shown to the user."""
    overall: int = Field(..., ge=0, le=100)
    potential: int = Field(..., ge=0, le=100)
    masculinity: int = Field(..., ge=0, le=100)
    jawline: int = Field(..., ge=0, le=100)
    skin_quality: int = Field(..., ge=0, le=100)
    cheekbones: int = Field(..., ge=0, le=100)
    eye_area: int = Field(..., ge=0, le=100)

    @classmethod
    def zero(cls) -> "Scores":
        return cls(
            overall=0, potential=0, masculinity=0, jawline=0,
            skin_quality=0, cheekbones=0, eye_area=0,
        )


class AnalysisResult(_CamelModel):
    """Result of analyzing a single face.

    ``metrics`` and ``attributes`` are kept for comparisons and are never serialized.
    """
    scores: Scores = Field(..., description="Rounded score bundle")
    tier: Tier = Field(..., description="Tier determined by the overall score")
    feedback: List[str] = Field(default_factory=list, description="Human-readable commentary")
    improvements: List[Improvement] = Field(default_factory=list, description="Worst-first improvement plan")
    metrics: Optional[FaceMetrics] = Field(None, exclude=True)
    attributes: Optional[FaceAttributes] = Field(None, exclude=True)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "AnalysisResult":
        """Build the error sentinel returned in place of a failed analysis.

        Args:
            message: Human-readable failure description

        Returns:
            AnalysisResult with zeroed scores and the ``Error`` tier
        """
        return cls(
            scores=Scores.zero(),
            tier=Tier.ERROR,
            feedback=[message or DEFAULT_ERROR_MESSAGE],
            improvements=[],
        )

    @property
    def is_error(self) -> bool:
        return self.tier is Tier.ERROR


class MogResult(_CamelModel):
    """Outcome of comparing two analyzed faces."""
    winner_index: Literal[0, 1] = Field(..., description="0 for the first face, 1 for the second")
    winner_title: str = Field(..., description="Title bucketed by the score margin")
    diff_score: int = Field(..., ge=0, description="Rounded absolute overall score difference")
    reason: str = Field(..., description="Feature that decided the comparison")
    roast: str = Field(..., description="One-liner aimed at the loser")

    @classmethod
    def error(cls) -> "MogResult":
        """Build the error sentinel returned when either side failed."""
        return cls(
            winner_index=0,
            winner_title="ERROR",
            diff_score=0,
            reason="Could not compare faces",
            roast="Try again with clearer photos.",
        )

    @property
    def is_error(self) -> bool:
        return self.winner_title == "ERROR"
