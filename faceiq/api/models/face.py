"""API specific face analysis models."""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from faceiq.domain.entities.face import FaceAttributes, FaceRectangle, LandmarkPoint
from faceiq.domain.value_objects.coach import ChatMessage
from faceiq.domain.value_objects.scoring import AnalysisResult, Improvement, MogResult, Scores

# base64 of a 2MB image plus a data URL prefix
MAX_BASE64_LENGTH = 3 * 1024 * 1024


class ApiModel(BaseModel):
    """Base model using the camelCase JSON contract of the mobile client."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(ApiModel):
    """Request model for the /analyze endpoint."""
    image_base64: str = Field(
        ...,
        description="Base64 encoded JPEG or PNG, optionally as a data URL",
        min_length=1, max_length=MAX_BASE64_LENGTH
    )


class CompareRequest(ApiModel):
    """Request model for the /compare endpoint."""
    image_base64_a: str = Field(
        ...,
        description="Base64 encoded first (left) image",
        min_length=1, max_length=MAX_BASE64_LENGTH
    )
    image_base64_b: str = Field(
        ...,
        description="Base64 encoded second (right) image",
        min_length=1, max_length=MAX_BASE64_LENGTH
    )


class ScoreRequest(ApiModel):
    """Request model for the /score endpoint: an already-detected face payload."""
    attributes: FaceAttributes = Field(..., description="Detector attributes")
    landmarks: Dict[str, LandmarkPoint] = Field(
        default_factory=dict,
        description="Named landmark points; missing points degrade to neutral scores"
    )
    face_rectangle: FaceRectangle = Field(..., description="Face bounding box")


class AnalysisResponse(ApiModel):
    """Response model for single-face analysis."""
    scores: Scores = Field(..., description="Rounded 0-100 scores")
    tier: str = Field(..., description="Tier label, or 'Error' when analysis failed")
    feedback: List[str] = Field(..., description="Human-readable commentary")
    improvements: List[Improvement] = Field(..., description="Worst-first improvement plan")

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalysisResponse":
        """Convert a domain AnalysisResult to the API response model."""
        return cls(
            scores=result.scores,
            tier=result.tier.value,
            feedback=list(result.feedback),
            improvements=list(result.improvements),
        )


class ComparisonResponse(ApiModel):
    """Response model for the /compare endpoint."""
    winner_index: Literal[0, 1] = Field(..., description="0 for the first image, 1 for the second")
    winner_title: str = Field(..., description="Title bucketed by the score margin")
    diff_score: int = Field(..., description="Rounded absolute difference of overall scores", ge=0)
    reason: str = Field(..., description="Feature that decided the comparison")
    roast: str = Field(..., description="One-liner aimed at the loser")

    @classmethod
    def from_domain(cls, result: MogResult) -> "ComparisonResponse":
        """Convert a domain MogResult to the API response model."""
        return cls(
            winner_index=result.winner_index,
            winner_title=result.winner_title,
            diff_score=result.diff_score,
            reason=result.reason,
            roast=result.roast,
        )


class CoachRequest(ApiModel):
    """Request model for the /coach endpoint."""
    message: str = Field(..., description="New user message", min_length=1, max_length=2000)
    history: List[ChatMessage] = Field(
        default_factory=list,
        description="Earlier conversation turns, oldest first"
    )
    analysis: Optional[AnalysisResult] = Field(
        None,
        description="The user's latest analysis result, as returned by /analyze"
    )


class CoachResponse(ApiModel):
    """Response model for the /coach endpoint."""
    reply: str = Field(..., description="Coach reply")
