"""Core face domain entities."""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

METRIC_MIN = 0.0
METRIC_MAX = 100.0


def _unwrap_value(v: Any) -> Any:
    """Face++ wraps scalar attributes as ``{"value": ...}``."""
    if isinstance(v, dict) and "value" in v:
        return v["value"]
    return v


class Gender(str, Enum):
    """Presented gender reported by the detector."""
    MALE = "Male"
    FEMALE = "Female"


class BeautyScore(BaseModel):
    """Detector attractiveness estimates, one per gender perspective."""
    male_score: float = Field(50.0, description="Beauty score as rated from a male perspective model")
    female_score: float = Field(50.0, description="Beauty score as rated from a female perspective model")


class SkinStatus(BaseModel):
    """Detector skin readings (0-100, higher health is better, higher others are worse)."""
    health: float = Field(50.0, description="Overall skin health")
    stain: float = Field(0.0, description="Stain/hyperpigmentation severity")
    acne: float = Field(0.0, description="Acne severity")
    dark_circle: float = Field(0.0, description="Dark circle severity")


class FaceAttributes(BaseModel):
    """Facial attributes returned by the external detector."""
    gender: Gender = Field(..., description="Detected gender")
    age: float = Field(25.0, description="Estimated age in years")
    beauty: BeautyScore = Field(default_factory=BeautyScore, description="Beauty estimates")
    skinstatus: SkinStatus = Field(default_factory=SkinStatus, description="Skin readings")

    @field_validator("gender", "age", mode="before")
    @classmethod
    def unwrap_detector_value(cls, v: Any) -> Any:
        """Accept both flat values and Face++ ``{"value": ...}`` wrappers."""
        return _unwrap_value(v)

    @property
    def beauty_score(self) -> float:
        """Beauty score matching the detected gender."""
        if self.gender == Gender.MALE:
            return self.beauty.male_score
        return self.beauty.female_score


class LandmarkPoint(BaseModel):
    """A named 2D facial landmark in image pixel coordinates."""
    x: float
    y: float


class FaceRectangle(BaseModel):
    """Face bounding box in image pixel coordinates."""
    top: float = Field(0.0, description="Top coordinate of the bounding box")
    left: float = Field(0.0, description="Left coordinate of the bounding box")
    width: float = Field(..., description="Width of the bounding box")
    height: float = Field(..., description="Height of the bounding box")


class DetectedFace(BaseModel):
    """A single face as returned by the detector: attributes, landmarks and box."""
    attributes: FaceAttributes = Field(..., description="Detected facial attributes")
    landmarks: Dict[str, LandmarkPoint] = Field(default_factory=dict, description="Named landmark points")
    face_rectangle: FaceRectangle = Field(..., description="Face bounding box")
    face_token: Optional[str] = Field(None, description="Detector-assigned face identifier")


class FaceMetrics(BaseModel):
    """Normalized 0-100 sub-scores derived from a detector payload."""
    skin_quality: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    symmetry: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    proportions: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    jawline: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    cheekbones: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    eye_area: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)
    masculinity: float = Field(..., ge=METRIC_MIN, le=METRIC_MAX)

    model_config = ConfigDict(frozen=True)
