"""Weighting policy for the overall score."""
import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoringWeights(BaseModel):
    """Relative contribution of each input to the overall score.

    Weights must sum to 1 and the structural metrics (jawline, proportions,
    symmetry) must weigh at least as much as skin and eye area together.
    """
    beauty: float = Field(0.30, ge=0.0, le=1.0, description="Weight of the base attractiveness score")
    skin_quality: float = Field(0.15, ge=0.0, le=1.0, description="Weight of skin quality")
    symmetry: float = Field(0.15, ge=0.0, le=1.0, description="Weight of bilateral symmetry")
    proportions: float = Field(0.10, ge=0.0, le=1.0, description="Weight of facial thirds/fifths")
    jawline: float = Field(0.15, ge=0.0, le=1.0, description="Weight of jawline definition")
    eye_area: float = Field(0.15, ge=0.0, le=1.0, description="Weight of the eye area")

    model_config = ConfigDict(frozen=True)

    @property
    def structural(self) -> float:
        return self.jawline + self.proportions + self.symmetry

    @model_validator(mode="after")
    def check_policy(self) -> "ScoringWeights":
        total = (
            self.beauty + self.skin_quality + self.symmetry
            + self.proportions + self.jawline + self.eye_area
        )
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.4f}")
        if self.structural + 1e-9 < self.skin_quality + self.eye_area:
            raise ValueError(
                "Structural weights (jawline, proportions, symmetry) must be at least "
                "the skin quality and eye area weights combined"
            )
        return self


DEFAULT_WEIGHTS = ScoringWeights()
