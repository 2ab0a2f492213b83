"""Configuration settings for the FaceiQ scoring service."""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from faceiq.domain.value_objects.weights import ScoringWeights


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    Attributes:
        FACEPP_API_KEY: API key for the Face++ detect endpoint
        BEAUTY_SCALE: Multiplier applied to the raw Face++ beauty score
        RANDOM_SEED: Optional seed for the potential/roast random source
        SCORING_WEIGHTS: Weights used to combine sub-scores into the overall score
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",  # No prefix for environment variables
        env_nested_delimiter="__"  # e.g. SCORING_WEIGHTS__jawline
    )

    # Core Settings
    PROJECT_NAME: str = "FaceiQ Scoring Service"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        """Get list of allowed origins."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Face++ Settings
    FACEPP_API_URL: str = "https://api-us.faceplusplus.com/facepp/v3/detect"
    FACEPP_API_KEY: str = ""
    FACEPP_API_SECRET: str = ""
    FACEPP_TIMEOUT: float = 15.0
    MAX_IMAGE_BYTES: int = 2 * 1024 * 1024  # Face++ rejects base64 payloads above 2MB

    # Scoring Settings
    BEAUTY_SCALE: float = 1.1  # Face++ beauty scores cluster in the 40-70 range
    RANDOM_SEED: Optional[int] = None
    # Overrides replace the whole policy and must still sum to 1: either
    # SCORING_WEIGHTS='{"beauty": 0.3, ...}' or all six SCORING_WEIGHTS__<field> variables
    SCORING_WEIGHTS: ScoringWeights = ScoringWeights()

    # Coach Settings
    OPENAI_API_KEY: str = ""
    COACH_MODEL: str = "gpt-4o-mini"
    COACH_TIMEOUT: float = 30.0

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

settings = Settings()
