"""Tests for environment-driven settings."""
import json

import pytest
from pydantic import ValidationError

from faceiq.core.config import Settings
from faceiq.domain.value_objects.weights import DEFAULT_WEIGHTS

FULL_POLICY = {
    "beauty": 0.25,
    "skin_quality": 0.15,
    "symmetry": 0.15,
    "proportions": 0.15,
    "jawline": 0.15,
    "eye_area": 0.15,
}


def load_settings() -> Settings:
    return Settings(_env_file=None)


class TestScoringWeightSettings:
    """Overriding the overall score weighting from the environment."""

    def test_defaults(self):
        assert load_settings().SCORING_WEIGHTS == DEFAULT_WEIGHTS

    def test_json_override(self, monkeypatch):
        monkeypatch.setenv("SCORING_WEIGHTS", json.dumps(FULL_POLICY))

        weights = load_settings().SCORING_WEIGHTS
        assert weights.beauty == pytest.approx(0.25)
        assert weights.proportions == pytest.approx(0.15)

    def test_every_nested_field(self, monkeypatch):
        for field, value in FULL_POLICY.items():
            monkeypatch.setenv(f"SCORING_WEIGHTS__{field}", str(value))

        assert load_settings().SCORING_WEIGHTS.beauty == pytest.approx(0.25)

    def test_partial_override_is_rejected(self, monkeypatch):
        monkeypatch.setenv("SCORING_WEIGHTS__jawline", "0.2")

        with pytest.raises(ValidationError, match="sum to 1.0"):
            load_settings()


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    assert load_settings().cors_origins == ["http://a.test", "http://b.test"]
