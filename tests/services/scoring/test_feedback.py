"""Tests for analysis feedback lines."""
import math

from faceiq.domain.entities.face import FaceAttributes
from faceiq.services.scoring.feedback import generate_feedback


def attributes(age=30, **skin) -> FaceAttributes:
    skinstatus = {"health": 70, "acne": 0, "dark_circle": 0, "stain": 0}
    skinstatus.update(skin)
    return FaceAttributes(gender="Male", age=age, skinstatus=skinstatus)


def test_always_three_lines():
    for overall in (10, 65, 92):
        assert len(generate_feedback(attributes(), overall)) == 3


def test_overall_assessment_buckets():
    assert generate_feedback(attributes(), 85)[0].startswith("Strong facial aesthetics")
    assert generate_feedback(attributes(), 60)[0].startswith("Above average")
    assert generate_feedback(attributes(), 59)[0].startswith("Below average")


def test_skin_and_age_remarks():
    lines = generate_feedback(attributes(age=21, health=42), 55)
    assert "Skin health is a weak point (42/100)" in lines[1]
    assert "still developing" in lines[2]


def test_padding_prefers_specific_skin_issues():
    lines = generate_feedback(attributes(acne=45, dark_circle=60), 70)
    assert lines[1].startswith("Acne detected (severity: 45)")
    assert lines[2].startswith("Dark circles are noticeable (60/100)")


def test_infinite_readings_are_clamped_for_display():
    lines = generate_feedback(attributes(age=30, health=math.inf, acne=math.inf), 70)

    assert "Excellent skin quality (100/100)" in lines[1]
    assert "Acne detected (severity: 100)" in lines[2]


def test_nan_health_is_not_reported():
    lines = generate_feedback(attributes(age=30, health=math.nan), 70)
    assert not any("Skin" in line or "skin quality" in line for line in lines)
    assert len(lines) == 3
