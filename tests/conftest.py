"""Shared fixtures for the FaceiQ test suite."""
from typing import Dict, Iterable, List, Optional

import pytest

from faceiq.core.exceptions import NoFaceDetectedError
from faceiq.domain.entities.face import (
    DetectedFace,
    FaceAttributes,
    FaceMetrics,
    FaceRectangle,
    LandmarkPoint,
)
from faceiq.domain.interfaces.coach.chat_model import ChatModel
from faceiq.domain.interfaces.detection.face_detector import FaceDetector
from faceiq.domain.value_objects.scoring import AnalysisResult, Scores
from faceiq.services.coach.coach import CoachService
from faceiq.services.face_analysis import FaceAnalysisService
from faceiq.services.scoring.engine import FaceScoringEngine
from faceiq.services.scoring.tiers import classify


class ScriptedRandom:
    """RandomSource returning a fixed, cycling sequence of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = list(values)
        self.calls = 0

    def next(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FakeDetector(FaceDetector):
    """Detector returning canned faces keyed by image bytes."""

    def __init__(self, faces: Optional[Dict[bytes, object]] = None) -> None:
        self.faces = faces or {}
        self.calls: List[bytes] = []
        self.closed = False

    async def detect_face(self, image_bytes: bytes) -> DetectedFace:
        self.calls.append(image_bytes)
        outcome = self.faces.get(image_bytes)
        if outcome is None:
            raise NoFaceDetectedError("No face detected in image")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


def ideal_landmarks() -> Dict[str, LandmarkPoint]:
    """Symmetric landmarks on an 80x100 face with ideal thirds, jaw and eyes.

    Cheekbones are deliberately narrow (0.55 of face width) so they are the weakest area.
    """
    points = {
        "nose_tip": (40, 50),
        "contour_chin": (40, 83),
        "left_eye_center": (28, 35),
        "right_eye_center": (52, 35),
        "mouth_left_corner": (32, 68),
        "mouth_right_corner": (48, 68),
        "contour_left7": (15, 75),
        "contour_right7": (65, 75),
        "contour_left2": (18, 45),
        "contour_right2": (62, 45),
        "left_eye_left_corner": (22.5, 35),
        "left_eye_right_corner": (33.5, 35),
        "left_eye_top": (28, 33),
        "left_eye_bottom": (28, 37),
        "right_eye_left_corner": (46.5, 35),
        "right_eye_right_corner": (57.5, 35),
        "right_eye_top": (52, 33),
        "right_eye_bottom": (52, 37),
    }
    return {name: LandmarkPoint(x=x, y=y) for name, (x, y) in points.items()}


def make_metrics(**overrides: float) -> FaceMetrics:
    values = dict(
        skin_quality=80.0,
        symmetry=90.0,
        proportions=90.0,
        jawline=80.0,
        cheekbones=80.0,
        eye_area=80.0,
        masculinity=80.0,
    )
    values.update(overrides)
    return FaceMetrics(**values)


def make_result(overall: int, attributes: Optional[FaceAttributes] = None, **scores: int) -> AnalysisResult:
    """AnalysisResult with the given overall score and sub-scores defaulting to 70."""
    values = dict(
        overall=overall,
        potential=min(100, overall + 10),
        masculinity=70,
        jawline=70,
        skin_quality=70,
        cheekbones=70,
        eye_area=70,
    )
    values.update(scores)
    return AnalysisResult(
        scores=Scores(**values),
        tier=classify(overall),
        feedback=["ok"],
        improvements=[],
        attributes=attributes,
    )


@pytest.fixture
def male_attributes() -> FaceAttributes:
    return FaceAttributes(
        gender="Male",
        age=28,
        beauty={"male_score": 80, "female_score": 75},
        skinstatus={"health": 90, "acne": 5, "dark_circle": 10, "stain": 5},
    )


@pytest.fixture
def face_rectangle() -> FaceRectangle:
    return FaceRectangle(top=0, left=0, width=80, height=100)


@pytest.fixture
def ideal_face(male_attributes, face_rectangle) -> DetectedFace:
    return DetectedFace(
        attributes=male_attributes,
        landmarks=ideal_landmarks(),
        face_rectangle=face_rectangle,
        face_token="ideal",
    )


@pytest.fixture
def weak_face(face_rectangle) -> DetectedFace:
    return DetectedFace(
        attributes=FaceAttributes(
            gender="Male",
            age=22,
            beauty={"male_score": 35, "female_score": 30},
            skinstatus={"health": 40, "acne": 60, "dark_circle": 55, "stain": 30},
        ),
        landmarks={},
        face_rectangle=face_rectangle,
    )


@pytest.fixture
def engine() -> FaceScoringEngine:
    return FaceScoringEngine(rng=ScriptedRandom([0.5]))


@pytest.fixture
def fake_detector(ideal_face, weak_face) -> FakeDetector:
    return FakeDetector({b"ideal": ideal_face, b"weak": weak_face})


@pytest.fixture
def analysis_service(fake_detector, engine) -> FaceAnalysisService:
    return FaceAnalysisService(detector=fake_detector, engine=engine)


class FakeChatModel(ChatModel):
    """Chat model returning a canned reply (or raising) and recording prompts."""

    def __init__(self, reply: object = "Mew, lift, sleep.") -> None:
        self.reply = reply
        self.prompts: List[str] = []
        self.closed = False

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def chat_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def coach_service(chat_model) -> CoachService:
    return CoachService(model=chat_model)
