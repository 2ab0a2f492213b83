"""Services package."""
from .coach import CoachService, OpenAIChatModel
from .detection.facepp import FacePlusPlusDetector
from .face_analysis import FaceAnalysisService
from .random_source import SeededRandomSource
from .scoring.engine import FaceScoringEngine

__all__ = [
    "CoachService",
    "FaceAnalysisService",
    "FacePlusPlusDetector",
    "FaceScoringEngine",
    "OpenAIChatModel",
    "SeededRandomSource",
]
