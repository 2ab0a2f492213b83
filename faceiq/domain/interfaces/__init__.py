"""Service interfaces package."""
from .coach import ChatModel
from .detection import FaceDetector
from .random_source import RandomSource

__all__ = ["ChatModel", "FaceDetector", "RandomSource"]
