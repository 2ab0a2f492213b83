"""Face detector implementations."""
from .facepp import FacePlusPlusDetector

__all__ = ["FacePlusPlusDetector"]
