"""Custom exceptions for the FaceiQ scoring service."""
from typing import Optional


class FaceIQError(Exception):
    """Base exception for face analysis operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize face analysis error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.details = details or {}


class InvalidImageError(FaceIQError):
    """Raised when the provided image is invalid or cannot be processed."""
    pass


class ImageTooLargeError(FaceIQError):
    """Raised when the image payload exceeds the detector's size limit."""
    pass


class NoFaceDetectedError(FaceIQError):
    """Raised when no face is detected in the image."""
    pass


class DetectorError(FaceIQError):
    """Raised when the external face detector fails or returns an unusable payload."""
    pass


class ServiceNotInitializedError(FaceIQError):
    """Raised when a service is requested before the container is initialized."""
    pass


class CoachError(FaceIQError):
    """Raised when the coach chat model is unavailable or its call fails."""
    pass
