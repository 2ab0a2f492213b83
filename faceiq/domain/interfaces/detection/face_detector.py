"""Face detector interface."""
from abc import ABC, abstractmethod

from ...entities.face import DetectedFace


class FaceDetector(ABC):
    """Interface for external face detection/attribute services."""

    @abstractmethod
    async def detect_face(self, image_bytes: bytes) -> DetectedFace:
        """
        Detect the most prominent face in an image and return its attributes.

        Args:
            image_bytes: Raw image data

        Returns:
            DetectedFace with attributes, landmarks and bounding box

        Raises:
            InvalidImageError: If the image payload is empty or malformed
            ImageTooLargeError: If the image exceeds the detector's size limit
            NoFaceDetectedError: If the detector found no face
            DetectorError: If the detector call failed
        """
        pass

    async def close(self) -> None:
        """Release any transport resources held by the detector."""
        return None
