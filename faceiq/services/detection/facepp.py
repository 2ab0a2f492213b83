"""
Face++ implementation of the face detector interface.

Posts the image to the Face++ v3 ``detect`` endpoint and converts the first
face of the response into a ``DetectedFace``. The HTTP call is blocking
(``requests``) and runs in a worker thread so the event loop stays free.

Example:
    ```python
    detector = FacePlusPlusDetector()
    face = await detector.detect_face(image_bytes)
    await detector.close()
    ```
"""
import asyncio
import base64
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from faceiq.core.config import settings
from faceiq.core.exceptions import (
    DetectorError,
    ImageTooLargeError,
    InvalidImageError,
    NoFaceDetectedError,
)
from faceiq.core.logging import get_logger
from faceiq.domain.entities.face import DetectedFace
from faceiq.domain.interfaces.detection.face_detector import FaceDetector

logger = get_logger(__name__)

RETURN_ATTRIBUTES = "beauty,age,gender,skinstatus,facequality,blur,eyestatus,headpose"


def parse_detect_response(payload: Dict[str, Any]) -> DetectedFace:
    """Convert a Face++ detect response into the first detected face.

    Args:
        payload: Decoded JSON body of the detect call

    Returns:
        DetectedFace for the first face in the response

    Raises:
        DetectorError: If the response carries an error or malformed face data
        NoFaceDetectedError: If the response contains no faces
    """
    if payload.get("error_message"):
        raise DetectorError(
            f"Face++ error: {payload['error_message']}",
            details={"request_id": payload.get("request_id")},
        )

    faces = payload.get("faces") or []
    if not faces:
        raise NoFaceDetectedError("No face detected in image")

    face = faces[0]
    try:
        return DetectedFace(
            attributes=face.get("attributes") or {},
            landmarks=face.get("landmark") or {},
            face_rectangle=face.get("face_rectangle") or {},
            face_token=face.get("face_token"),
        )
    except ValidationError as e:
        raise DetectorError(f"Unusable face payload: {e.error_count()} validation errors") from e


class FacePlusPlusDetector(FaceDetector):
    """Face detector backed by the Face++ HTTP API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the detector with Face++ credentials.

        Args:
            api_key: Face++ API key (defaults to settings)
            api_secret: Face++ API secret (defaults to settings)
            api_url: Detect endpoint URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            session: Optional HTTP session. Sessions are not thread-safe, so without one
                every request is sent on its own connection (concurrent detections
                run on separate worker threads)
        """
        self.api_key = api_key or settings.FACEPP_API_KEY
        self.api_secret = api_secret or settings.FACEPP_API_SECRET
        self.api_url = api_url or settings.FACEPP_API_URL
        self.timeout = timeout or settings.FACEPP_TIMEOUT
        self.session = session

    def _post(self, image_base64: str) -> Dict[str, Any]:
        data = {
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "image_base64": image_base64,
            "return_landmark": "1",
            "return_attributes": RETURN_ATTRIBUTES,
        }
        try:
            post = self.session.post if self.session is not None else requests.post
            response = post(self.api_url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise DetectorError(f"Face++ request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.ok:
            raise DetectorError(
                f"Face++ API error: {response.status_code}",
                details={
                    "status_code": response.status_code,
                    "error_message": payload.get("error_message"),
                },
            )
        return payload

    async def detect_face(self, image_bytes: bytes) -> DetectedFace:
        """Detect the first face in the image via Face++."""
        if not image_bytes:
            raise InvalidImageError("Empty image payload")
        if len(image_bytes) > settings.MAX_IMAGE_BYTES:
            raise ImageTooLargeError(
                "Image exceeds the detector size limit",
                details={"size": len(image_bytes), "limit": settings.MAX_IMAGE_BYTES},
            )

        image_base64 = base64.b64encode(image_bytes).decode("ascii")
        logger.debug("Calling Face++ detect", image_size=len(image_bytes))
        payload = await asyncio.to_thread(self._post, image_base64)

        face = parse_detect_response(payload)
        logger.info(
            "Face++ detection complete",
            face_num=payload.get("face_num"),
            landmarks=len(face.landmarks),
        )
        return face

    async def close(self) -> None:
        if self.session is not None:
            self.session.close()
