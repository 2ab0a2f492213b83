"""Tests for the Face++ detector client."""
import asyncio
import threading

import pytest
import requests

from faceiq.core.exceptions import (
    DetectorError,
    ImageTooLargeError,
    InvalidImageError,
    NoFaceDetectedError,
)
from faceiq.domain.entities.face import Gender
from faceiq.services.detection.facepp import FacePlusPlusDetector, parse_detect_response

DETECT_RESPONSE = {
    "request_id": "1470472868,dacf2ff1-ea45-4842-9c07-6e8418cea78b",
    "image_id": "rG9+T8hXQ7Kr0yW0FZXqLA==",
    "face_num": 1,
    "time_used": 752,
    "faces": [
        {
            "face_token": "ed319e807e039ae669a4d1af0922a0c8",
            "face_rectangle": {"top": 120, "left": 90, "width": 160, "height": 200},
            "landmark": {
                "nose_tip": {"x": 170, "y": 220},
                "contour_chin": {"x": 170, "y": 286},
                "left_eye_center": {"x": 146, "y": 190},
                "right_eye_center": {"x": 194, "y": 190},
            },
            "attributes": {
                "gender": {"value": "Male"},
                "age": {"value": 27},
                "beauty": {"male_score": 71.3, "female_score": 68.2},
                "skinstatus": {"health": 75.1, "stain": 12.4, "acne": 3.2, "dark_circle": 20.5},
                "headpose": {"pitch_angle": 1.2, "roll_angle": 0.3, "yaw_angle": -2.1},
            },
        }
    ],
}


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def post(self, url, data=None, timeout=None):
        self.requests.append({"url": url, "data": data, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def make_detector(session):
    return FacePlusPlusDetector(
        api_key="key",
        api_secret="secret",
        api_url="https://facepp.test/detect",
        timeout=3,
        session=session,
    )


class TestParseDetectResponse:
    """Conversion of Face++ JSON into domain faces."""

    def test_parses_first_face(self):
        face = parse_detect_response(DETECT_RESPONSE)

        assert face.face_token == "ed319e807e039ae669a4d1af0922a0c8"
        assert face.attributes.gender is Gender.MALE
        assert face.attributes.age == 27
        assert face.attributes.beauty_score == pytest.approx(71.3)
        assert face.face_rectangle.width == 160
        assert face.landmarks["nose_tip"].x == 170

    def test_no_faces(self):
        with pytest.raises(NoFaceDetectedError):
            parse_detect_response({"faces": [], "face_num": 0})

    def test_error_message(self):
        with pytest.raises(DetectorError, match="IMAGE_ERROR_UNSUPPORTED_FORMAT"):
            parse_detect_response({"error_message": "IMAGE_ERROR_UNSUPPORTED_FORMAT: image_base64"})

    def test_malformed_face(self):
        with pytest.raises(DetectorError):
            parse_detect_response({"faces": [{"face_rectangle": {"top": 1}}]})


class TestFacePlusPlusDetector:
    """HTTP behaviour of the Face++ client."""

    async def test_detect_face(self):
        session = FakeSession(FakeResponse(200, DETECT_RESPONSE))
        detector = make_detector(session)

        face = await detector.detect_face(b"\xff\xd8jpeg")

        assert face.attributes.gender is Gender.MALE
        sent = session.requests[0]
        assert sent["url"] == "https://facepp.test/detect"
        assert sent["timeout"] == 3
        assert sent["data"]["api_key"] == "key"
        assert sent["data"]["return_landmark"] == "1"
        assert "beauty" in sent["data"]["return_attributes"]
        assert sent["data"]["image_base64"] == "/9hqcGVn"

    async def test_empty_image(self):
        detector = make_detector(FakeSession())
        with pytest.raises(InvalidImageError):
            await detector.detect_face(b"")

    async def test_image_too_large(self):
        detector = make_detector(FakeSession())
        with pytest.raises(ImageTooLargeError):
            await detector.detect_face(b"0" * (2 * 1024 * 1024 + 1))

    async def test_http_error(self):
        session = FakeSession(FakeResponse(403, {"error_message": "AUTHORIZATION_ERROR"}))
        detector = make_detector(session)

        with pytest.raises(DetectorError) as exc_info:
            await detector.detect_face(b"img")
        assert exc_info.value.details["status_code"] == 403
        assert exc_info.value.details["error_message"] == "AUTHORIZATION_ERROR"

    async def test_http_error_without_json(self):
        detector = make_detector(FakeSession(FakeResponse(502)))
        with pytest.raises(DetectorError):
            await detector.detect_face(b"img")

    async def test_transport_error(self):
        detector = make_detector(FakeSession(error=requests.ConnectionError("refused")))
        with pytest.raises(DetectorError, match="request failed"):
            await detector.detect_face(b"img")

    async def test_close(self):
        session = FakeSession()
        detector = make_detector(session)
        await detector.close()
        assert session.closed

    async def test_concurrent_detections_do_not_share_a_session(self, monkeypatch):
        threads = []

        def fake_post(url, data=None, timeout=None):
            threads.append(threading.get_ident())
            return FakeResponse(200, DETECT_RESPONSE)

        monkeypatch.setattr(requests, "post", fake_post)
        detector = make_detector(session=None)

        first, second = await asyncio.gather(
            detector.detect_face(b"left-image"),
            detector.detect_face(b"right-image"),
        )

        assert len(threads) == 2
        assert first.face_token == second.face_token
        assert detector.session is None

    async def test_close_without_session(self):
        detector = make_detector(session=None)
        await detector.close()
