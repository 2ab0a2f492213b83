"""Face analysis service: image in, scored result out."""
import asyncio

from faceiq.core.exceptions import FaceIQError, NoFaceDetectedError
from faceiq.core.logging import get_logger
from faceiq.domain.entities.face import DetectedFace
from faceiq.domain.interfaces.detection.face_detector import FaceDetector
from faceiq.domain.value_objects.scoring import AnalysisResult, MogResult
from faceiq.services.scoring.engine import FaceScoringEngine

logger = get_logger(__name__)

NO_FACE_MESSAGE = "No face detected in image"


class FaceAnalysisService:
    """Service for analyzing and comparing faces in images.

    This service:
    1. Sends the image to the configured face detector
    2. Scores the detected face with the scoring engine
    3. Converts any detector failure into the analysis error sentinel

    Example:
        ```python
        detector = FacePlusPlusDetector()
        engine = FaceScoringEngine(rng=SeededRandomSource())
        service = FaceAnalysisService(detector, engine)

        result = await service.analyze_image(image_bytes)
        battle = await service.compare_images(left_bytes, right_bytes)
        ```
    """

    def __init__(self, detector: FaceDetector, engine: FaceScoringEngine) -> None:
        """Initialize the face analysis service.

        Args:
            detector: External face detection/attribute service
            engine: Scoring engine for detector payloads
        """
        self.detector = detector
        self.engine = engine

    def score_face(self, face: DetectedFace) -> AnalysisResult:
        """Score an already-detected face payload."""
        return self.engine.analyze(face.attributes, face.landmarks, face.face_rectangle)

    async def analyze_image(self, image_bytes: bytes) -> AnalysisResult:
        """Detect and score the face in an image.

        Args:
            image_bytes: Raw image data

        Returns:
            AnalysisResult, or the error sentinel if detection failed
        """
        try:
            face = await self.detector.detect_face(image_bytes)
        except NoFaceDetectedError:
            logger.warning("No face detected in image")
            return AnalysisResult.error(NO_FACE_MESSAGE)
        except FaceIQError as e:
            logger.error(
                "Face detection failed",
                error=str(e),
                error_type=type(e).__name__,
                details=e.details,
            )
            return AnalysisResult.error(str(e))
        except Exception as e:
            logger.error("Unexpected face detection failure", error=str(e), exc_info=True)
            return AnalysisResult.error()

        result = self.score_face(face)
        logger.info(
            "Analyzed face",
            overall=result.scores.overall,
            tier=result.tier.value,
        )
        return result

    async def compare_images(self, first_image: bytes, second_image: bytes) -> MogResult:
        """Analyze two images concurrently and compare the results.

        Args:
            first_image: Raw data of the first (left) image
            second_image: Raw data of the second (right) image

        Returns:
            MogResult, or the error sentinel if either analysis failed
        """
        first, second = await asyncio.gather(
            self.analyze_image(first_image),
            self.analyze_image(second_image),
        )
        if first.is_error or second.is_error:
            logger.warning(
                "Comparison aborted, analysis failed",
                first_failed=first.is_error,
                second_failed=second.is_error,
            )
        return self.engine.compare(first, second)
