"""Service container for dependency injection."""
from typing import Optional

from faceiq.core.config import settings
from faceiq.domain.interfaces.coach.chat_model import ChatModel
from faceiq.domain.interfaces.detection.face_detector import FaceDetector
from faceiq.domain.interfaces.random_source import RandomSource
from faceiq.services.coach.coach import CoachService
from faceiq.services.coach.openai_chat import OpenAIChatModel
from faceiq.services.detection.facepp import FacePlusPlusDetector
from faceiq.services.face_analysis import FaceAnalysisService
from faceiq.services.random_source import SeededRandomSource
from faceiq.services.scoring.engine import FaceScoringEngine


class ServiceContainer:
    """Container for application services.

    Holds the only stateful pieces of the application (detector, coach model
    client and random source) so the scoring core itself stays free of globals.

    Example:
        ```python
        container = ServiceContainer()
        await container.initialize()

        face_analysis = container.face_analysis_service
        ```
    """

    def __init__(self) -> None:
        """Initialize empty container."""
        self.detector: Optional[FaceDetector] = None
        self.rng: Optional[RandomSource] = None
        self.coach_model: Optional[ChatModel] = None

        self.scoring_engine: Optional[FaceScoringEngine] = None
        self.face_analysis_service: Optional[FaceAnalysisService] = None
        self.coach_service: Optional[CoachService] = None

    async def initialize(self) -> None:
        """Initialize all services in the correct order."""
        self.rng = SeededRandomSource(seed=settings.RANDOM_SEED)
        self.detector = FacePlusPlusDetector()
        self.scoring_engine = FaceScoringEngine(
            rng=self.rng,
            weights=settings.SCORING_WEIGHTS,
            beauty_scale=settings.BEAUTY_SCALE,
        )
        self.face_analysis_service = FaceAnalysisService(
            detector=self.detector,
            engine=self.scoring_engine,
        )
        self.coach_model = OpenAIChatModel()
        self.coach_service = CoachService(model=self.coach_model)

    async def cleanup(self) -> None:
        """Cleanup all services in reverse order of initialization."""
        self.coach_service = None
        if self.coach_model:
            await self.coach_model.close()
            self.coach_model = None

        self.face_analysis_service = None
        self.scoring_engine = None

        if self.detector:
            await self.detector.close()
            self.detector = None

        self.rng = None


# Global container instance
container = ServiceContainer()
