"""FastAPI dependency providers."""
from typing import AsyncGenerator

from fastapi import Depends

from faceiq.core.container import ServiceContainer, container
from faceiq.core.exceptions import ServiceNotInitializedError
from faceiq.services.coach.coach import CoachService
from faceiq.services.face_analysis import FaceAnalysisService
from faceiq.services.scoring.engine import FaceScoringEngine


async def get_container() -> ServiceContainer:
    """Dependency provider for the global ServiceContainer instance."""
    if not container.face_analysis_service:
        # Initialize lazily when the app lifespan did not run
        try:
            await container.initialize()
        except Exception as e:
            raise ServiceNotInitializedError(f"Service container could not be initialized: {e}")
    return container


async def get_scoring_engine(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[FaceScoringEngine, None]:
    """Provide the scoring engine.

    Raises:
        ServiceNotInitializedError: If the engine is not initialized
    """
    if container.scoring_engine is None:
        raise ServiceNotInitializedError("Scoring engine not initialized")
    yield container.scoring_engine


async def get_face_analysis_service(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[FaceAnalysisService, None]:
    """Provide the face analysis service.

    Raises:
        ServiceNotInitializedError: If the service is not initialized
    """
    if container.face_analysis_service is None:
        raise ServiceNotInitializedError("FaceAnalysisService not found in initialized container")
    yield container.face_analysis_service


async def get_coach_service(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[CoachService, None]:
    """Provide the chat coach service.

    Raises:
        ServiceNotInitializedError: If the service is not initialized
    """
    if container.coach_service is None:
        raise ServiceNotInitializedError("CoachService not found in initialized container")
    yield container.coach_service
