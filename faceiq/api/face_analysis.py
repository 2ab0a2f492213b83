"""Face analysis API endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from faceiq.api.models.face import (
    AnalysisResponse,
    AnalyzeRequest,
    CompareRequest,
    ComparisonResponse,
    ScoreRequest,
)
from faceiq.core.exceptions import InvalidImageError
from faceiq.core.logging import get_logger
from faceiq.core.utils.image import decode_base64_image
from faceiq.infrastructure.dependencies import (
    get_face_analysis_service,
    get_scoring_engine,
)
from faceiq.services.face_analysis import FaceAnalysisService
from faceiq.services.scoring.engine import FaceScoringEngine

logger = get_logger(__name__)
router = APIRouter(
    tags=["face-analysis"],
    responses={
        400: {"description": "Invalid request"},
        500: {"description": "Internal server error"}
    }
)

ANALYSIS_EXAMPLE = {
    "scores": {
        "overall": 78,
        "potential": 88,
        "masculinity": 84,
        "jawline": 81,
        "skinQuality": 74,
        "cheekbones": 69,
        "eyeArea": 77,
    },
    "tier": "High Tier Normie",
    "feedback": [
        "Above average features with clear room for optimization.",
        "Excellent skin quality (82/100). This is a major positive.",
        "Maintain current grooming standards and focus on fitness for further gains.",
    ],
    "improvements": [
        {
            "area": "Cheekbones",
            "advice": "A leaner face reveals cheekbone structure; pair fat loss with a haircut that adds width up top.",
            "priority": "Medium",
        },
        {
            "area": "Skin Quality",
            "advice": "Start a consistent routine: cleanser, tretinoin, moisturizer, SPF.",
            "priority": "Medium",
        },
    ],
}


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    summary="Analyze the face in an image",
    description=(
        "Detects the face in a base64 image and scores it. Detection failures are "
        "reported in-band as a result with tier 'Error'."
    ),
    responses={
        200: {
            "description": "Face analyzed (or error sentinel)",
            "content": {"application/json": {"example": ANALYSIS_EXAMPLE}},
        },
        400: {
            "description": "Invalid request",
            "content": {
                "application/json": {
                    "example": {"detail": "Invalid base64 image: Incorrect padding"}
                }
            },
        },
    },
)
async def analyze_face(
    request: AnalyzeRequest,
    service: FaceAnalysisService = Depends(get_face_analysis_service)
) -> AnalysisResponse:
    """Analyze the face in a base64 encoded image.

    Args:
        request: Analysis request carrying the image
        service: Face analysis service provided by dependency injection

    Returns:
        AnalysisResponse with scores, tier, feedback and improvements

    Raises:
        HTTPException: If the image payload is invalid or processing fails unexpectedly
    """
    try:
        image_bytes = decode_base64_image(request.image_base64)
        result = await service.analyze_image(image_bytes)
        return AnalysisResponse.from_domain(result)

    except InvalidImageError as e:
        logger.error("Invalid image payload", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error during face analysis",
                     error=str(e), exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred while processing the request"
        )


@router.post(
    "/compare",
    response_model=ComparisonResponse,
    summary="Compare two faces",
    description="Analyzes two images concurrently and decides which face wins.",
    responses={
        200: {
            "description": "Faces compared (or error sentinel)",
            "content": {
                "application/json": {
                    "example": {
                        "winnerIndex": 0,
                        "winnerTitle": "CLEAR MOG",
                        "diffScore": 12,
                        "reason": "Superior jawline (84 vs 66)",
                        "roast": "It's over. Time to start mewing.",
                    }
                }
            },
        },
    },
)
async def compare_faces(
    request: CompareRequest,
    service: FaceAnalysisService = Depends(get_face_analysis_service)
) -> ComparisonResponse:
    """Compare the faces in two base64 encoded images.

    Raises:
        HTTPException: If either image payload is invalid or processing fails unexpectedly
    """
    try:
        first = decode_base64_image(request.image_base64_a)
        second = decode_base64_image(request.image_base64_b)
        result = await service.compare_images(first, second)
        return ComparisonResponse.from_domain(result)

    except InvalidImageError as e:
        logger.error("Invalid image payload", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error during face comparison",
                     error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="An unexpected error occurred.")


@router.post(
    "/score",
    response_model=AnalysisResponse,
    summary="Score a detected face payload",
    description="Scores detector attributes and landmarks without calling the detector.",
)
async def score_face(
    request: ScoreRequest,
    engine: FaceScoringEngine = Depends(get_scoring_engine)
) -> AnalysisResponse:
    """Score an already-detected face payload."""
    result = engine.analyze(request.attributes, request.landmarks, request.face_rectangle)
    return AnalysisResponse.from_domain(result)
