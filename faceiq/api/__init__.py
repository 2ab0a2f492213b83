"""API v1 router initialization."""
from fastapi import APIRouter

from .coach import router as coach_router
from .face_analysis import router as face_analysis_router

# Create v1 router
router = APIRouter()

router.include_router(
    face_analysis_router,
    prefix="/face-analysis",
    tags=["face-analysis"]
)
router.include_router(
    coach_router,
    prefix="/coach",
    tags=["coach"]
)
