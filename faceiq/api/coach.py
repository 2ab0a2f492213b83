"""Coach chat API endpoint."""
from fastapi import APIRouter, Depends

from faceiq.api.models.face import CoachRequest, CoachResponse
from faceiq.infrastructure.dependencies import get_coach_service
from faceiq.services.coach.coach import CoachService

router = APIRouter(
    tags=["coach"],
    responses={
        422: {"description": "Invalid request"},
    }
)


@router.post(
    "",
    response_model=CoachResponse,
    summary="Ask the aesthetics coach",
    description=(
        "Answers a chat message using the user's latest analysis as context. "
        "Model failures are answered with a fallback reply rather than an error status."
    ),
    responses={
        200: {
            "description": "Coach reply",
            "content": {
                "application/json": {
                    "example": {"reply": "Cut to 12% body fat and fix your posture. Jawline follows."}
                }
            },
        },
    },
)
async def ask_coach(
    request: CoachRequest,
    coach: CoachService = Depends(get_coach_service)
) -> CoachResponse:
    """Answer a coach chat message.

    Args:
        request: Message, history and optional analysis context
        coach: Coach service provided by dependency injection

    Returns:
        CoachResponse with the reply text
    """
    reply = await coach.reply(request.message, request.history, request.analysis)
    return CoachResponse(reply=reply)
