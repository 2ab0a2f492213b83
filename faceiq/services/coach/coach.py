"""Chat coach service."""
from typing import Optional, Sequence

from faceiq.core.exceptions import FaceIQError
from faceiq.core.logging import get_logger
from faceiq.domain.interfaces.coach.chat_model import ChatModel
from faceiq.domain.value_objects.coach import ChatMessage
from faceiq.domain.value_objects.scoring import AnalysisResult
from faceiq.services.coach.prompt import build_prompt

logger = get_logger(__name__)

EMPTY_REPLY = "Focus on the basics: Mewing, chewing, and sleep."
UNAVAILABLE_REPLY = "I'm analyzing another face right now. Try again in a second."


class CoachService:
    """Service answering coach chat messages.

    Like the scoring engine it never raises: model failures are logged and
    answered with a fixed fallback reply.

    Example:
        ```python
        coach = CoachService(OpenAIChatModel())
        reply = await coach.reply("How do I fix my jawline?", history, analysis)
        ```
    """

    def __init__(self, model: ChatModel) -> None:
        self.model = model

    async def reply(
        self,
        message: str,
        history: Sequence[ChatMessage] = (),
        analysis: Optional[AnalysisResult] = None,
    ) -> str:
        """Answer a user message in the context of their latest analysis.

        Args:
            message: New user message
            history: Earlier turns, oldest first
            analysis: Latest analysis of the user's face, if any

        Returns:
            The model's reply, or a fallback reply if it was empty or failed
        """
        prompt = build_prompt(message, history, analysis)
        try:
            text = await self.model.generate(prompt)
        except FaceIQError as e:
            logger.error("Coach model failed", error=str(e), details=e.details)
            return UNAVAILABLE_REPLY
        except Exception as e:
            logger.error("Unexpected coach failure", error=str(e), exc_info=True)
            return UNAVAILABLE_REPLY

        text = (text or "").strip()
        if not text:
            logger.warning("Coach model returned an empty reply")
            return EMPTY_REPLY

        logger.info("Coach replied", history_turns=len(history), analyzed=analysis is not None)
        return text
