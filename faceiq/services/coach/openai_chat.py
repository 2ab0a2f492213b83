"""
OpenAI implementation of the coach chat model.

The OpenAI client is synchronous here, matching the Face++ detector: each
completion runs in a worker thread.
"""
import asyncio
from typing import Any, Optional

import openai
from openai import OpenAI

from faceiq.core.config import settings
from faceiq.core.exceptions import CoachError
from faceiq.core.logging import get_logger
from faceiq.domain.interfaces.coach.chat_model import ChatModel

logger = get_logger(__name__)


class OpenAIChatModel(ChatModel):
    """Chat model backed by the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[Any] = None,
    ) -> None:
        """
        Initialize the chat model.

        Args:
            api_key: OpenAI API key (defaults to settings)
            model: Model name (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            client: Optional pre-configured OpenAI client
        """
        self.model = model or settings.COACH_MODEL
        self.timeout = timeout or settings.COACH_TIMEOUT
        api_key = api_key or settings.OPENAI_API_KEY
        if client is None and api_key:
            client = OpenAI(api_key=api_key, timeout=self.timeout)
        self.client = client

    def _complete(self, prompt: str) -> str:
        if self.client is None:
            raise CoachError("Coach model is not configured", details={"setting": "OPENAI_API_KEY"})
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as e:
            raise CoachError(f"Coach model request failed: {e}", details={"model": self.model}) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate(self, prompt: str) -> str:
        logger.debug("Calling coach model", model=self.model, prompt_chars=len(prompt))
        return await asyncio.to_thread(self._complete, prompt)

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
