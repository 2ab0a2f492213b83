"""Chat model interface for the coach."""
from abc import ABC, abstractmethod


class ChatModel(ABC):
    """Interface for hosted text generation models."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate a reply for a fully assembled prompt.

        Args:
            prompt: Persona, user context, history and the new message

        Returns:
            Generated text, possibly empty

        Raises:
            CoachError: If the model is unavailable or the call failed
        """
        pass

    async def close(self) -> None:
        """Release any transport resources held by the model client."""
        return None
