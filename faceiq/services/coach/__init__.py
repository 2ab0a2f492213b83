from .coach import CoachService
from .openai_chat import OpenAIChatModel

__all__ = ["CoachService", "OpenAIChatModel"]
