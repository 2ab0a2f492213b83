"""Coach chat value objects."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatRole(str, Enum):
    """Author of a chat turn."""
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """A single turn of the coach conversation."""
    id: Optional[str] = Field(None, description="Client-side message identifier")
    role: ChatRole = Field(..., description="Who wrote the message")
    text: str = Field(..., description="Message text")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
