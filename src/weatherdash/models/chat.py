"""
AI assistant models plus the local chat history entry.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from weatherdash.models.base import WireModel
from weatherdash.models.city import CityDTO


class ChatRequestDTO(WireModel):
    """POST /api/ai/chat body"""
    question: str
    city: CityDTO


class ChatResponseDTO(WireModel):
    answer: str
    references: list[str] = Field(default_factory=list)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """One entry in the chat store. `id` is clock-derived, so it is only used for ordering."""

    model_config = ConfigDict(frozen=True)

    id: int
    role: Role
    content: str
    timestamp: int
