from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

# Response fields that may carry the generated text, in priority order.
REPLY_FIELDS = ("reply", "text", "message")


class TextRequest(BaseModel):
    """A single instruction sent to the remote text-generation service."""
    message: str = Field(description="Instruction text")
    lang: str = Field(default="hu", description="Language tag of the expected answer")
    mode: str = Field(default="learning", description="Operating mode of the remote assistant")
    json_mode: bool = Field(default=False, description="Ask the service for structured (JSON) output")


class TextService(ABC):
    """
    Defines the contract for the remote text-generation collaborator.
    Output is non-deterministic and the call may fail; callers decide how to recover.
    """
    @abstractmethod
    async def invoke(self, request: TextRequest) -> dict[str, Any]:
        raise NotImplementedError


def reply_text(payload: Any) -> str:
    """Return the first non-empty text field of a service payload, or ""."""
    if isinstance(payload, str):
        return payload
    if not isinstance(payload, dict):
        return ""
    for key in REPLY_FIELDS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return ""
