"""Chat message data model."""

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Single chat turn. Role is free-form: system, user, assistant, ..."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(..., description="Speaker role")
    content: str = Field(..., description="Message text")
