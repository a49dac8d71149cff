"""Chat completion request body."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from groq_client.models.message import Message

DEFAULT_MODEL = "llama3-8b-8192"


class ChatCompletionRequest(BaseModel):
    """
    Request configuration sent as the JSON body.
    Adjusted in place by the functions in groq_client.options before serialization.
    """

    model_config = ConfigDict(validate_assignment=True)

    messages: list[Message] = Field(default_factory=list)
    model: str = Field(default=DEFAULT_MODEL)
    temperature: float = Field(default=1.0)
    max_tokens: int = Field(default=1024)
    top_p: float = Field(default=1.0)
    stream: bool = Field(default=False)
    stop: str | None = Field(default=None, description="Omitted from the payload when unset")

    def to_payload(self) -> dict[str, Any]:
        """Wire payload. Messages keep caller order; an unset stop is left out."""
        payload = self.model_dump(mode="json")
        if payload["stop"] is None:
            del payload["stop"]
        return payload
