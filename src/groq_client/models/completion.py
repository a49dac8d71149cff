"""Chat completion response data model. Every field is optional on decode."""

from typing import Any

from pydantic import BaseModel, Field


class ChoiceMessage(BaseModel):
    """Generated message. Content may be null, e.g. for tool calls."""

    role: str | None = None
    content: str | None = None


class Choice(BaseModel):
    """One generated alternative."""

    index: int | None = None
    message: ChoiceMessage | None = None
    logprobs: Any = Field(default=None, description="Opaque JSON value, passed through verbatim")
    finish_reason: str | None = None


class Usage(BaseModel):
    """Token counts and timings reported by the service."""

    queue_time: float | None = None
    prompt_tokens: int | None = None
    prompt_time: float | None = None
    completion_tokens: int | None = None
    completion_time: float | None = None
    total_tokens: int | None = None
    total_time: float | None = None


class XGroq(BaseModel):
    """Provider-specific echo object."""

    id: str | None = None


class ChatCompletionResponse(BaseModel):
    """Decoded response body of a chat completion call."""

    id: str | None = None
    object: str | None = None
    created: int | None = Field(default=None, description="Epoch seconds")
    model: str | None = None
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None
    system_fingerprint: str | None = None
    x_groq: XGroq | None = None
