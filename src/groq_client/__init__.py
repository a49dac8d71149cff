"""Minimal client for the Groq chat completions API."""

from groq_client.client import GroqClient
from groq_client.errors import GroqError, UnexpectedStatusError
from groq_client.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    ChoiceMessage,
    Message,
    Usage,
    XGroq,
)
from groq_client.options import (
    with_max_tokens,
    with_model,
    with_stop,
    with_temperature,
    with_top_p,
)

__all__ = [
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "ChoiceMessage",
    "GroqClient",
    "GroqError",
    "Message",
    "UnexpectedStatusError",
    "Usage",
    "XGroq",
    "with_max_tokens",
    "with_model",
    "with_stop",
    "with_temperature",
    "with_top_p",
]
