"""Data models."""

from groq_client.models.completion import ChatCompletionResponse, Choice, ChoiceMessage, Usage, XGroq
from groq_client.models.message import Message
from groq_client.models.request import DEFAULT_MODEL, ChatCompletionRequest

__all__ = [
    "DEFAULT_MODEL",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "ChoiceMessage",
    "Message",
    "Usage",
    "XGroq",
]
