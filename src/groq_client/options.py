"""Request adjustments. Each sets exactly one field; later ones win."""

from typing import Callable

from groq_client.models.request import ChatCompletionRequest

Option = Callable[[ChatCompletionRequest], None]


def with_model(model: str) -> Option:
    """Set the model name."""

    def apply(request: ChatCompletionRequest) -> None:
        request.model = model

    return apply


def with_temperature(temperature: float) -> Option:
    """Set the sampling temperature."""

    def apply(request: ChatCompletionRequest) -> None:
        request.temperature = temperature

    return apply


def with_max_tokens(max_tokens: int) -> Option:
    """Set the maximum number of output tokens."""

    def apply(request: ChatCompletionRequest) -> None:
        request.max_tokens = max_tokens

    return apply


def with_top_p(top_p: float) -> Option:
    """Set the nucleus sampling value."""

    def apply(request: ChatCompletionRequest) -> None:
        request.top_p = top_p

    return apply


def with_stop(stop: str) -> Option:
    """Set the stop sequence."""

    def apply(request: ChatCompletionRequest) -> None:
        request.stop = stop

    return apply
