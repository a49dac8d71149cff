"""Groq chat completion client - one synchronous POST per call."""

import logging
from typing import Any, Iterable

import httpx

from groq_client.config import get_settings
from groq_client.errors import UnexpectedStatusError
from groq_client.models import ChatCompletionRequest, ChatCompletionResponse, Message
from groq_client.options import Option

logger = logging.getLogger(__name__)


class GroqClient:
    """Client for the Groq chat completions API (OpenAI-compatible wire format)."""

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        api_key: str | None = None,
        *,
        chat_completion_url: str | None = None,
    ) -> None:
        """
        http_client: pre-configured transport; a default httpx.Client is created when omitted.
        api_key: bearer credential; falls back to GROQ_API_KEY when omitted or empty.
        A missing key is not an error here, the service rejects the call instead.
        """
        settings = get_settings()
        self._api_key = api_key or settings.groq_api_key
        self._chat_completion_url = chat_completion_url or settings.groq_chat_completion_url
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    @property
    def chat_completion_url(self) -> str:
        return self._chat_completion_url

    def chat_completion(
        self,
        messages: Iterable[Message | dict[str, str]],
        *options: Option,
    ) -> ChatCompletionResponse:
        """
        Send messages (in the given order) and return the decoded completion.

        Options are applied left to right on top of the defaults.
        Raises UnexpectedStatusError for any status other than 200,
        httpx errors for transport failures, and pydantic.ValidationError
        when the body is not a valid completion.
        """
        request = ChatCompletionRequest(messages=list(messages))
        for option in options:
            option(request)
        payload = request.to_payload()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        logger.debug(
            "POST %s model=%s messages=%d",
            self._chat_completion_url,
            request.model,
            len(request.messages),
        )
        with self._http.stream(
            "POST",
            self._chat_completion_url,
            json=payload,
            headers=headers,
        ) as response:
            logger.debug("Chat completion status %s", response.status_code)
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code)
            body = response.read()
        return ChatCompletionResponse.model_validate_json(body)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "GroqClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
