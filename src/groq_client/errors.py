"""Errors raised by the client. Transport and decode errors are not wrapped."""


class GroqError(Exception):
    """Base class for errors raised by groq_client."""


class UnexpectedStatusError(GroqError):
    """Raised when the service answers with anything other than 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code
