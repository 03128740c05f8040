"""Exception types raised by the chat core. The console layer catches them per turn."""

from __future__ import annotations


class ChatError(Exception):
    """Base class for every error raised by groqchat."""


class ConfigError(ChatError):
    """Startup configuration is missing or invalid. Fatal."""


class ExchangeError(ChatError):
    """A single exchange with the completion service failed."""


class SerializationError(ExchangeError):
    """The outgoing payload could not be encoded."""


class TransportError(ExchangeError):
    """Connection, TLS or timeout failure before a response arrived."""


class RemoteServiceError(ExchangeError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"API request failed with status code {status_code}: {body}"
        )


class ResponseParseError(ExchangeError):
    """A success response whose body is not the expected completion object."""
