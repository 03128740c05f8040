"""Terminal chat with GroqCloud-hosted models over the OpenAI-compatible API."""

from .config import DEFAULT_MODEL, load_config
from .controller import ChatSession
from .errors import (
    ChatError,
    ConfigError,
    ExchangeError,
    RemoteServiceError,
    ResponseParseError,
    SerializationError,
    TransportError,
)
from .models import AppConfig, Message, Role
from .services.llm_groq import GroqExchangeClient, exchange

__all__ = [
    "AppConfig",
    "ChatError",
    "ChatSession",
    "ConfigError",
    "DEFAULT_MODEL",
    "ExchangeError",
    "GroqExchangeClient",
    "Message",
    "RemoteServiceError",
    "ResponseParseError",
    "Role",
    "SerializationError",
    "TransportError",
    "exchange",
    "load_config",
]
