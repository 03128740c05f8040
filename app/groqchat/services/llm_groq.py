"""
Purpose: Thin client wrapper around Groq's OpenAI-compatible chat/completions endpoint.
One place for auth, request building and response/error normalization.

Contract: exactly one POST per exchange(). SDK retries are disabled and nothing is
cached. The raw body is decoded here (not by the SDK) so that empty candidates,
malformed bodies and non-2xx statuses each surface as their own outcome.

Testing: Inject an httpx.Client with a MockTransport; assert request shape and
that each failure maps to the right ExchangeError subclass.
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence

import httpx
from openai import APIConnectionError, APIStatusError, OpenAI, OpenAIError

from ..config import DEFAULT_BASE_URL
from ..errors import ConfigError, RemoteServiceError, TransportError
from ..models import Message
from ..utils.llm_json import build_request_payload, parse_completion

logger = logging.getLogger(__name__)


class GroqExchangeClient:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        if not self.api_key:
            raise ConfigError("Missing API key for the completion service.")
        self.base_url = base_url
        try:
            self.client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
                http_client=http_client,
            )
        except OpenAIError as e:
            raise ConfigError(f"Failed to initialize OpenAI client: {e}") from e

    def exchange(
        self, transcript: Sequence[Message], model: str
    ) -> Optional[Message]:
        """
        Send the whole transcript and return the first candidate reply.
        Returns None when the service answered successfully with no candidates.
        Raises SerializationError, TransportError, RemoteServiceError or
        ResponseParseError.
        """
        if not model:
            raise ConfigError("Model identifier must not be empty.")

        payload = build_request_payload(model, transcript)
        logger.debug(
            "POST %s/chat/completions model=%s messages=%d",
            self.base_url,
            model,
            len(payload["messages"]),
        )

        try:
            raw = self.client.chat.completions.with_raw_response.create(**payload)
        except APIStatusError as e:
            body = e.response.text
            logger.warning("Completion request rejected: status=%s", e.status_code)
            raise RemoteServiceError(e.status_code, body) from e
        except APIConnectionError as e:
            logger.warning("Completion request failed in transport: %s", e)
            raise TransportError(f"Could not reach {self.base_url}: {e}") from e

        reply = parse_completion(raw.http_response.text)
        if reply is None:
            logger.debug("Completion returned no candidates")
        return reply

    def close(self) -> None:
        self.client.close()


def exchange(
    transcript: Sequence[Message],
    model: str,
    credential: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    http_client: Optional[httpx.Client] = None,
) -> Optional[Message]:
    """One-shot exchange with a throwaway client."""
    client = GroqExchangeClient(credential, base_url=base_url, http_client=http_client)
    try:
        return client.exchange(transcript, model)
    finally:
        # a caller-supplied http_client stays open for the caller
        if http_client is None:
            client.close()
