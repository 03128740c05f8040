"""Utilities for encoding chat payloads and strictly decoding completion responses."""

from __future__ import annotations
import json
from typing import Any, Iterable, Optional

from ..errors import ResponseParseError, SerializationError
from ..models import Message


def _dumps(obj: Any) -> str:
    try:
        text = json.dumps(obj, ensure_ascii=False, allow_nan=False)
        # the wire body is UTF-8; lone surrogates only fail here
        text.encode("utf-8")
    except (TypeError, ValueError, UnicodeEncodeError) as e:
        raise SerializationError(f"Failed to encode request payload: {e}") from e
    return text


def build_request_payload(model: str, messages: Iterable[Message]) -> dict[str, Any]:
    """
    Request body for chat/completions: model plus the full transcript in order.
    The payload is encoded once here so bad content fails before any network call.
    """
    try:
        payload = {
            "model": model,
            "messages": [m.to_dict() for m in messages],
        }
    except AttributeError as e:
        raise SerializationError(f"Failed to encode request payload: {e}") from e
    _dumps(payload)
    return payload


def encode_messages(messages: Iterable[Message]) -> str:
    """Serialize a transcript to a JSON array of {role, content} objects."""
    try:
        items = [m.to_dict() for m in messages]
    except AttributeError as e:
        raise SerializationError(f"Failed to encode transcript: {e}") from e
    return _dumps(items)


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise ResponseParseError(f"Response body is not valid JSON: {e}") from e


def _to_message(obj: Any) -> Message:
    if not isinstance(obj, dict):
        raise ResponseParseError(f"Expected a message object, got {type(obj).__name__}")
    try:
        return Message.from_dict(obj)
    except (KeyError, ValueError) as e:
        raise ResponseParseError(f"Malformed message {obj!r}: {e}") from e


def decode_messages(text: str) -> list[Message]:
    """Inverse of encode_messages."""
    data = _load(text)
    if not isinstance(data, list):
        raise ResponseParseError("Expected a JSON array of messages.")
    return [_to_message(item) for item in data]


def parse_completion(text: str) -> Optional[Message]:
    """
    Extract choices[0].message from a chat/completions body.
    - Returns None when the service sent zero candidates (empty, null or absent).
    - Raises ResponseParseError for anything that is not the expected shape.
    Extra candidates are ignored.
    """
    data = _load(text)
    if not isinstance(data, dict):
        raise ResponseParseError("Expected a JSON object.")

    choices = data.get("choices")
    if choices is None:
        return None
    if not isinstance(choices, list):
        raise ResponseParseError("'choices' is not an array.")
    if not choices:
        return None

    first = choices[0]
    if not isinstance(first, dict) or "message" not in first:
        raise ResponseParseError("First choice has no 'message' object.")
    return _to_message(first["message"])
