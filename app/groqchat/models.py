"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Role (user, assistant).
- Message (role, content), immutable once created.
- AppConfig (api_key, model, base_url, exit_command, model_defaulted).

Testing: Trivial; mostly types. Conversion helpers are covered by codec tests.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        """Build a Message from a wire object. Raises KeyError/ValueError on bad shape."""
        content = data["content"]
        if content is None:
            content = ""
        if not isinstance(content, str):
            raise ValueError(f"content must be a string, got {type(content).__name__}")
        return cls(role=Role(data["role"]), content=content)


@dataclass(frozen=True)
class AppConfig:
    api_key: str
    model: str
    base_url: str
    exit_command: str
    model_defaulted: bool = False

    def __repr__(self) -> str:
        return (
            f"AppConfig(api_key='***', model={self.model!r}, "
            f"base_url={self.base_url!r}, exit_command={self.exit_command!r}, "
            f"model_defaulted={self.model_defaulted!r})"
        )
