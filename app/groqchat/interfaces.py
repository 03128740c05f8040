"""
Abstractions for pluggable services. The session controller depends on these
protocols, not on the concrete Groq client, so tests can hand it fakes.

Protocols:
- ExchangeClient.exchange(transcript, model) -> Message | None
- TranscriptStore.append(message) / snapshot()
"""

from __future__ import annotations
from typing import Optional, Protocol, Sequence

from .models import Message


class ExchangeClient(Protocol):
    def exchange(
        self, transcript: Sequence[Message], model: str
    ) -> Optional[Message]: ...


class TranscriptStore(Protocol):
    def append(self, message: Message) -> None: ...

    def snapshot(self) -> tuple[Message, ...]: ...

    def __len__(self) -> int: ...
