"""
Purpose: Session transcript storage, in memory only. The transcript is discarded
when the process exits.

What is inside:
InMemoryTranscriptStore with append/snapshot. Append-only: no deletion, no edits,
no capacity bound. Single-threaded use only.

Testing:
In-memory: simple state tests.
"""

from __future__ import annotations
from typing import Iterator

from ..models import Message


class InMemoryTranscriptStore:
    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def snapshot(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())
