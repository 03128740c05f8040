"""
Purpose: The single orchestration point for a chat session. Owns the transcript.
It centralizes "one-turn" logic so the console layer never touches the store or
the exchange client directly.

Turn rules:
- success: user message, then the reply, are appended.
- empty result (no candidates): only the user message is appended.
- SerializationError: nothing is appended.
- any other ExchangeError: the user message stays, so the next turn resends it.

Testing: Pure unit tests with a fake ExchangeClient; no network.
"""

from __future__ import annotations
import logging
from typing import Optional

from .errors import ExchangeError, SerializationError
from .interfaces import ExchangeClient, TranscriptStore
from .models import Message, Role
from .persistence.session_store import InMemoryTranscriptStore

logger = logging.getLogger(__name__)


class ChatSession:
    def __init__(
        self,
        client: ExchangeClient,
        model: str,
        store: Optional[TranscriptStore] = None,
    ):
        self.client: ExchangeClient = client
        self.model = model
        self.store: TranscriptStore = store if store is not None else InMemoryTranscriptStore()

    def history(self) -> tuple[Message, ...]:
        """Current transcript, oldest first."""
        return self.store.snapshot()

    def send(self, user_text: str) -> Optional[Message]:
        """Run one turn. Returns the reply, or None when the service had no candidates."""
        user_msg = Message(role=Role.USER, content=user_text)
        transcript = self.store.snapshot() + (user_msg,)

        try:
            reply = self.client.exchange(transcript, self.model)
        except SerializationError:
            logger.debug("Turn dropped: payload could not be encoded")
            raise
        except ExchangeError as e:
            self.store.append(user_msg)
            logger.debug("Turn failed (%s); user message kept", type(e).__name__)
            raise

        self.store.append(user_msg)
        if reply is not None:
            self.store.append(reply)
        logger.debug("Turn complete; transcript has %d messages", len(self.store))
        return reply
