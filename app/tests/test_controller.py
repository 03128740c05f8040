# tests/test_controller.py

import pytest

from groqchat.controller import ChatSession
from groqchat.errors import RemoteServiceError, SerializationError, TransportError
from groqchat.models import Message, Role


class DummyClient:
    """Replies with 'echo: <last user text>' unless told to fail or go empty."""

    def __init__(self, error=None, empty=False):
        self.error = error
        self.empty = empty
        self.calls = []

    def exchange(self, transcript, model):
        self.calls.append((tuple(transcript), model))
        if self.error is not None:
            raise self.error
        if self.empty:
            return None
        return Message(Role.ASSISTANT, f"echo: {transcript[-1].content}")


def test_n_turns_give_2n_alternating_messages():
    session = ChatSession(DummyClient(), "m")
    inputs = ["one", "two", "three", "four"]
    for text in inputs:
        session.send(text)

    history = session.history()
    assert len(history) == 2 * len(inputs)
    for i, text in enumerate(inputs):
        assert history[2 * i] == Message(Role.USER, text)
        assert history[2 * i + 1] == Message(Role.ASSISTANT, f"echo: {text}")


def test_full_history_is_resent_each_turn():
    client = DummyClient()
    session = ChatSession(client, "m")
    session.send("hi")
    session.send("again")

    sent, model = client.calls[-1]
    assert model == "m"
    assert [m.content for m in sent] == ["hi", "echo: hi", "again"]


def test_empty_result_keeps_only_user_message():
    session = ChatSession(DummyClient(empty=True), "m")
    assert session.send("hi") is None
    assert session.history() == (Message(Role.USER, "hi"),)


def test_remote_error_keeps_user_message():
    session = ChatSession(DummyClient(error=RemoteServiceError(401, "invalid api key")), "m")
    with pytest.raises(RemoteServiceError):
        session.send("hi")
    assert len(session.history()) == 1


def test_transport_error_lets_next_turn_resend():
    client = DummyClient(error=TransportError("refused"))
    session = ChatSession(client, "m")
    with pytest.raises(TransportError):
        session.send("first")

    client.error = None
    session.send("second")
    sent, _ = client.calls[-1]
    assert [m.content for m in sent] == ["first", "second"]


def test_serialization_error_leaves_transcript_untouched():
    session = ChatSession(DummyClient(error=SerializationError("bad")), "m")
    with pytest.raises(SerializationError):
        session.send("hi")
    assert session.history() == ()
