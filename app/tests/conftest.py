# tests/conftest.py

import json

import httpx
import pytest

from groqchat.services.llm_groq import GroqExchangeClient

BASE_URL = "https://api.test/openai/v1"


def completion_body(*contents):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}}
            for i, c in enumerate(contents)
        ],
    }


class RecordingTransport:
    """Answers every request with the handler's response and keeps the requests."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.handler(request)

    def sent_json(self, i=-1):
        return json.loads(self.requests[i].content)


@pytest.fixture
def make_client():
    clients = []

    def _make(handler):
        transport = RecordingTransport(handler)
        http_client = httpx.Client(transport=httpx.MockTransport(transport))
        client = GroqExchangeClient("test-key", base_url=BASE_URL, http_client=http_client)
        clients.append(client)
        return client, transport

    yield _make
    for c in clients:
        c.close()
