"""Shared fixtures for tutor tests."""

import httpx
import pytest

from language_tutor.config import Settings
from language_tutor.llm import CompletionClient

TEST_URL = "https://api.example.test/v1/completions"


@pytest.fixture
def test_settings():
    return Settings(api_url=TEST_URL, _env_file=None)


class ScriptedAPI:
    """MockTransport handler that replays canned responses and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.responses.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, str):
            return httpx.Response(200, json={"choices": [{"text": reply}]})
        return reply

    def client(self) -> CompletionClient:
        transport = httpx.MockTransport(self)
        return CompletionClient(TEST_URL, client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def scripted_api():
    return ScriptedAPI
