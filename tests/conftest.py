"""
Pytest configuration and shared fixtures.
"""

import json
from typing import Callable, List, Optional

import httpx
import pytest

from shelly.config.settings import ShellySettings
from shelly.config.store import Config
from shelly.core.client import ChatClient
from shelly.ui.terminal import Terminal

TEST_API_URL = "https://llm.test/api/v1/chat/completions"

SUGGESTIONS = """The directory does not exist.

1. ls -la
2. ls -la /tmp
3. `find . -maxdepth 1`"""


class ScriptedTerminal(Terminal):
    """Terminal double with scripted stdin and typed answers."""

    def __init__(self, piped: Optional[str] = None, answers: Optional[List[str]] = None):
        self.piped = piped
        self.answers = list(answers or [])
        self.piped_reads = 0

    def is_interactive(self) -> bool:
        return self.piped is None

    def read_piped(self) -> str:
        self.piped_reads += 1
        return self.piped or ""

    def read_line(self) -> str:
        if not self.answers:
            return ""
        return self.answers.pop(0) + "\n"


class FakeClipboard:
    """Records copied text instead of calling a clipboard utility."""

    def __init__(self, error: Optional[Exception] = None):
        self.copied: List[str] = []
        self.error = error

    def copy(self, text: str) -> None:
        if self.error is not None:
            raise self.error
        self.copied.append(text)


def chat_completion(content: Optional[str]) -> dict:
    """A minimal chat completion response body."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def settings(tmp_path) -> ShellySettings:
    """Settings pointing at a mock endpoint and a temporary config dir."""
    return ShellySettings(
        api_url=TEST_API_URL,
        model="test-model",
        config_dir=tmp_path / "config" / "shelly",
    )


@pytest.fixture
def config() -> Config:
    return Config(api_key="test-key-12345")


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(settings, config, recorded_requests) -> Callable[..., ChatClient]:
    """Build a ChatClient whose transport answers with the given response."""

    def factory(
        body=None,
        status_code: int = 200,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> ChatClient:
        def respond(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if handler is not None:
                return handler(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status_code, content=json.dumps(body).encode())
            return httpx.Response(status_code, text=body or "")

        return ChatClient(settings, config, transport=httpx.MockTransport(respond))

    return factory


@pytest.fixture
def make_terminal() -> Callable[..., ScriptedTerminal]:
    return ScriptedTerminal


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def suggestions() -> str:
    return SUGGESTIONS


@pytest.fixture
def completion() -> Callable[[Optional[str]], dict]:
    return chat_completion
