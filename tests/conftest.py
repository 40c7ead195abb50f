"""Pytest fixtures and shared test configuration.

Fixtures:
    - async_client: HTTPX client for the FastAPI host application
    - fake_generate: Scriptable stand-in for ChatService.generate
    - controller: ConversationController wired to fake_generate
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chat.api import create_app
from gemini_chat.conversation import ConversationController


class FakeGenerate:
    """Records prompts and replies with a canned text or raises an error."""

    def __init__(self, reply: str = "Hi there!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_generate() -> FakeGenerate:
    """Return a fake model call replying "Hi there!"."""
    return FakeGenerate()


@pytest.fixture
def controller(fake_generate: FakeGenerate) -> ConversationController:
    """Return a controller over an empty conversation."""
    return ConversationController(fake_generate)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
