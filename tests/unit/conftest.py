"""Pytest fixtures for unit and API tests."""

import asyncio
import json
import os

import pytest
from fastapi.testclient import TestClient

# Set a test API key if not already set (needed for startup)
if not os.getenv("GOOGLE_API_KEY"):
    os.environ["GOOGLE_API_KEY"] = "test-google-api-key-for-unit-tests"

from backend.api import main  # noqa: E402
from backend.api.dependencies import get_storage, get_story_generator  # noqa: E402
from backend.api.storage.memory import MemStorage  # noqa: E402
from backend.core.story_generator import StoryGenerator  # noqa: E402

VALID_REPLY = json.dumps({"title": "Ava and the Moonlit Owl", "content": "Once upon a time..."})


class FakeProvider:
    """Text provider double that records prompts and returns a canned reply."""

    def __init__(self, reply: str = VALID_REPLY, error: Exception | None = None, delay: float = 0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    async def generate(self, prompt: str, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store():
    """A fresh, empty story store."""
    return MemStorage()


@pytest.fixture
def fake_provider():
    """A provider returning a valid story reply."""
    return FakeProvider()


@pytest.fixture
def generator(fake_provider):
    """A StoryGenerator backed by the fake provider."""
    return StoryGenerator(fake_provider, timeout=5)


@pytest.fixture
def make_generator():
    """Factory for a (generator, provider) pair with a custom reply, error or delay."""

    def _make(timeout: float = 5, **provider_kwargs):
        provider = FakeProvider(**provider_kwargs)
        return StoryGenerator(provider, timeout=timeout), provider

    return _make


@pytest.fixture
def client(store, generator, monkeypatch):
    """TestClient with a fresh store and the fake-backed generator."""
    monkeypatch.setattr(main, "build_story_generator", lambda: generator)
    main.app.dependency_overrides[get_storage] = lambda: store
    main.app.dependency_overrides[get_story_generator] = lambda: generator

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()
