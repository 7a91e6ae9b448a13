"""Tests for provider configuration and startup checks."""

import pytest
from fastapi.testclient import TestClient

from backend.api import main
from backend.config.llm import (
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_STORY_MODEL,
    get_genai_client,
    get_llm_timeout,
    get_story_model_name,
)


class TestLlmConfig:
    """Tests for provider settings read from the environment."""

    def test_missing_api_key_raises(self, monkeypatch):
        """Building a client without GOOGLE_API_KEY fails."""
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            get_genai_client()

    def test_blank_api_key_raises(self, monkeypatch):
        """A blank GOOGLE_API_KEY counts as missing."""
        monkeypatch.setenv("GOOGLE_API_KEY", "")

        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            get_genai_client()

    def test_model_default_and_override(self, monkeypatch):
        """STORY_MODEL overrides the default model."""
        monkeypatch.delenv("STORY_MODEL", raising=False)
        assert get_story_model_name() == DEFAULT_STORY_MODEL

        monkeypatch.setenv("STORY_MODEL", "gemini-2.5-flash")
        assert get_story_model_name() == "gemini-2.5-flash"

    def test_timeout_default_and_override(self, monkeypatch):
        """LLM_TIMEOUT overrides the default timeout."""
        monkeypatch.delenv("LLM_TIMEOUT", raising=False)
        assert get_llm_timeout() == DEFAULT_LLM_TIMEOUT

        monkeypatch.setenv("LLM_TIMEOUT", "30")
        assert get_llm_timeout() == 30.0

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_timeout_raises(self, monkeypatch, value):
        """Non-numeric or non-positive timeouts are rejected."""
        monkeypatch.setenv("LLM_TIMEOUT", value)

        with pytest.raises(ValueError, match="LLM_TIMEOUT"):
            get_llm_timeout()


class TestStartup:
    """Tests for the application startup check."""

    def test_app_refuses_to_start_without_api_key(self, monkeypatch):
        """The app fails at startup when the credential is missing."""
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            with TestClient(main.app):
                pass

    def test_startup_builds_story_generator(self, client):
        """Startup stores a generator on app state."""
        assert main.app.state.story_generator is not None
