"""
LLM configuration for the Bedtime Story Generator.

Stories are written by a Gemini model through the google-genai client.

Includes:
- A per-call timeout (LLM_TIMEOUT, default 120s) so a hanging provider
  fails the request instead of holding it open
- No retries: a failed call is reported to the client as-is
"""

import os
import logging

from dotenv import find_dotenv, load_dotenv
from google import genai

# Load environment variables from .env file (searches parent directories)
load_dotenv(find_dotenv())

logger = logging.getLogger(__name__)

DEFAULT_STORY_MODEL = "gemini-1.5-flash"
DEFAULT_LLM_TIMEOUT = 120.0


def get_api_key() -> str | None:
    """Return the provider credential, or None if it is not configured."""
    return os.getenv("GOOGLE_API_KEY") or None


def get_genai_client() -> genai.Client:
    """
    Get the Gemini client used for story generation.

    Uses GOOGLE_API_KEY from environment.
    """
    api_key = get_api_key()
    if not api_key:
        raise ValueError("GOOGLE_API_KEY not found in environment. Set it in .env file.")

    return genai.Client(api_key=api_key)


def get_story_model_name() -> str:
    """Get the model ID used for story text."""
    return os.getenv("STORY_MODEL", DEFAULT_STORY_MODEL)


def get_llm_timeout() -> float:
    """Get the provider call timeout in seconds."""
    raw = os.getenv("LLM_TIMEOUT")
    if not raw:
        return DEFAULT_LLM_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"LLM_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ValueError(f"LLM_TIMEOUT must be positive, got {raw!r}")
    return timeout
