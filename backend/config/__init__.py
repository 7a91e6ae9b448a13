"""
Configuration module for the Bedtime Story Generator.
"""

from .llm import get_api_key, get_genai_client, get_llm_timeout, get_story_model_name
from .story import STORY_CONSTANTS, THEME_LESSONS

__all__ = [
    # LLM
    "get_api_key",
    "get_genai_client",
    "get_llm_timeout",
    "get_story_model_name",
    # Story
    "STORY_CONSTANTS",
    "THEME_LESSONS",
]
