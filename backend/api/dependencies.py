"""FastAPI dependency injection for services and storage."""

from typing import Annotated

from fastapi import Depends, Request

from ..config import get_genai_client, get_llm_timeout, get_story_model_name
from ..core.provider import GeminiTextProvider
from ..core.story_generator import StoryGenerator
from .services.story_service import StoryService
from .storage.memory import MemStorage, storage


def build_story_generator() -> StoryGenerator:
    """Build the production story generator.

    Raises:
        ValueError: If GOOGLE_API_KEY is not configured
    """
    provider = GeminiTextProvider(get_genai_client(), get_story_model_name())
    return StoryGenerator(provider, timeout=get_llm_timeout())


# Storage - process-wide singleton
def get_storage() -> MemStorage:
    """Get the in-memory story store."""
    return storage


# Generator - built once at startup and kept on app state
def get_story_generator(request: Request) -> StoryGenerator:
    """Get the story generator created during application startup."""
    return request.app.state.story_generator


# Service - depends on storage and generator
def get_story_service(
    store: Annotated[MemStorage, Depends(get_storage)],
    generator: Annotated[StoryGenerator, Depends(get_story_generator)],
) -> StoryService:
    """Get a StoryService instance with injected storage and generator."""
    return StoryService(store, generator)


# Type aliases for cleaner route signatures
Storage = Annotated[MemStorage, Depends(get_storage)]
Service = Annotated[StoryService, Depends(get_story_service)]
