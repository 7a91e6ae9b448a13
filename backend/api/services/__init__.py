"""Services for story generation."""

from .story_service import StoryService

__all__ = ["StoryService"]
