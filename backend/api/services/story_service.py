"""Story service: validate, generate, store."""

import time
from typing import Any

from ...core.errors import GenerationError, StoryValidationError
from ...core.story_generator import StoryGenerator
from ...core.types import Story
from ..logging import story_logger
from ..models.requests import validate_story_request
from ..storage.memory import MemStorage


class StoryService:
    """Runs the story generation pipeline for a single request."""

    def __init__(self, storage: MemStorage, generator: StoryGenerator):
        self.storage = storage
        self.generator = generator

    async def generate_story(self, payload: Any) -> Story:
        """
        Generate and store a story for an untrusted request payload.

        The provider is never called for a payload that fails validation.

        Raises:
            StoryValidationError: If the payload is invalid
            ProviderCallError: If the provider call fails
            ResponseParseError: If the provider reply is unusable
        """
        try:
            request = validate_story_request(payload)
        except StoryValidationError as e:
            story_logger.validation_failed([err.field for err in e.errors])
            raise

        child_name = request.child_name
        animal = request.animal.value
        theme = request.theme.value

        story_logger.generation_started(child_name, animal, theme)
        start_time = time.time()

        try:
            generated = await self.generator.generate(child_name, request.animal, request.theme)
        except GenerationError as e:
            story_logger.generation_failed(child_name, e, time.time() - start_time)
            raise

        story = self.storage.create_story(
            child_name=child_name,
            animal=animal,
            theme=theme,
            title=generated.title,
            content=generated.content,
        )
        story_logger.generation_completed(story.id, time.time() - start_time)
        return story
