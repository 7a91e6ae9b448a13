"""Tests for the story generation pipeline."""

import pytest

from backend.api.services.story_service import StoryService
from backend.core.errors import ProviderCallError, ResponseParseError, StoryValidationError

VALID_PAYLOAD = {"childName": "Ava", "animal": "owl", "theme": "courage"}


class TestGenerateStory:
    """Tests for StoryService.generate_story."""

    @pytest.mark.asyncio
    async def test_stores_generated_story(self, store, generator, fake_provider):
        """A valid payload is generated once and stored."""
        service = StoryService(store, generator)

        story = await service.generate_story(VALID_PAYLOAD)

        assert story.id == 1
        assert story.child_name == "Ava"
        assert story.animal == "owl"
        assert story.theme == "courage"
        assert story.title == "Ava and the Moonlit Owl"
        assert story.content == "Once upon a time..."
        assert store.get_story(1) == story
        assert len(fake_provider.calls) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"childName": "", "animal": "owl", "theme": "courage"},
            {"childName": "a" * 51, "animal": "owl", "theme": "courage"},
            {"childName": "Ava", "animal": "dragon", "theme": "courage"},
            {"childName": "Ava", "animal": "owl", "theme": "greed"},
            {},
            None,
        ],
    )
    async def test_invalid_payload_never_calls_provider(self, store, generator, fake_provider, payload):
        """Invalid payloads are rejected before the provider is called."""
        service = StoryService(store, generator)

        with pytest.raises(StoryValidationError):
            await service.generate_story(payload)

        assert fake_provider.calls == []
        assert store.get_story(1) is None

    @pytest.mark.asyncio
    async def test_provider_failure_stores_nothing(self, store, make_generator):
        """A provider failure leaves the store untouched."""
        generator, _ = make_generator(error=ConnectionError("down"))
        service = StoryService(store, generator)

        with pytest.raises(ProviderCallError):
            await service.generate_story(VALID_PAYLOAD)

        assert store.get_stories_by_child("Ava") == []

    @pytest.mark.asyncio
    async def test_parse_failure_stores_nothing(self, store, make_generator):
        """An unusable reply leaves the store untouched."""
        generator, _ = make_generator(reply='{"title": "T"}')
        service = StoryService(store, generator)

        with pytest.raises(ResponseParseError):
            await service.generate_story(VALID_PAYLOAD)

        assert store.get_stories_by_child("Ava") == []
