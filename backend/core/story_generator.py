"""
Bedtime story generation from a child's name, an animal and a theme.

The provider is asked for a JSON object with "title" and "content". Its
reply is not trusted: calling the provider and parsing the reply are two
separate failure surfaces (ProviderCallError vs ResponseParseError).
"""

import asyncio
import json
import logging
import re

from ..config.story import STORY_CONSTANTS, THEME_LESSONS
from .errors import ProviderCallError, ResponseParseError
from .provider import TextProvider
from .types import Animal, GeneratedStory, Theme

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a magical storyteller who creates beautiful, educational bedtime "
    "stories for children. Your stories are always positive, gentle, and filled "
    "with wonder. Give every story a different title. Always respond with valid JSON."
)

_LEADING_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```$")


def build_story_prompt(child_name: str, animal: Animal, theme: Theme) -> str:
    """Build the story prompt for one child, animal and theme."""
    lesson = THEME_LESSONS[Theme(theme)]
    animal_name = Animal(animal).value
    words = f"{STORY_CONSTANTS['min_word_count']}-{STORY_CONSTANTS['max_word_count']}"
    ages = f"{STORY_CONSTANTS['min_reader_age']}-{STORY_CONSTANTS['max_reader_age']}"

    return f"""Create a magical bedtime story for a child named {child_name}. The story should:

- Feature {child_name} as the main character alongside a wise and friendly {animal_name}
- Teach a lesson about {lesson}
- Be exactly {words} words long
- Have a gentle, soothing tone perfect for bedtime
- Include magical elements like enchanted forests, talking animals, or mystical places
- End with {child_name} learning the important lesson and feeling peaceful for sleep
- Use descriptive, imaginative language that sparks wonder
- Be age-appropriate for children {ages} years old

Please respond with a strict JSON object containing exactly these keys:
- "title": A magical title for the story
- "content": The full story text ({words} words)

Make the story unique, engaging, and filled with wonder. Include vivid descriptions of magical settings and gentle adventures that teach the chosen lesson naturally through the story."""


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapped around the reply, if any."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_story_response(text: str) -> GeneratedStory:
    """
    Parse a provider reply into a GeneratedStory.

    Only a code fence around the JSON is tolerated. Any other text before
    or after the object makes the reply invalid.

    Raises:
        ResponseParseError: If the reply is not a JSON object with non-empty
            string "title" and "content" fields
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ResponseParseError("Story response was empty")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Story response was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f"Story response was not a JSON object (got {type(data).__name__})"
        )

    missing = [
        key
        for key in ("title", "content")
        if not isinstance(data.get(key), str) or not data[key].strip()
    ]
    if missing:
        raise ResponseParseError(f"Story response missing required fields: {', '.join(missing)}")

    return GeneratedStory(title=data["title"].strip(), content=data["content"].strip())


class StoryGenerator:
    """
    Generate a bedtime story through a text provider.

    Args:
        provider: Text-generation provider
        timeout: Seconds to wait for the provider before giving up
    """

    def __init__(self, provider: TextProvider, timeout: float = 120.0):
        self.provider = provider
        self.timeout = timeout

    async def generate(self, child_name: str, animal: Animal, theme: Theme) -> GeneratedStory:
        """
        Generate a story.

        Raises:
            ProviderCallError: If the provider call fails or times out
            ResponseParseError: If the reply cannot be parsed into a story
        """
        prompt = build_story_prompt(child_name, animal, theme)

        try:
            text = await asyncio.wait_for(
                self.provider.generate(prompt, SYSTEM_INSTRUCTION),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise ProviderCallError(
                f"Story provider did not respond within {self.timeout:g}s"
            ) from e
        except Exception as e:
            raise ProviderCallError(f"Story provider call failed: {e}") from e

        logger.debug(f"Received {len(text)} characters from story provider")
        return parse_story_response(text)
