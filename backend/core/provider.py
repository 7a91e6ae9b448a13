"""
Text-generation provider seam.

The generator only needs "prompt in, text out". GeminiTextProvider is the
production implementation; tests substitute a fake with the same shape.
"""

from typing import Protocol

from google import genai
from google.genai.types import GenerateContentConfig


class TextProvider(Protocol):
    """Anything that turns a prompt into a text completion."""

    async def generate(self, prompt: str, system_instruction: str) -> str:
        ...


class GeminiTextProvider:
    """Generate text with a Gemini model via the google-genai async client."""

    def __init__(self, client: genai.Client, model: str):
        self.client = client
        self.model = model

    async def generate(self, prompt: str, system_instruction: str) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type="application/json",
            ),
        )
        # response.text is None when the candidate carries no text parts
        return response.text or ""
