"""Exception taxonomy for the story pipeline."""

from dataclasses import dataclass


class StoryError(Exception):
    """Base class for all story pipeline errors."""


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field."""

    field: str
    message: str


class StoryValidationError(StoryError):
    """Client input failed validation. Always reported as a 400."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Invalid story request: {fields}")

    def to_dict(self) -> list[dict]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


class GenerationError(StoryError):
    """Story generation failed."""


class ProviderCallError(GenerationError):
    """The call to the text-generation provider itself failed."""


class ResponseParseError(GenerationError):
    """The provider replied, but not with a usable ``{title, content}`` object."""


class StoryNotFoundError(StoryError):
    """No story exists for the requested id."""

    def __init__(self, story_id: str):
        self.story_id = story_id
        super().__init__(f"Story {story_id} not found")
