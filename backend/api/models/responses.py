"""Pydantic models for API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...core.types import Story


class StoryResponse(BaseModel):
    """A generated story record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    child_name: str
    animal: str
    theme: str
    title: str
    content: str
    created_at: datetime

    @classmethod
    def from_story(cls, story: Story) -> "StoryResponse":
        return cls(
            id=story.id,
            child_name=story.child_name,
            animal=story.animal,
            theme=story.theme,
            title=story.title,
            content=story.content,
            created_at=story.created_at,
        )


class FieldErrorResponse(BaseModel):
    """A single rejected request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for 400, 404 and 500 responses."""

    message: str
    error: Optional[str] = None
    errors: Optional[list[FieldErrorResponse]] = None
