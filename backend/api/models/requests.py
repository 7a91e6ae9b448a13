"""Pydantic models for API requests, plus request validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ...config.story import STORY_CONSTANTS
from ...core.errors import FieldError, StoryValidationError
from ...core.types import Animal, Theme

# Client-facing message per field, whatever the underlying pydantic error
FIELD_MESSAGES = {
    "childName": {
        "missing": "Child's name is required",
        "string_too_short": "Child's name is required",
        "string_too_long": "Name too long",
        "default": "Child's name must be a string",
    },
    "animal": {"default": "Please select an animal"},
    "theme": {"default": "Please select a theme"},
}


class StoryRequest(BaseModel):
    """Request body for generating a new story."""

    # Aliases only: the wire format is camelCase
    model_config = ConfigDict(alias_generator=to_camel)

    child_name: str = Field(
        ...,
        min_length=1,
        max_length=STORY_CONSTANTS["max_child_name_length"],
        description="Name of the child the story is about",
        examples=["Ava"],
    )
    animal: Animal = Field(..., description="Animal companion in the story")
    theme: Theme = Field(..., description="Lesson the story teaches")


def _field_error(error: dict) -> FieldError:
    field = str(error["loc"][0]) if error.get("loc") else "body"
    messages = FIELD_MESSAGES.get(field)
    if messages is None:
        return FieldError(field=field, message=error["msg"])
    return FieldError(field=field, message=messages.get(error["type"], messages["default"]))


def validate_story_request(data: Any) -> StoryRequest:
    """
    Validate an untrusted payload into a StoryRequest.

    Raises:
        StoryValidationError: Listing every rejected field
    """
    if not isinstance(data, dict):
        raise StoryValidationError([FieldError("body", "Request body must be a JSON object")])

    try:
        return StoryRequest.model_validate(data)
    except ValidationError as e:
        errors: list[FieldError] = []
        for error in e.errors():
            field_error = _field_error(error)
            # One message per field is enough for the form
            if all(existing.field != field_error.field for existing in errors):
                errors.append(field_error)
        raise StoryValidationError(errors) from e


def _inline_refs(node: Any, defs: dict) -> Any:
    if isinstance(node, dict):
        if "$ref" in node:
            name = node["$ref"].rsplit("/", 1)[-1]
            rest = {k: v for k, v in node.items() if k != "$ref"}
            return {**_inline_refs(defs[name], defs), **rest}
        # Older pydantic releases wrap a described $ref as a one-item allOf
        if len(node.get("allOf", ())) == 1:
            rest = {k: v for k, v in node.items() if k != "allOf"}
            return {**_inline_refs(node["allOf"][0], defs), **rest}
        return {k: _inline_refs(v, defs) for k, v in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node


def story_request_schema() -> dict:
    """JSON schema of the StoryRequest body (camelCase), with enum refs inlined."""
    schema = StoryRequest.model_json_schema(by_alias=True)
    defs = schema.pop("$defs", {})
    return _inline_refs(schema, defs)
