"""Pydantic models for API requests and responses."""

from .requests import StoryRequest, validate_story_request
from .responses import StoryResponse, ErrorResponse, FieldErrorResponse

__all__ = [
    "StoryRequest",
    "validate_story_request",
    "StoryResponse",
    "ErrorResponse",
    "FieldErrorResponse",
]
