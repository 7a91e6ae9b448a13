"""Story endpoints."""

import re
from typing import Optional

from fastapi import APIRouter, Query, Request

from ...core.errors import FieldError, StoryNotFoundError, StoryValidationError
from ..dependencies import Service, Storage
from ..models.requests import story_request_schema
from ..models.responses import ErrorResponse, StoryResponse

router = APIRouter()

# ASCII digits only; int() alone would also take "1_0", " 1 " and non-ASCII digits
_STORY_ID = re.compile(r"-?[0-9]+")


@router.post(
    "/generate",
    response_model=StoryResponse,
    summary="Generate a story",
    description="Validate the request, generate a bedtime story and store it.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": story_request_schema()}},
        }
    },
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Story generation failed"},
    },
)
async def generate_story(request: Request, service: Service):
    """Generate a new bedtime story."""
    # Parsed by hand so malformed bodies get the same 400 as invalid fields
    try:
        payload = await request.json()
    except ValueError:
        raise StoryValidationError([FieldError("body", "Request body must be valid JSON")])

    story = await service.generate_story(payload)
    return StoryResponse.from_story(story)


@router.get(
    "/{story_id}",
    response_model=StoryResponse,
    summary="Get a story",
    responses={404: {"model": ErrorResponse, "description": "Story not found"}},
)
async def get_story(story_id: str, store: Storage):
    """Get a story by ID. Ids that are not plain integers are simply not found."""
    if not _STORY_ID.fullmatch(story_id):
        raise StoryNotFoundError(story_id)

    story = store.get_story(int(story_id))
    if story is None:
        raise StoryNotFoundError(story_id)

    return StoryResponse.from_story(story)


@router.get(
    "",
    response_model=list[StoryResponse],
    summary="List a child's stories",
    responses={400: {"model": ErrorResponse, "description": "childName missing"}},
)
async def list_stories(
    store: Storage,
    child_name: Optional[str] = Query(
        default=None, alias="childName", description="Child name (case-insensitive)"
    ),
):
    """List all stories for a child."""
    if not child_name:
        raise StoryValidationError([FieldError("childName", "Child name is required")])

    return [StoryResponse.from_story(s) for s in store.get_stories_by_child(child_name)]
