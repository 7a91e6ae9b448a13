"""FastAPI application for the Bedtime Story Generator."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.errors import (
    ProviderCallError,
    ResponseParseError,
    StoryNotFoundError,
    StoryValidationError,
)
from .config import API_PREFIX
from .dependencies import build_story_generator
from .routes import stories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    # Startup: fail fast if the provider credential is missing
    app.state.story_generator = build_story_generator()
    logger.info("Story generator initialized")

    yield


app = FastAPI(
    title="Bedtime Story Generator API",
    description="""
Generate personalized bedtime stories for children.

## Workflow
1. POST `/api/stories/generate` with a child's name, an animal and a theme
2. GET `/api/stories/{id}` to fetch a story again
3. GET `/api/stories?childName=...` to list a child's stories
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoryValidationError)
async def validation_error_handler(request: Request, exc: StoryValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid story request", "errors": exc.to_dict()},
    )


@app.exception_handler(ProviderCallError)
async def provider_error_handler(request: Request, exc: ProviderCallError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Failed to generate story. Please try again.", "error": str(exc)},
    )


@app.exception_handler(ResponseParseError)
async def parse_error_handler(request: Request, exc: ResponseParseError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Story generator returned an invalid response.", "error": str(exc)},
    )


@app.exception_handler(StoryNotFoundError)
async def not_found_handler(request: Request, exc: StoryNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Story not found"},
    )


# Include routers
app.include_router(stories.router, prefix=f"{API_PREFIX}/stories", tags=["Stories"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
