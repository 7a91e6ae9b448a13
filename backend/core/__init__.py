# Bedtime Story Generator - Core Domain

# Re-export types for convenient access
from .types import (
    Animal,
    Theme,
    GeneratedStory,
    Story,
    User,
)

__all__ = [
    "Animal",
    "Theme",
    "GeneratedStory",
    "Story",
    "User",
]
