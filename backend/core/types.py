"""
Centralized domain types for the Bedtime Story Generator.

Enums and record dataclasses shared by the generator, the store and the
API layer live here to keep data flow explicit and avoid circular imports.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


# =============================================================================
# Story Options
# =============================================================================


class Animal(str, Enum):
    """Animal companion featured alongside the child."""

    LION = "lion"
    ELEPHANT = "elephant"
    RABBIT = "rabbit"
    BEAR = "bear"
    OWL = "owl"
    FOX = "fox"
    GIRAFFE = "giraffe"
    PENGUIN = "penguin"


class Theme(str, Enum):
    """Moral lesson the story teaches."""

    FRIENDSHIP = "friendship"
    COURAGE = "courage"
    SHARING = "sharing"
    HONESTY = "honesty"
    PERSEVERANCE = "perseverance"
    EMPATHY = "empathy"
    CURIOSITY = "curiosity"


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class GeneratedStory:
    """Title and text parsed from a provider reply."""

    title: str
    content: str


@dataclass(frozen=True)
class Story:
    """A generated story as held by the store.

    Records are immutable; the store assigns ``id`` and ``created_at``.
    """

    id: int
    child_name: str
    animal: str
    theme: str
    title: str
    content: str
    created_at: datetime


@dataclass(frozen=True)
class User:
    """Account record kept for interface completeness. Not used by stories."""

    id: int
    username: str
    password: str
