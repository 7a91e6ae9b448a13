"""In-memory story and user storage.

Records live only for the lifetime of the process. Ids come from private
counters starting at 1 and are never reused.
"""

import threading
from datetime import datetime, timezone
from typing import Optional

from ...core.types import Story, User


class MemStorage:
    """Thread-safe in-memory store for stories (and vestigial users)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._stories: dict[int, Story] = {}
        self._users: dict[int, User] = {}
        self._next_story_id = 1
        self._next_user_id = 1

    # -------------------------------------------------------------------------
    # Stories
    # -------------------------------------------------------------------------

    def create_story(
        self,
        child_name: str,
        animal: str,
        theme: str,
        title: str,
        content: str,
    ) -> Story:
        """Store a new story under the next id and return it."""
        with self._lock:
            story = Story(
                id=self._next_story_id,
                child_name=child_name,
                animal=animal,
                theme=theme,
                title=title,
                content=content,
                created_at=datetime.now(timezone.utc),
            )
            self._stories[story.id] = story
            self._next_story_id += 1
        return story

    def get_story(self, story_id: int) -> Optional[Story]:
        """Get a story by id, or None."""
        with self._lock:
            return self._stories.get(story_id)

    def get_stories_by_child(self, child_name: str) -> list[Story]:
        """All stories for a child (case-insensitive), in creation order."""
        wanted = child_name.casefold()
        with self._lock:
            return [s for s in self._stories.values() if s.child_name.casefold() == wanted]

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, username: str, password: str) -> User:
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise ValueError(f"Username {username!r} already exists")
            user = User(id=self._next_user_id, username=username, password=password)
            self._users[user.id] = user
            self._next_user_id += 1
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)


# Global store instance
storage = MemStorage()
