"""Storage module for story records."""

from .memory import MemStorage, storage

__all__ = ["MemStorage", "storage"]
