"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story generation events.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# LogRecord attributes copied into the JSON payload when set via `extra`
EXTRA_FIELDS = ("story_id", "child_name", "animal", "theme", "stage", "duration", "error_type")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class StoryLogger:
    """Logger for story generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_generation")

    def generation_started(self, child_name: str, animal: str, theme: str) -> None:
        self.logger.info(
            "Story generation started",
            extra={"child_name": child_name, "animal": animal, "theme": theme, "stage": "started"},
        )

    def generation_completed(self, story_id: int, duration: float) -> None:
        self.logger.info(
            "Story generation completed",
            extra={"story_id": story_id, "stage": "completed", "duration": round(duration, 2)},
        )

    def generation_failed(self, child_name: str, error: Exception, duration: float) -> None:
        self.logger.error(
            f"Story generation failed: {error}",
            extra={
                "child_name": child_name,
                "stage": "failed",
                "error_type": type(error).__name__,
                "duration": round(duration, 2),
            },
            exc_info=error,
        )

    def validation_failed(self, fields: list[str]) -> None:
        self.logger.info(
            f"Story request rejected: {', '.join(fields)}",
            extra={"stage": "validation", "error_type": "StoryValidationError"},
        )


# Global story logger instance
story_logger = StoryLogger()
