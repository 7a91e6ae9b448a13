"""Tests for structured logging."""

import json
import logging

from backend.api.logging import JSONFormatter, story_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("story_generation", logging.INFO, __file__, 1, "hello %s", ("Ava",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_base_fields(self):
        """Every record carries timestamp, level, logger and message."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "story_generation"
        assert data["message"] == "hello Ava"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields(self):
        """Structured extras are copied into the JSON payload."""
        data = json.loads(JSONFormatter().format(_record(story_id=7, stage="completed", duration=1.5)))

        assert data["story_id"] == 7
        assert data["stage"] == "completed"
        assert data["duration"] == 1.5


class TestStoryLogger:
    """Tests for StoryLogger events."""

    def test_generation_completed_logs_story_id(self, caplog):
        """Completion logs the story id and rounded duration."""
        with caplog.at_level(logging.INFO, logger="story_generation"):
            story_logger.generation_completed(3, 2.5)

        record = caplog.records[-1]
        assert record.story_id == 3
        assert record.duration == 2.5

    def test_generation_failed_logs_error_type(self, caplog):
        """Failure logs the error type and child name."""
        with caplog.at_level(logging.ERROR, logger="story_generation"):
            story_logger.generation_failed("Ava", RuntimeError("boom"), 0.5)

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.child_name == "Ava"
