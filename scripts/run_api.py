#!/usr/bin/env python3
"""Run the FastAPI server for the Bedtime Story Generator."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn  # noqa: E402

from backend.api.config import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from backend.api.logging import configure_logging  # noqa: E402


def main():
    """Run the API server."""
    configure_logging(json_format=LOG_FORMAT == "json", level=LOG_LEVEL)
    uvicorn.run(
        "backend.api.main:app",
        host=API_HOST,
        port=API_PORT,
        log_config=None,  # Keep the structured handlers configured above
    )


if __name__ == "__main__":
    main()
