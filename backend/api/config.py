"""API configuration constants.

Single source of truth for settings used across the API layer.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

# Route prefix shared with the web client
API_PREFIX = "/api"

# Logging
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

# Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
