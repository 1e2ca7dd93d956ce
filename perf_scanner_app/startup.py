"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from .config import get_openai_api_key

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Warn if .env or OPENAI_API_KEY is missing; scanning still works without them."""
    env_exists = Path(".env").exists()
    key_set = bool(get_openai_api_key())
    if not env_exists and not key_set:
        logger.warning(".env file not found and OPENAI_API_KEY not set. AI features need an api_key per request.")
    elif not key_set:
        logger.warning("OPENAI_API_KEY not set in .env. AI features need an api_key per request.")
