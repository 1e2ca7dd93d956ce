"""Configuration from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gpt-4o-mini"


def get_openai_api_key() -> str:
    """OpenAI API key (required for AI features)."""
    return os.environ.get("OPENAI_API_KEY", "").strip()


def get_openai_model() -> str:
    """Chat model used for AI suggestions. Default: gpt-4o-mini."""
    return os.environ.get("OPENAI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL


def get_openai_base_url() -> str | None:
    """Optional OpenAI-compatible endpoint; None means the OpenAI default."""
    return os.environ.get("OPENAI_BASE_URL", "").strip() or None


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000
