"""
Environment variable loading and validation for PromptLab.

- API_HOST / API_PORT: bind address for the HTTP API (default 0.0.0.0:8000)
- PROMPTLAB_*: rubric overrides (see settings.py)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from backend_promptlab.promptlab_logging import get_logger

logger = get_logger(__name__)

# Project root: config is backend_promptlab/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_promptlab_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def get_int_env(name: str, default: int) -> int:
    """Integer env var; blank or malformed values fall back to default with a warning."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("env_invalid_int", name=name, value=raw[:32], default=default)
        return default


def get_list_env(name: str) -> tuple[str, ...] | None:
    """
    Comma-separated env var as a tuple of stripped items.

    Returns None when unset so callers keep their defaults. A set-but-empty
    value returns an empty tuple (the matching check then always fails).
    """
    raw = os.getenv(name)
    if raw is None:
        return None
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def get_api_host() -> str:
    load_promptlab_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    load_promptlab_env()
    return get_int_env("API_PORT", DEFAULT_API_PORT)
