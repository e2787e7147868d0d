"""
Structured logging for PromptLab: ISO timestamp, level, event_type, logger name.

Every module logs through get_logger(__name__) with a snake_case event name and
keyword context. Prompt text is never logged; pass prompt_length, score, labels.

Output goes to stderr so the CLI can keep stdout for its report or JSON.
LOG_LEVEL (default INFO) and LOG_FORMAT (json | console, default json) are read
at import; main.py and the CLI may call configure_structlog() again to change them.

Depends only on stdlib logging and structlog; no backend_promptlab imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _level_value(level: str) -> int:
    return getattr(logging, level.strip().upper(), logging.INFO)


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _rename_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


class _StderrLogger(structlog.PrintLogger):
    """PrintLogger on the sys.stderr current at log time, carrying the module name."""

    def __init__(self, name: str = ""):
        super().__init__(file=sys.stderr)
        self.name = name


def _logger_factory(*args: Any) -> _StderrLogger:
    return _StderrLogger(str(args[0]) if args else "")


def configure_structlog(level: str | None = None, fmt: str | None = None) -> None:
    """(Re)configure structlog. Arguments default to LOG_LEVEL / LOG_FORMAT."""
    fmt = (fmt or LOG_FORMAT).strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    if fmt == "json":
        processors.append(_rename_event)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level or LOG_LEVEL)),
        context_class=dict,
        logger_factory=_logger_factory,
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("prompt_analyzed", prompt_length=120, score=5, grade="Expert")
    """
    # Unbound lazy proxy: each call resolves the current config and stderr.
    return structlog.get_logger(name)
