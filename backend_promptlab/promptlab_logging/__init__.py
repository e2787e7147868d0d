"""
Structured logging for Backend PromptLab.

JSON logs with timestamp, event_type and keyword context.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_promptlab.promptlab_logging.logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
