"""
Configuration management for Backend PromptLab.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for API and rubric configuration.
"""

from backend_promptlab.config.settings import Settings, get_settings, load_analyzer_config  # noqa: F401

__all__ = ["Settings", "get_settings", "load_analyzer_config"]
