"""
Application settings and environment configuration.

Builds a typed Settings object from environment variables (and .env):
API bind address, log level and the rubric AnalyzerConfig.

Rubric overrides:
  PROMPTLAB_MIN_CONTEXT_LENGTH   integer
  PROMPTLAB_PERSONA_KEYWORDS     comma-separated
  PROMPTLAB_OUTPUT_FORMATS       comma-separated
  PROMPTLAB_COT_PHRASES          comma-separated
  PROMPTLAB_XML_TAGS             comma-separated
  PROMPTLAB_PII_KEYWORDS         comma-separated

Delimiters and PII regexes are code-only; they contain commas and quotes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from backend_promptlab.analysis_engine.rubric import DEFAULT_CONFIG, AnalyzerConfig
from backend_promptlab.config.env import (
    get_api_host,
    get_api_port,
    get_int_env,
    get_list_env,
    load_promptlab_env,
)

_LIST_OVERRIDES = {
    "persona_keywords": "PROMPTLAB_PERSONA_KEYWORDS",
    "output_formats": "PROMPTLAB_OUTPUT_FORMATS",
    "cot_phrases": "PROMPTLAB_COT_PHRASES",
    "xml_tags": "PROMPTLAB_XML_TAGS",
    "pii_keywords": "PROMPTLAB_PII_KEYWORDS",
}


@dataclass
class Settings:
    """Runtime settings for the API, CLI and analyzer."""

    api_host: str
    api_port: int
    log_level: str = "INFO"
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)


def load_analyzer_config() -> AnalyzerConfig:
    """AnalyzerConfig from defaults plus any PROMPTLAB_* overrides in env."""
    load_promptlab_env()
    overrides: dict[str, object] = {
        "min_context_length": get_int_env(
            "PROMPTLAB_MIN_CONTEXT_LENGTH", DEFAULT_CONFIG.min_context_length
        ),
    }
    for field_name, env_name in _LIST_OVERRIDES.items():
        overrides[field_name] = get_list_env(env_name)
    return DEFAULT_CONFIG.with_overrides(**overrides)


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh on every call; nothing is cached so tests can monkeypatch env.
    """
    load_promptlab_env()
    return Settings(
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper() or "INFO",
        analyzer=load_analyzer_config(),
    )
