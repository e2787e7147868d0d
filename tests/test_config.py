"""
Tests for env-driven configuration (config.env, config.settings).
"""

from __future__ import annotations

from backend_promptlab.analysis_engine.rubric import DEFAULT_CONFIG
from backend_promptlab.config import get_settings, load_analyzer_config
from backend_promptlab.config.env import get_int_env, get_list_env


def test_defaults_without_env(clean_env):
    settings = get_settings()
    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8000
    assert settings.analyzer == DEFAULT_CONFIG


def test_api_bind_from_env(clean_env):
    clean_env.setenv("API_HOST", "127.0.0.1")
    clean_env.setenv("API_PORT", "9001")
    settings = get_settings()
    assert (settings.api_host, settings.api_port) == ("127.0.0.1", 9001)


def test_min_context_length_override(clean_env):
    clean_env.setenv("PROMPTLAB_MIN_CONTEXT_LENGTH", "80")
    assert load_analyzer_config().min_context_length == 80


def test_malformed_int_falls_back_to_default(clean_env):
    clean_env.setenv("PROMPTLAB_MIN_CONTEXT_LENGTH", "fifty")
    assert load_analyzer_config().min_context_length == 50
    assert get_int_env("PROMPTLAB_MIN_CONTEXT_LENGTH", 7) == 7


def test_list_overrides_are_comma_separated_and_stripped(clean_env):
    clean_env.setenv("PROMPTLAB_COT_PHRASES", " reason aloud ,, show steps ")
    assert load_analyzer_config().cot_phrases == ("reason aloud", "show steps")


def test_empty_list_env_disables_check(clean_env):
    clean_env.setenv("PROMPTLAB_PII_KEYWORDS", "")
    cfg = load_analyzer_config()
    assert cfg.pii_keywords == ()
    # Untouched fields keep defaults.
    assert cfg.persona_keywords == DEFAULT_CONFIG.persona_keywords


def test_unset_list_env_returns_none(clean_env):
    assert get_list_env("PROMPTLAB_XML_TAGS") is None


def test_settings_are_read_fresh(clean_env):
    assert get_settings().analyzer.min_context_length == 50
    clean_env.setenv("PROMPTLAB_MIN_CONTEXT_LENGTH", "10")
    assert get_settings().analyzer.min_context_length == 10
