"""
PII detection: flag personal or sensitive data pasted into a prompt.

Detectors are (label, matcher) pairs evaluated independently; any number may
fire. Regex detectors come first in configured order, then the credentials
keyword detector. Matching is permissive: the 10-digit phone
branch matches any long digit run and IP octets are not range-checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from backend_promptlab.analysis_engine.rubric import (
    DEFAULT_CONFIG,
    PII_CREDENTIALS_LABEL,
    AnalyzerConfig,
)
from backend_promptlab.promptlab_logging import get_logger

logger = get_logger(__name__)

# Email and TLD matching ignore case; \d and \b stay ASCII-only.
PII_REGEX_FLAGS = re.IGNORECASE | re.ASCII


@dataclass(frozen=True)
class PiiDetector:
    label: str
    matches: Callable[[str], bool]


def _regex_detector(label: str, pattern: str) -> PiiDetector | None:
    try:
        compiled = re.compile(pattern, PII_REGEX_FLAGS)
    except re.error as e:
        logger.warning("pii_pattern_invalid", label=label, error=str(e))
        return None
    return PiiDetector(label=label, matches=lambda text: compiled.search(text) is not None)


def _keyword_detector(label: str, keywords: tuple[str, ...]) -> PiiDetector:
    needles = tuple(k.lower() for k in keywords if k)

    def _matches(text: str) -> bool:
        lower = text.lower()
        return any(needle in lower for needle in needles)

    return PiiDetector(label=label, matches=_matches)


def build_pii_detectors(config: AnalyzerConfig | None = None) -> list[PiiDetector]:
    """Build the ordered detector list from config. Invalid regexes are skipped."""
    cfg = config or DEFAULT_CONFIG
    detectors: list[PiiDetector] = []
    for label, pattern in cfg.pii_patterns:
        detector = _regex_detector(label, pattern)
        if detector is not None:
            detectors.append(detector)
    detectors.append(_keyword_detector(PII_CREDENTIALS_LABEL, cfg.pii_keywords))
    return detectors


def detect_pii(prompt: str, config: AnalyzerConfig | None = None) -> list[str]:
    """
    Return PII category labels found in the prompt.

    Labels are deduplicated and listed in detector order:
    email address, phone number, SSN, IP address, credentials.
    """
    found: list[str] = []
    if not prompt:
        return found
    for detector in build_pii_detectors(config):
        if detector.label in found:
            continue
        if detector.matches(prompt):
            found.append(detector.label)
    return found
