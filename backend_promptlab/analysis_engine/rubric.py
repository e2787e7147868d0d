"""
Rubric configuration for prompt analysis.

Keyword sets, XML tags, PII patterns and grade thresholds used by the
checks, PII detectors and scorer. Passed explicitly to every analysis call;
defaults reproduce the workbench rubric. Frozen so one instance can be
shared between concurrent callers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any

DEFAULT_MIN_CONTEXT_LENGTH = 50

DEFAULT_PERSONA_KEYWORDS: tuple[str, ...] = ("act as", "you are", "role")

DEFAULT_DELIMITERS: tuple[str, ...] = ('"""', "```", "<")

DEFAULT_OUTPUT_FORMATS: tuple[str, ...] = (
    "json",
    "csv",
    "table",
    "markdown",
    "list",
    "code",
    "python",
    "html",
    "tree",
)

DEFAULT_COT_PHRASES: tuple[str, ...] = (
    "step by step",
    "step-by-step",
    "think through",
    "reasoning",
    "explain your thinking",
    "show your work",
    "break it down",
    "take a deep breath",
)

DEFAULT_XML_TAGS: tuple[str, ...] = (
    "<system_role>",
    "<context>",
    "<task>",
    "<constraints>",
    "<instructions>",
    "<output>",
    "<examples>",
)

# Tags needed for the full XML bonus.
DEFAULT_XML_ADVANCED_MIN_TAGS = 3

# (label, regex) in reporting order. Digit classes are matched ASCII-only.
DEFAULT_PII_PATTERNS: tuple[tuple[str, str], ...] = (
    ("email address", r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.(com|org|edu|net|gov)"),
    ("phone number", r"(\d{3}[-.\s]??\d{3}[-.\s]??\d{4}|\(\d{3}\)\s*\d{3}[-.\s]??\d{4})"),
    ("SSN", r"\d{3}-\d{2}-\d{4}"),
    ("IP address", r"\b(?:\d{1,3}\.){3}\d{1,3}\b"),
)

PII_CREDENTIALS_LABEL = "credentials"

DEFAULT_PII_KEYWORDS: tuple[str, ...] = (
    "password",
    "api key",
    "token",
    "ssn",
    "social security",
)

GRADE_EXPERT_PCT = 100
GRADE_PROFICIENT_PCT = 75
GRADE_DEVELOPING_PCT = 50
GRADE_NOVICE_PCT = 0


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Thresholds and rule tables for one analysis.

    Keyword matching lowercases both sides; delimiter and XML tag matching is
    exact and case-sensitive. An empty set makes its check always fail.
    """

    # contextLength passes only when len(prompt) is strictly greater.
    min_context_length: int = DEFAULT_MIN_CONTEXT_LENGTH
    persona_keywords: tuple[str, ...] = DEFAULT_PERSONA_KEYWORDS
    delimiters: tuple[str, ...] = DEFAULT_DELIMITERS
    output_formats: tuple[str, ...] = DEFAULT_OUTPUT_FORMATS
    cot_phrases: tuple[str, ...] = DEFAULT_COT_PHRASES
    xml_tags: tuple[str, ...] = DEFAULT_XML_TAGS
    xml_advanced_min_tags: int = DEFAULT_XML_ADVANCED_MIN_TAGS

    pii_patterns: tuple[tuple[str, str], ...] = DEFAULT_PII_PATTERNS
    pii_keywords: tuple[str, ...] = DEFAULT_PII_KEYWORDS

    # Expert needs an exact match; the others are inclusive lower bounds.
    grade_expert_pct: int = GRADE_EXPERT_PCT
    grade_proficient_pct: int = GRADE_PROFICIENT_PCT
    grade_developing_pct: int = GRADE_DEVELOPING_PCT
    grade_novice_pct: int = GRADE_NOVICE_PCT

    def with_overrides(self, **overrides: Any) -> AnalyzerConfig:
        """
        Return a copy with the given fields replaced.

        None values are ignored so optional request fields can be passed through.
        Sequences are converted to tuples to keep the copy hashable and immutable.
        """
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "pii_patterns":
                items = value.items() if isinstance(value, dict) else value
                value = tuple((str(label), str(pattern)) for label, pattern in items)
            elif isinstance(value, (list, set, frozenset)):
                value = tuple(value)
            changes[key] = value
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["pii_patterns"] = [{"label": label, "pattern": pattern} for label, pattern in self.pii_patterns]
        for key, value in out.items():
            if isinstance(value, tuple):
                out[key] = list(value)
        return out


DEFAULT_CONFIG = AnalyzerConfig()
