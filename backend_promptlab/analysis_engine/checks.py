"""
Rubric checks: six independent predicates over a prompt string.

Each check takes (prompt, config) and is registered in RUBRIC_CHECKS under its
wire name. run_checks evaluates the registry uniformly, so a new criterion is
one function plus one registry entry. No check depends on another's result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from backend_promptlab.analysis_engine.rubric import DEFAULT_CONFIG, AnalyzerConfig

CHECK_CONTEXT_LENGTH = "contextLength"
CHECK_PERSONA = "persona"
CHECK_DELIMITERS = "delimiters"
CHECK_OUTPUT_FORMAT = "outputFormat"
CHECK_CHAIN_OF_THOUGHT = "chainOfThought"
CHECK_XML_STRUCTURE = "xmlStructure"

# Checks worth one point each in the base score.
BASE_CHECKS: tuple[str, ...] = (
    CHECK_CONTEXT_LENGTH,
    CHECK_PERSONA,
    CHECK_DELIMITERS,
    CHECK_OUTPUT_FORMAT,
    CHECK_CHAIN_OF_THOUGHT,
)


@dataclass
class XmlStructure:
    """XML tag usage: which configured tags appear, in configured order."""

    found: bool = False
    tags: list[str] = field(default_factory=list)
    count: int = 0
    is_advanced: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": self.found,
            "tags": list(self.tags),
            "count": self.count,
            "isAdvanced": self.is_advanced,
        }


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    """Exact substring match; blank needles never match."""
    return any(needle in text for needle in needles if needle)


def _contains_any_ci(text: str, needles: tuple[str, ...]) -> bool:
    lower = text.lower()
    return any(needle.lower() in lower for needle in needles if needle)


def check_context_length(prompt: str, config: AnalyzerConfig | None = None) -> bool:
    """True if the prompt is strictly longer than min_context_length."""
    cfg = config or DEFAULT_CONFIG
    return len(prompt) > cfg.min_context_length


def check_persona(prompt: str, config: AnalyzerConfig | None = None) -> bool:
    """True if a persona keyword ("act as", "you are", "role") appears, any case."""
    cfg = config or DEFAULT_CONFIG
    return _contains_any_ci(prompt, cfg.persona_keywords)


def check_delimiters(prompt: str, config: AnalyzerConfig | None = None) -> bool:
    """
    True if any delimiter literal appears.

    The default set includes a bare "<", so any angle bracket (including XML
    tags scored separately) counts as a delimiter.
    """
    cfg = config or DEFAULT_CONFIG
    return _contains_any(prompt, cfg.delimiters)


def check_output_format(prompt: str, config: AnalyzerConfig | None = None) -> bool:
    cfg = config or DEFAULT_CONFIG
    return _contains_any_ci(prompt, cfg.output_formats)


def check_chain_of_thought(prompt: str, config: AnalyzerConfig | None = None) -> bool:
    cfg = config or DEFAULT_CONFIG
    return _contains_any_ci(prompt, cfg.cot_phrases)


def check_xml_structure(prompt: str, config: AnalyzerConfig | None = None) -> XmlStructure:
    """Count configured XML tags present as exact substrings; 3+ is advanced."""
    cfg = config or DEFAULT_CONFIG
    tags = [tag for tag in cfg.xml_tags if tag and tag in prompt]
    return XmlStructure(
        found=len(tags) > 0,
        tags=tags,
        count=len(tags),
        is_advanced=len(tags) >= cfg.xml_advanced_min_tags,
    )


RUBRIC_CHECKS: tuple[tuple[str, Callable[[str, AnalyzerConfig], Any]], ...] = (
    (CHECK_CONTEXT_LENGTH, check_context_length),
    (CHECK_PERSONA, check_persona),
    (CHECK_DELIMITERS, check_delimiters),
    (CHECK_OUTPUT_FORMAT, check_output_format),
    (CHECK_CHAIN_OF_THOUGHT, check_chain_of_thought),
    (CHECK_XML_STRUCTURE, check_xml_structure),
)


def run_checks(prompt: str, config: AnalyzerConfig | None = None) -> dict[str, Any]:
    """
    Evaluate every registered check on the prompt.

    Returns {check_name: bool} for the base checks and an XmlStructure under
    "xmlStructure". Keys follow registry order.
    """
    cfg = config or DEFAULT_CONFIG
    return {name: check(prompt, cfg) for name, check in RUBRIC_CHECKS}
