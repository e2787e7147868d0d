"""
Prompt analyzer: single entrypoint for the rule evaluator.

analyze_prompt runs every rubric check and PII detector on one prompt and
returns an AnalysisResult with score, max score, percentage and grade.
Empty or whitespace-only input short-circuits to an error result; nothing
is raised for any string input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from backend_promptlab.analysis_engine.checks import run_checks
from backend_promptlab.analysis_engine.pii import detect_pii
from backend_promptlab.analysis_engine.rubric import DEFAULT_CONFIG, AnalyzerConfig
from backend_promptlab.analysis_engine.scorer import (
    Grade,
    calculate_grade,
    calculate_percentage,
    calculate_score,
)
from backend_promptlab.promptlab_logging import get_logger

logger = get_logger(__name__)

EMPTY_PROMPT_ERROR = "Empty prompt"

# str.strip() keeps U+FEFF; a BOM-only prompt still counts as empty.
_BOM = "\ufeff"


def _is_blank(prompt: str | None) -> bool:
    return not prompt or not prompt.replace(_BOM, "").strip()


@dataclass
class AnalysisResult:
    """
    Full analysis of one prompt.

    When error is set the remaining fields hold the empty-prompt defaults
    and callers should not render feedback.
    """

    score: int = 0
    max_score: int = 0
    percentage: int = 0
    grade: Grade = Grade.NOVICE
    checks: dict[str, Any] = field(default_factory=dict)
    """Check name -> bool, plus "xmlStructure" -> XmlStructure."""
    pii: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def has_security_issues(self) -> bool:
        return len(self.pii) > 0

    def to_dict(self) -> dict[str, Any]:
        checks = {
            name: value.to_dict() if hasattr(value, "to_dict") else value
            for name, value in self.checks.items()
        }
        out: dict[str, Any] = {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "grade": self.grade.value,
            "checks": checks,
            "pii": list(self.pii),
            "hasSecurityIssues": self.has_security_issues,
        }
        if self.error is not None:
            out["error"] = self.error
        return out


def analyze_prompt(prompt: str | None, config: AnalyzerConfig | None = None) -> AnalysisResult:
    """
    Evaluate a prompt against the rubric and detect PII.

    Args:
        prompt: Raw user input. None, empty and whitespace-only (BOM included) are rejected.
        config: Rule tables and thresholds; uses the defaults if None.

    Returns:
        AnalysisResult; error == "Empty prompt" when there is nothing to analyze.
    """
    if _is_blank(prompt):
        logger.debug("prompt_analysis_skipped", reason="empty_prompt")
        return AnalysisResult(error=EMPTY_PROMPT_ERROR)

    cfg = config or DEFAULT_CONFIG
    checks = run_checks(prompt, cfg)
    pii = detect_pii(prompt, cfg)

    score, max_score = calculate_score(checks)
    percentage = calculate_percentage(score, max_score)
    grade = calculate_grade(percentage, cfg)

    result = AnalysisResult(
        score=score,
        max_score=max_score,
        percentage=percentage,
        grade=grade,
        checks=checks,
        pii=pii,
    )
    logger.debug(
        "prompt_analyzed",
        prompt_length=len(prompt),
        score=score,
        max_score=max_score,
        grade=grade.value,
    )
    if pii:
        logger.info("pii_detected", prompt_length=len(prompt), pii=pii)
    return result


analyze = analyze_prompt
