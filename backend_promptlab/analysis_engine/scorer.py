"""
Scorer: points, percentage and grade from rubric check results.

One point per passing base check (max 5). XML structure adds a bonus to both
score and max: +2 when advanced, otherwise +1 when any tag is found, never both.
Grade: exactly the expert threshold -> Expert; then inclusive lower bounds for
Proficient and Developing; anything below is Novice.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from backend_promptlab.analysis_engine.checks import BASE_CHECKS, CHECK_XML_STRUCTURE, XmlStructure
from backend_promptlab.analysis_engine.rubric import DEFAULT_CONFIG, AnalyzerConfig

XML_ADVANCED_BONUS = 2
XML_PARTIAL_BONUS = 1


class Grade(str, Enum):
    EXPERT = "Expert"
    PROFICIENT = "Proficient"
    DEVELOPING = "Developing"
    NOVICE = "Novice"


def calculate_score(checks: dict[str, Any]) -> tuple[int, int]:
    """Return (score, max_score) for a run_checks() result."""
    score = sum(1 for name in BASE_CHECKS if checks.get(name) is True)
    max_score = len(BASE_CHECKS)

    xml = checks.get(CHECK_XML_STRUCTURE)
    if isinstance(xml, XmlStructure):
        if xml.is_advanced:
            score += XML_ADVANCED_BONUS
            max_score += XML_ADVANCED_BONUS
        elif xml.found:
            score += XML_PARTIAL_BONUS
            max_score += XML_PARTIAL_BONUS

    return score, max_score


def calculate_percentage(score: int, max_score: int) -> int:
    """Score as a whole percentage, halves rounded up; 0 when max_score is 0."""
    if max_score <= 0:
        return 0
    return int(math.floor(score / max_score * 100 + 0.5))


def calculate_grade(percentage: int, config: AnalyzerConfig | None = None) -> Grade:
    cfg = config or DEFAULT_CONFIG
    if percentage == cfg.grade_expert_pct:
        return Grade.EXPERT
    if percentage >= cfg.grade_proficient_pct:
        return Grade.PROFICIENT
    if percentage >= cfg.grade_developing_pct:
        return Grade.DEVELOPING
    return Grade.NOVICE
