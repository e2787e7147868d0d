"""
FastAPI router: POST /analyze, GET /rubric.

Runs the analysis engine on one prompt per request and returns the analysis
plus composed feedback. Stateless: nothing is stored between requests and
prompt text is never logged.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from backend_promptlab.analysis_engine import (
    AnalyzerConfig,
    analyze_prompt,
    generate_feedback,
)
from backend_promptlab.config import get_settings
from backend_promptlab.promptlab_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["analysis"])


class RubricOverrides(BaseModel):
    """Optional per-request rubric overrides; omitted fields keep server defaults."""

    min_context_length: int | None = Field(None, ge=0, description="contextLength passes when len(prompt) > this")
    persona_keywords: list[str] | None = Field(None, description="Persona keywords (case-insensitive)")
    delimiters: list[str] | None = Field(None, description="Delimiter literals (case-sensitive)")
    output_formats: list[str] | None = Field(None, description="Output format keywords (case-insensitive)")
    cot_phrases: list[str] | None = Field(None, description="Chain-of-thought phrases (case-insensitive)")
    xml_tags: list[str] | None = Field(None, description="XML tag literals (case-sensitive)")
    xml_advanced_min_tags: int | None = Field(None, ge=1, description="Tags needed for the advanced XML bonus")
    pii_keywords: list[str] | None = Field(None, description="Credential keywords (case-insensitive)")
    pii_patterns: dict[str, str] | None = Field(None, description="PII label -> regex, in reporting order")
    grade_expert_pct: int | None = Field(None, ge=0, le=100)
    grade_proficient_pct: int | None = Field(None, ge=0, le=100)
    grade_developing_pct: int | None = Field(None, ge=0, le=100)
    grade_novice_pct: int | None = Field(None, ge=0, le=100)


class AnalyzeRequest(BaseModel):
    """POST /analyze body."""

    prompt: str | None = Field(None, description="Prompt text to analyze; empty yields error 'Empty prompt'")
    config: RubricOverrides | None = Field(None, description="Optional rubric overrides")


def _resolve_config(overrides: RubricOverrides | None) -> AnalyzerConfig:
    base = get_settings().analyzer
    if overrides is None:
        return base
    return base.with_overrides(**overrides.model_dump(exclude_none=True))


@router.post("/analyze")
def analyze(body: AnalyzeRequest) -> dict[str, Any]:
    """
    Analyze one prompt and compose feedback.

    Always 200 for any prompt string; an empty prompt is reported through
    analysis.error rather than an HTTP error.
    """
    prompt = body.prompt or ""
    logger.info("analyze_request", prompt_length=len(prompt), has_overrides=body.config is not None)
    try:
        config = _resolve_config(body.config)
        analysis = analyze_prompt(prompt, config)
        feedback = generate_feedback(analysis)
    except Exception as e:
        logger.exception("analyze_request_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to analyze prompt") from e
    return {
        "analysis": analysis.to_dict(),
        "feedback": feedback.to_dict(),
    }


@router.get("/rubric")
def rubric() -> dict[str, Any]:
    """Return the effective rubric configuration (defaults plus env overrides)."""
    return get_settings().analyzer.to_dict()
