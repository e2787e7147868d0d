"""
Feedback composer: turn an AnalysisResult into chat-style messages.

One message per rubric check, in rubric order. Hard requirements that are
missing produce "fail"; missing tips (delimiters, chain of thought) produce
"info". XML structure yields "success" when advanced, "info" when partial and
nothing when absent. Non-success messages carry learnMoreSection, the handbook
anchor that teaches the concept. PII adds one "security" warning.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from backend_promptlab.analysis_engine.analyzer import AnalysisResult
from backend_promptlab.analysis_engine.checks import (
    CHECK_CHAIN_OF_THOUGHT,
    CHECK_CONTEXT_LENGTH,
    CHECK_DELIMITERS,
    CHECK_OUTPUT_FORMAT,
    CHECK_PERSONA,
    CHECK_XML_STRUCTURE,
    XmlStructure,
)


class MessageType(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    INFO = "info"
    SECURITY = "security"


# Handbook anchors rendered by the presentation layer.
SECTION_FOUNDATIONS = "foundations"
SECTION_CONTEXT = "context"
SECTION_STRUCTURE = "structure"
SECTION_REASONING = "reasoning"
SECTION_SAFETY = "safety"

SEVERITY_HIGH = "high"


@dataclass
class FeedbackMessage:
    type: MessageType
    title: str
    message: str
    reference: str
    learn_more_section: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "reference": self.reference,
        }
        if self.learn_more_section is not None:
            out["learnMoreSection"] = self.learn_more_section
        return out


@dataclass
class SecurityWarning:
    title: str
    message: str
    severity: str = SEVERITY_HIGH
    learn_more_section: str = SECTION_SAFETY
    type: MessageType = MessageType.SECURITY

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "severity": self.severity,
            "learnMoreSection": self.learn_more_section,
        }


@dataclass
class Feedback:
    messages: list[FeedbackMessage] = field(default_factory=list)
    warnings: list[SecurityWarning] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "warnings": [w.to_dict() for w in self.warnings],
            "summary": dict(self.summary),
        }


# check -> (pass message, missing message)
_CHECK_MESSAGES: tuple[tuple[str, FeedbackMessage, FeedbackMessage], ...] = (
    (
        CHECK_CONTEXT_LENGTH,
        FeedbackMessage(
            type=MessageType.SUCCESS,
            title="Context Loaded",
            message='Good length. You are providing enough "state" for the model.',
            reference="Karpathy",
        ),
        FeedbackMessage(
            type=MessageType.FAIL,
            title="Context Missing",
            message='This prompt is too short. Remember, the prompt is the "RAM". Add background info.',
            reference="Karpathy",
            learn_more_section=SECTION_CONTEXT,
        ),
    ),
    (
        CHECK_PERSONA,
        FeedbackMessage(
            type=MessageType.SUCCESS,
            title="Persona Detected",
            message="You successfully assigned a role to the AI.",
            reference="Miessler",
        ),
        FeedbackMessage(
            type=MessageType.FAIL,
            title="No Persona",
            message='Who is the AI supposed to be? Try starting with "You are an expert in..."',
            reference="Miessler",
            learn_more_section=SECTION_CONTEXT,
        ),
    ),
    (
        CHECK_DELIMITERS,
        FeedbackMessage(
            type=MessageType.SUCCESS,
            title="Delimiters Used",
            message="Great job separating instructions from data.",
            reference="Ng/Fulford",
        ),
        FeedbackMessage(
            type=MessageType.INFO,
            title="Tip",
            message='If you are pasting text to be summarized/edited, wrap it in triple quotes (""") or XML tags.',
            reference="Ng/Fulford",
            learn_more_section=SECTION_FOUNDATIONS,
        ),
    ),
    (
        CHECK_OUTPUT_FORMAT,
        FeedbackMessage(
            type=MessageType.SUCCESS,
            title="Output Format Defined",
            message="Good engineering.",
            reference="Business Logic",
        ),
        FeedbackMessage(
            type=MessageType.FAIL,
            title="No Format",
            message='Always specify how you want the data (e.g., "Output as a Markdown Table").',
            reference="Business Logic",
            learn_more_section=SECTION_FOUNDATIONS,
        ),
    ),
    (
        CHECK_CHAIN_OF_THOUGHT,
        FeedbackMessage(
            type=MessageType.SUCCESS,
            title="CoT Reasoning",
            message="You're encouraging the AI to think step-by-step.",
            reference="Schulhoff",
        ),
        FeedbackMessage(
            type=MessageType.INFO,
            title="Advanced Tip",
            message='For complex tasks, add "Think step-by-step" to improve reasoning accuracy.',
            reference="Schulhoff",
            learn_more_section=SECTION_REASONING,
        ),
    ),
)


def _xml_message(xml: XmlStructure | None) -> FeedbackMessage | None:
    if xml is None or not xml.found:
        return None
    if xml.is_advanced:
        return FeedbackMessage(
            type=MessageType.SUCCESS,
            title="XML Structure",
            message=f"Professional-grade architecture! Found {xml.count} structured sections.",
            reference="Anthropic",
        )
    return FeedbackMessage(
        type=MessageType.INFO,
        title="Partial Structure",
        message="You're using some XML tags. See Section 4 for the complete template.",
        reference="Anthropic",
        learn_more_section=SECTION_STRUCTURE,
    )


def _pii_warning(pii: list[str]) -> SecurityWarning:
    labels = list(dict.fromkeys(pii))
    return SecurityWarning(
        title="SAFETY ALERT",
        message=(
            f"Detected possible PII: {', '.join(labels)}. Review Section 7 on data "
            "sanitization before submitting prompts with sensitive information."
        ),
    )


def generate_feedback(analysis: AnalysisResult) -> Feedback:
    """
    Build feedback messages, security warnings and summary for one analysis.

    Pure transform: the analysis is not modified and no state is kept. An
    errored analysis yields no messages and an all-zero summary.
    """
    feedback = Feedback(
        summary={
            "score": analysis.score,
            "maxScore": analysis.max_score,
            "percentage": analysis.percentage,
            "grade": analysis.grade.value,
        }
    )
    if analysis.error is not None:
        return feedback

    checks = analysis.checks
    for name, passed_msg, missing_msg in _CHECK_MESSAGES:
        template = passed_msg if checks.get(name) else missing_msg
        # Templates are shared module state; hand out copies.
        feedback.messages.append(replace(template))

    xml_msg = _xml_message(checks.get(CHECK_XML_STRUCTURE))
    if xml_msg is not None:
        feedback.messages.append(xml_msg)

    if analysis.pii:
        feedback.warnings.append(_pii_warning(analysis.pii))

    return feedback


compose = generate_feedback
