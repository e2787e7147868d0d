"""
Analysis engine package: prompt rubric evaluation and feedback.

Applies the rubric checks and PII detectors to a prompt, scores and grades
it, and composes feedback messages for the rendering layer. Pure functions;
configuration is passed explicitly as an AnalyzerConfig.
"""

from backend_promptlab.analysis_engine.rubric import (
    DEFAULT_CONFIG,
    AnalyzerConfig,
)
from backend_promptlab.analysis_engine.checks import (
    XmlStructure,
    check_chain_of_thought,
    check_context_length,
    check_delimiters,
    check_output_format,
    check_persona,
    check_xml_structure,
    run_checks,
)
from backend_promptlab.analysis_engine.pii import PiiDetector, build_pii_detectors, detect_pii
from backend_promptlab.analysis_engine.scorer import (
    Grade,
    calculate_grade,
    calculate_percentage,
    calculate_score,
)
from backend_promptlab.analysis_engine.analyzer import (
    EMPTY_PROMPT_ERROR,
    AnalysisResult,
    analyze,
    analyze_prompt,
)
from backend_promptlab.analysis_engine.feedback import (
    Feedback,
    FeedbackMessage,
    MessageType,
    SecurityWarning,
    compose,
    generate_feedback,
)

__all__ = [
    "DEFAULT_CONFIG",
    "AnalyzerConfig",
    "XmlStructure",
    "check_chain_of_thought",
    "check_context_length",
    "check_delimiters",
    "check_output_format",
    "check_persona",
    "check_xml_structure",
    "run_checks",
    "PiiDetector",
    "build_pii_detectors",
    "detect_pii",
    "Grade",
    "calculate_grade",
    "calculate_percentage",
    "calculate_score",
    "EMPTY_PROMPT_ERROR",
    "AnalysisResult",
    "analyze",
    "analyze_prompt",
    "Feedback",
    "FeedbackMessage",
    "MessageType",
    "SecurityWarning",
    "compose",
    "generate_feedback",
]
