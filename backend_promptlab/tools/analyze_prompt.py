#!/usr/bin/env python3
"""
PromptLab analyzer: score a prompt from the command line.

Reads the prompt from the positional argument, --file, or stdin, runs the
rubric and PII checks, and prints a console report (or JSON with --json).

Usage:
  py -m backend_promptlab.tools.analyze_prompt "You are a tutor. Explain step by step."
  py -m backend_promptlab.tools.analyze_prompt --file prompt.txt --json
  cat prompt.txt | py -m backend_promptlab.tools.analyze_prompt

Exit codes: 0 analyzed, 1 empty prompt, 2 usage error or unreadable input.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from backend_promptlab.analysis_engine import (
    AnalysisResult,
    Feedback,
    analyze_prompt,
    generate_feedback,
)
from backend_promptlab.config import load_analyzer_config
from backend_promptlab.promptlab_logging import configure_structlog, get_logger

logger = get_logger(__name__)

SEP = "=" * 52
SEP_THIN = "-" * 52

_TYPE_BADGES = {
    "success": "[PASS]",
    "fail": "[FAIL]",
    "info": "[TIP ]",
    "security": "[WARN]",
}


def _read_prompt(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.prompt is not None:
        return args.prompt
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    return stdin.read()


def format_report(analysis: AnalysisResult, feedback: Feedback) -> str:
    """Human-readable console report for one analysis."""
    lines = [
        SEP,
        "  PROMPT ANALYSIS REPORT",
        SEP,
        f"  Score:      {analysis.score}/{analysis.max_score} ({analysis.percentage}%)",
        f"  Grade:      {analysis.grade.value}",
        SEP_THIN,
    ]
    for msg in feedback.messages:
        badge = _TYPE_BADGES.get(msg.type.value, "[    ]")
        line = f"  {badge} {msg.title}: {msg.message} ({msg.reference})"
        if msg.learn_more_section:
            line += f" -> #{msg.learn_more_section}"
        lines.append(line)
    for warning in feedback.warnings:
        lines.append(SEP_THIN)
        lines.append(f"  {_TYPE_BADGES['security']} {warning.title}: {warning.message}")
    lines.append(SEP)
    return "\n".join(lines)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score a prompt against the prompt-engineering rubric and flag PII.",
    )
    parser.add_argument("prompt", nargs="?", default=None, help="Prompt text (default: read --file or stdin)")
    parser.add_argument("--file", "-f", default=None, help="Read the prompt from this file")
    parser.add_argument("--json", action="store_true", help="Print analysis and feedback as JSON")
    parser.add_argument(
        "--min-context-length",
        type=int,
        default=None,
        help="Override the context length threshold (characters)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)
    if args.verbose:
        configure_structlog(level="DEBUG", fmt="console")
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.prompt is not None and args.file is not None:
        parser.error("give either a prompt argument or --file, not both")

    try:
        prompt = _read_prompt(args, stdin)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("analyze_prompt_read_failed", file=args.file, error=str(e))
        print(f"Cannot read prompt: {e}", file=sys.stderr)
        return 2

    config = load_analyzer_config().with_overrides(min_context_length=args.min_context_length)
    analysis = analyze_prompt(prompt, config)
    feedback = generate_feedback(analysis)

    if args.json:
        doc = {"analysis": analysis.to_dict(), "feedback": feedback.to_dict()}
        stdout.write(json.dumps(doc, indent=2, ensure_ascii=False) + "\n")
    elif analysis.error:
        stdout.write(f"Nothing to analyze: {analysis.error}\n")
    else:
        stdout.write(format_report(analysis, feedback) + "\n")

    return 1 if analysis.error else 0


if __name__ == "__main__":
    sys.exit(main())
