"""
Backend PromptLab: prompt-engineering workbench engine.

Scores a prompt against a rubric of prompting best practices, flags PII,
and composes chat-style feedback for a rendering layer. Rule evaluation,
scoring and feedback live in analysis_engine; api_server and tools are thin
delivery surfaces over it.
"""

__version__ = "0.1.0"
