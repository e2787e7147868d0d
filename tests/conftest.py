"""
Pytest fixtures for PromptLab tests. Sample prompts at each skill level plus an API client.
"""

from __future__ import annotations

import pytest

NOVICE_PROMPT = "Summarize this."

DEVELOPING_PROMPT = '''You are a helpful assistant.
Summarize the following text:
"""
The prompt engineering field has evolved significantly over the past few years.
"""'''

PROFICIENT_PROMPT = '''You are an expert technical writer with experience in AI education.

Summarize the text below for high school students:
"""
The prompt engineering field has evolved significantly over the past few years.
Modern LLMs require careful context management and clear instructions.
"""

Output as a markdown bullet list with 3-5 points.'''

EXPERT_PROMPT = '''<system_role>
You are a senior technical writer with 10 years of experience in AI education.
</system_role>

<context>
The audience is high school students learning prompt engineering for the first time.
They understand basic computer concepts but are new to AI.
</context>

<task>
Summarize the following text. Think step-by-step about the key points that would be most relevant for beginners.
</task>

<input>
"""
The prompt engineering field has evolved significantly over the past few years.
Modern LLMs require careful context management and clear instructions.
Professional prompt engineers use structured approaches like XML tagging and Chain of Thought reasoning.
"""
</input>

<constraints>
- Output as a markdown bullet list
- Use simple vocabulary (avoid jargon)
- Maximum 5 bullets
- Include one practical example
</constraints>'''

PII_EMAIL_PROMPT = "Send this analysis to john.doe@gmail.com when complete."

PII_MULTIPLE_PROMPT = """Contact john.doe@example.com or call 555-123-4567.
    IP address: 192.168.1.1
    Password: secretPass123"""


@pytest.fixture
def sample_prompts() -> dict[str, str]:
    return {
        "novice": NOVICE_PROMPT,
        "developing": DEVELOPING_PROMPT,
        "proficient": PROFICIENT_PROMPT,
        "expert": EXPERT_PROMPT,
        "pii_email": PII_EMAIL_PROMPT,
        "pii_multiple": PII_MULTIPLE_PROMPT,
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Drop rubric and API env overrides so tests see built-in defaults."""
    for name in (
        "PROMPTLAB_MIN_CONTEXT_LENGTH",
        "PROMPTLAB_PERSONA_KEYWORDS",
        "PROMPTLAB_OUTPUT_FORMATS",
        "PROMPTLAB_COT_PHRASES",
        "PROMPTLAB_XML_TAGS",
        "PROMPTLAB_PII_KEYWORDS",
        "API_HOST",
        "API_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def client(clean_env):
    """FastAPI TestClient over the stateless analysis API."""
    from fastapi.testclient import TestClient

    from backend_promptlab.api_server.server import app

    return TestClient(app)
