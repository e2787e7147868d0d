"""
Pytest tests for the PromptLab HTTP API (POST /analyze, GET /rubric, GET /health).
"""

from __future__ import annotations


# --- Health ---


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# --- Analyze ---


def test_analyze_expert_prompt(client, sample_prompts):
    r = client.post("/analyze", json={"prompt": sample_prompts["expert"]})
    assert r.status_code == 200
    data = r.json()
    analysis = data["analysis"]
    assert analysis["score"] == 7
    assert analysis["maxScore"] == 7
    assert analysis["percentage"] == 100
    assert analysis["grade"] == "Expert"
    assert analysis["hasSecurityIssues"] is False
    assert "error" not in analysis
    assert analysis["checks"]["xmlStructure"]["isAdvanced"] is True
    assert analysis["checks"]["xmlStructure"]["count"] == 4
    assert data["feedback"]["summary"] == {"score": 7, "maxScore": 7, "percentage": 100, "grade": "Expert"}
    assert len(data["feedback"]["messages"]) == 6


def test_analyze_pii_prompt_returns_warning(client, sample_prompts):
    r = client.post("/analyze", json={"prompt": sample_prompts["pii_multiple"]})
    assert r.status_code == 200
    data = r.json()
    assert data["analysis"]["pii"] == ["email address", "phone number", "IP address", "credentials"]
    assert data["analysis"]["hasSecurityIssues"] is True
    warnings = data["feedback"]["warnings"]
    assert len(warnings) == 1
    assert warnings[0]["type"] == "security"
    assert warnings[0]["severity"] == "high"
    assert warnings[0]["learnMoreSection"] == "safety"


def test_analyze_fail_messages_carry_section(client, sample_prompts):
    r = client.post("/analyze", json={"prompt": sample_prompts["novice"]})
    messages = r.json()["feedback"]["messages"]
    assert messages[0] == {
        "type": "fail",
        "title": "Context Missing",
        "message": messages[0]["message"],
        "reference": "Karpathy",
        "learnMoreSection": "context",
    }


def test_analyze_empty_prompt_is_not_an_http_error(client):
    r = client.post("/analyze", json={"prompt": "   "})
    assert r.status_code == 200
    data = r.json()
    assert data["analysis"]["error"] == "Empty prompt"
    assert data["analysis"]["checks"] == {}
    assert data["feedback"]["messages"] == []
    assert data["feedback"]["warnings"] == []


def test_analyze_missing_and_null_prompt(client):
    for body in ({}, {"prompt": None}):
        r = client.post("/analyze", json=body)
        assert r.status_code == 200
        assert r.json()["analysis"]["error"] == "Empty prompt"


def test_analyze_with_overrides(client):
    prompt = "Pretend to be a pirate and summarize the news of the day for me."
    r = client.post(
        "/analyze",
        json={"prompt": prompt, "config": {"persona_keywords": ["pretend to be"], "min_context_length": 500}},
    )
    assert r.status_code == 200
    checks = r.json()["analysis"]["checks"]
    assert checks["persona"] is True
    assert checks["contextLength"] is False


def test_overrides_do_not_persist(client):
    prompt = "Pretend to be a pirate and summarize the news of the day for me."
    client.post("/analyze", json={"prompt": prompt, "config": {"persona_keywords": ["pretend to be"]}})
    r = client.post("/analyze", json={"prompt": prompt})
    assert r.json()["analysis"]["checks"]["persona"] is False


def test_analyze_with_custom_pii_pattern(client):
    r = client.post(
        "/analyze",
        json={"prompt": "Ship to 90210 today", "config": {"pii_patterns": {"zip code": r"\b\d{5}\b"}}},
    )
    assert r.json()["analysis"]["pii"] == ["zip code"]


def test_analyze_rejects_bad_override_type(client):
    r = client.post("/analyze", json={"prompt": "hi", "config": {"min_context_length": "lots"}})
    assert r.status_code == 422


def test_analyze_rejects_out_of_range_threshold(client):
    r = client.post("/analyze", json={"prompt": "hi", "config": {"grade_proficient_pct": 150}})
    assert r.status_code == 422


def test_analyze_internal_error_returns_500(client, monkeypatch):
    import backend_promptlab.api_server.analyze as analyze_module

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(analyze_module, "analyze_prompt", boom)
    r = client.post("/analyze", json={"prompt": "Summarize this."})
    assert r.status_code == 500
    assert r.json() == {"detail": "Failed to analyze prompt"}


# --- Rubric ---


def test_rubric_returns_defaults(client):
    r = client.get("/rubric")
    assert r.status_code == 200
    data = r.json()
    assert data["min_context_length"] == 50
    assert data["persona_keywords"] == ["act as", "you are", "role"]
    assert data["delimiters"] == ['"""', "```", "<"]
    assert data["xml_advanced_min_tags"] == 3
    assert data["pii_patterns"][0]["label"] == "email address"
    assert data["grade_expert_pct"] == 100


def test_rubric_reflects_env_overrides(client, clean_env):
    clean_env.setenv("PROMPTLAB_MIN_CONTEXT_LENGTH", "120")
    clean_env.setenv("PROMPTLAB_PERSONA_KEYWORDS", "pretend to be, roleplay")
    data = client.get("/rubric").json()
    assert data["min_context_length"] == 120
    assert data["persona_keywords"] == ["pretend to be", "roleplay"]
