"""
FastAPI server: stateless API over the prompt analysis engine.

Exposes POST /analyze (analysis + feedback), GET /rubric and GET /health.
No database and no background workers; every request is independent.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from backend_promptlab import __version__
from backend_promptlab.api_server.analyze import router as analyze_router
from backend_promptlab.promptlab_logging import get_logger

logger = get_logger(__name__)


app = FastAPI(
    title="Backend PromptLab API",
    description="Scores prompts against a prompt-engineering rubric and flags PII.",
    version=__version__,
)

app.include_router(analyze_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
