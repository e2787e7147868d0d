"""
Main entrypoint: run the PromptLab FastAPI server.

Env: API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT, PROMPTLAB_* rubric overrides.

Equivalent: uvicorn backend_promptlab.api_server.app:app --host 0.0.0.0 --port 8000
"""

from backend_promptlab.config import get_settings
from backend_promptlab.promptlab_logging import configure_structlog, get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings and serve the API in the main thread."""
    settings = get_settings()
    configure_structlog(level=settings.log_level)

    from backend_promptlab.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        min_context_length=settings.analyzer.min_context_length,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
