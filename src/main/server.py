#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn using the host, port and
reload flag from the application settings.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info(
        "server.starting",
        host=settings.app.host,
        port=settings.app.port,
        environment=settings.environment.value,
    )
    uvicorn.run(
        "src.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
