"""Entry point that serves the todo API with uvicorn.

Host, port and reload behaviour come from ``Settings`` (``HOST``,
``PORT`` and ``RELOAD`` environment variables).

Usage:
    todo-server
    python -m todo_api.server
"""
import logging

import uvicorn

from .logging_config import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the application until interrupted."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Application running on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
