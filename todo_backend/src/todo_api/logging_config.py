"""
Logging setup for the todo service.

``setup_logging`` attaches a console handler to the root logger the first
time it is called. Later calls (for example from tests that build several
apps) only apply the level and leave the existing handlers alone.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler at ``level``."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
