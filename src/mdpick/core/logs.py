"""Loguru sink setup for the mdpick CLI."""

import sys

from loguru import logger


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Args:
        level: Minimum level name (e.g. "INFO", "WARNING").
        verbose: Force DEBUG regardless of ``level``.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else level.upper(),
        format="<level>{level: <8}</level> {message}",
    )
