"""Logging configuration."""

from __future__ import annotations

import logging


def configure_logging(level_name: str | None = "INFO") -> None:
    """Configure structured-ish logs on the root logger.

    Note: Using stdlib logging only (no extra deps).
    """

    level = getattr(logging, str(level_name or "INFO").upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Reduce noisy loggers if needed
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
