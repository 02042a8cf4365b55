"""Opt-in console logging; arrayx itself never logs or configures logging."""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Render structlog events on the console at INFO, or DEBUG if verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name) if name else structlog.get_logger()
