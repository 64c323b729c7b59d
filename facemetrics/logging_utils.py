# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
import sys

import structlog

_CONFIGURED = False


def _stderr_logger(*args):
    # resolved per logger so redirected streams are honored
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure structlog for the process (ISO timestamps, JSON lines on stderr)."""
    global _CONFIGURED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )
    _CONFIGURED = True


def get_logger(name: str = __name__):
    """Return a configured structlog logger."""
    if not _CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
