"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging
import sys

from pms.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr, and to a file when one is configured.

    Output goes to stderr so it never mixes with command output on stdout.
    Does nothing when the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )
