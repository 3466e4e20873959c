"""
Logging setup for applications embedding the tree.

Library modules only create loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import sys

from sparse_merkle.config.runtime import SMTConfig


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging with a stderr handler and optional file."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def setup_logging_from_config(config: SMTConfig) -> None:
    setup_logging(config.log_level, config.log_file)
