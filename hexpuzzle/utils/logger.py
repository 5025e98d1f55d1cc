"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"
ROOT_LOGGER_NAME = "hexpuzzle"


def parse_level(value: Union[int, str]) -> int:
    """Turn ``"debug"``, ``"INFO"``, ``"10"`` or an int into a logging level."""

    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single stream handler on the root logger.

    Search steps log at DEBUG, so anything above that keeps the solver quiet
    while still reporting generation attempts and cross-check results.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(parse_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``hexpuzzle`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
