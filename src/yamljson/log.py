"""Logging setup for yamljson: leveled, colorized, time-stamped output."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


PACKAGE_LOGGER = "yamljson"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

# Numeric thresholds of the shell-era logger: DEBUG=0 … ERROR=3
_NUMERIC_LEVELS = {
    "0": logging.DEBUG,
    "1": logging.INFO,
    "2": logging.WARNING,
    "3": logging.ERROR,
}


def resolve_level(level: str | int) -> int:
    """Map ``"INFO"``, ``"1"``, ``1`` or ``logging.INFO`` to a logging level."""
    if isinstance(level, int):
        if 0 <= level <= 3:
            return _NUMERIC_LEVELS[str(level)]
        return level
    text = level.strip().upper()
    if text in _NUMERIC_LEVELS:
        return _NUMERIC_LEVELS[text]
    resolved = logging.getLevelName(text)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: str | int = "INFO",
    silent: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the ``yamljson`` logger with Rich console output.

    An optional *log_file* receives the same records without colour codes.
    In *silent* mode every record is dropped.
    """
    # Above CRITICAL: mutes the yamljson.* child loggers as well
    threshold = logging.CRITICAL + 1 if silent else resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        log_time_format=f"[{DATE_FORMAT}]",
    )
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", DATE_FORMAT)
        )
        logger.addHandler(file_handler)

    logger.setLevel(threshold)
    logger.propagate = False
    return logger


def log_success(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log *msg* at the SUCCESS level (between INFO and WARNING)."""
    logger.log(SUCCESS, msg, *args)
