"""
logging_config.py
Console (and optional file) logging for the examples runner.
Library modules only call logging.getLogger(__name__); the runner calls setup_logging once.
"""
from __future__ import annotations

import logging
from pathlib import Path
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    name: str = "dsplab",
) -> logging.Logger:
    """
    Attach a stdout handler (and a file handler if log_file is given) to the
    package logger. Calling it again replaces the previous handlers.

    Returns the configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.info("Logging initialized (level=%s).", logging.getLevelName(level))
    return logger
