"""Logging setup; curses owns the terminal, so logs go to a file only."""

from __future__ import annotations

from datetime import datetime
import os

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {file}:{line} | {function} | {message}"


def init_logger(log_dir: str = "logs", level: str = "WARNING") -> str:
    """Send log records to a timestamped file under ``log_dir``; returns its path."""
    logger.remove()

    os.makedirs(log_dir, exist_ok=True)
    # Dashes instead of colons keep the name valid on Windows.
    current_ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_filepath = os.path.join(log_dir, f"sl_{current_ts}.log")

    logger.add(
        log_filepath,
        level=level,
        retention="7 days",
        encoding="utf-8",
        format=LOG_FORMAT,
    )
    return log_filepath


__all__ = ["init_logger"]
