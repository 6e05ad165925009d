"""
Client logging policy.

This module centralizes client logging setup and version injection into log
message formats.
"""

from __future__ import annotations

import logging

from flappybingus_client import __version__

__all__ = ["logging_setup", "logFormatWithVersion_get"]


def logging_setup(level: str, log_format: str, log_file: str | None) -> None:
    """
    Configure client logging handlers and format.

    Args:
        level:
            Log level name.
        log_format:
            Base logging format string.
        log_file:
            Optional log-file path.

    Raises:
        ValueError:
            Raised when the level name is not a logging level.
    """
    level_value = getattr(logging, level.upper(), None)
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown log level: {level}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level_value,
        format=logFormatWithVersion_get(log_format),
        handlers=handlers,
    )


def logFormatWithVersion_get(log_format: str) -> str:
    """
    Inject runtime version tag into timestamped log format.

    Args:
        log_format:
            Base formatter string.

    Returns:
        Formatter string with embedded version token.
    """
    return log_format.replace("%(asctime)s", f"%(asctime)s [v{__version__}]")
