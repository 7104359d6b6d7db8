"""Logging configuration for samoyed."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import PurePath
from typing import Mapping

_SENSITIVE_PATTERNS = (
    "/etc/passwd",
    "/etc/shadow",
    "/etc/hosts",
    "/.ssh/",
    "/.gnupg/",
    "/proc/",
    "/sys/",
)


def configure_logging(*, level: str = "WARNING") -> None:
    """
    Configure logging for samoyed.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Logs go to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt="samoyed: %(levelname)s %(name)s - %(message)s",
    )

    logger = logging.getLogger("samoyed")
    logger.setLevel(log_level)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Hook output goes through Git; keep it off the root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name under samoyed namespace.

    Args:
        name: Logger name (will be prefixed with 'samoyed.').

    Returns:
        Logger instance.
    """
    return logging.getLogger(f"samoyed.{name}")


def sanitize_path(path: str | PurePath, environ: Mapping[str, str] | None = None) -> str:
    """
    Render a path for debug logs without leaking the user's layout.

    The home directory becomes ``~``, well-known sensitive locations are
    redacted and other absolute paths keep only their last three components.
    Relative paths are returned unchanged.
    """
    env = os.environ if environ is None else environ
    text = str(path)
    normalized = text.replace("\\", "/")

    if not (PurePath(text).is_absolute() or normalized.startswith("/")):
        return text

    home = env.get("HOME") or env.get("USERPROFILE")
    if home:
        normalized_home = home.replace("\\", "/").rstrip("/")
        if normalized == normalized_home or normalized.startswith(normalized_home + "/"):
            return "~" + normalized[len(normalized_home):]

    for pattern in _SENSITIVE_PATTERNS:
        if pattern in normalized:
            return "[REDACTED_SENSITIVE_PATH]"

    parts = [p for p in normalized.split("/") if p]
    if len(parts) > 3:
        return ".../" + "/".join(parts[-3:])
    return text
