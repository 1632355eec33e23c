from __future__ import annotations

import logging
import os
from pathlib import Path

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def log_level() -> str:
    level = os.getenv("GENERAL_PHONES_LOG_LEVEL", "INFO").strip().upper()

    if level not in _LOG_LEVELS:
        raise RuntimeError(
            f"GENERAL_PHONES_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}"
        )

    return level


def assets_dir() -> Path | None:
    """Directory served at /images, or None when assets are hosted elsewhere."""
    value = os.getenv("GENERAL_PHONES_ASSETS_DIR")

    if not value:
        return None

    path = Path(value)
    if not path.is_dir():
        raise RuntimeError(f"GENERAL_PHONES_ASSETS_DIR is not a directory: {value}")

    return path


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def server_host() -> str:
    return os.getenv("GENERAL_PHONES_HOST", "127.0.0.1")


def server_port() -> int:
    value = os.getenv("GENERAL_PHONES_PORT", "8000")

    try:
        port = int(value)
    except ValueError:
        raise RuntimeError(f"GENERAL_PHONES_PORT must be an integer, got {value!r}") from None

    if not 0 < port < 65536:
        raise RuntimeError(f"GENERAL_PHONES_PORT out of range: {port}")

    return port
