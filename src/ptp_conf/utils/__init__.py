"""Foundation utilities for ptp-conf.

Provides file reading, deterministic hashing, and logging setup. As the
lowest layer, this package must not import any other ptp_conf packages.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

__all__ = [
    "read_text",
    "compute_hash",
    "configure_logging",
]


# ============================================================================
# File I/O
# ============================================================================


def read_text(path: Path | str) -> str:
    """Read a UTF-8 text file.

    Args:
        path: Absolute or relative path to the file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If file does not exist
        OSError: If the file cannot be read
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return f.read()


# ============================================================================
# Hashing
# ============================================================================


def compute_hash(data: str | bytes | dict[str, Any]) -> str:
    """Compute deterministic SHA256 hash of input data.

    For dictionaries, canonicalizes by sorting keys before hashing.

    Args:
        data: String, bytes or dictionary to hash

    Returns:
        SHA256 hex digest (64 characters)
    """
    if isinstance(data, dict):
        canonical = json.dumps(data, sort_keys=True, separators=(",", ":"))
        data_bytes = canonical.encode("utf-8")
    elif isinstance(data, str):
        data_bytes = data.encode("utf-8")
    else:
        data_bytes = data

    return hashlib.sha256(data_bytes).hexdigest()


# ============================================================================
# Logging Configuration
# ============================================================================


def configure_logging(level: str = "INFO", structured: bool = False) -> None:
    """Configure root logger with standardized format.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        structured: Enable JSON structured logging (default: False)

    Raises:
        ValueError: If level is not a logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_JSON_FORMAT if structured else _TEXT_FORMAT, datefmt=_DATE_FORMAT))

    # One handler on the root; repeated calls replace it
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(numeric_level)


_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
