"""Event source resolution for ts2phc.master style flags.

Example:
    >>> resolve_source("true")
    <EventSource.GNSS: 'GNSS'>
    >>> resolve_source("garbage")
    <EventSource.PPS: 'PPS'>
"""

import logging
from typing import Optional

from .domain.events import EventSource

__all__ = ["parse_bool", "resolve_source"]

logger = logging.getLogger(__name__)

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: str) -> Optional[bool]:
    """Parse a daemon-style boolean literal.

    Args:
        value: Raw option value (surrounding whitespace ignored)

    Returns:
        True/False for a recognised literal, None otherwise
    """
    value = value.strip()
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    return None


def resolve_source(flag: str) -> EventSource:
    """Map a ts2phc.master flag to its event source.

    Unparseable flags fall back to PPS.
    """
    is_master = parse_bool(flag)
    if is_master is None:
        logger.debug(f"Unparseable ts2phc.master value {flag!r}, using PPS")
        return EventSource.PPS
    return EventSource.GNSS if is_master else EventSource.PPS
