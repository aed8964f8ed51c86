"""Event source and interface models produced by the ptp4l renderer."""

from enum import Enum

from pydantic import BaseModel

__all__ = ["EventSource", "Iface"]


class EventSource(str, Enum):
    """Time source feeding a port's events."""

    GNSS = "GNSS"
    PPS = "PPS"


class Iface(BaseModel):
    """Interface discovered while rendering a ptp4l/ts2phc configuration.

    Attributes:
        name: Interface name (section name without brackets)
        source: Event source resolved from ts2phc.master or the [nmea] section
        is_master: Value of the section's masterOnly flag
        phc_id: Hardware clock id, filled in by the caller after rendering
    """

    model_config = {"extra": "forbid"}

    name: str
    source: EventSource = EventSource.PPS
    is_master: bool = False
    phc_id: str = ""
