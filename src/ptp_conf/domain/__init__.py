"""Domain models for ptp-conf.

Pydantic models for parsed configuration text and the artifacts the
renderers hand back to the caller. SyncE device models live with their
algorithms in ``ptp_conf.synce.models``.

Package Structure:
-----------------
- conf: Section, SectionKind, Document, ClockRole
- events: EventSource, Iface

Import Patterns:
---------------
# Direct module imports
from ptp_conf.domain.conf import Document, Section

# Package root imports
from ptp_conf.domain import Document, EventSource
"""

from ptp_conf.domain.conf import GLOBAL_SECTION, NMEA_SECTION, ClockRole, Document, Section, SectionKind, strip_delimiters
from ptp_conf.domain.events import EventSource, Iface

__all__ = [
    # Configuration text
    "GLOBAL_SECTION",
    "NMEA_SECTION",
    "ClockRole",
    "Document",
    "Section",
    "SectionKind",
    "strip_delimiters",
    # Render artifacts
    "EventSource",
    "Iface",
]
