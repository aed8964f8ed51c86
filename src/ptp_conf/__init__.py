"""ptp-conf: linuxptp daemon configuration parsing and rendering.

Turns ptp4l/ts2phc/synce4l configuration text into a Document, classifies
the node's clock role, extracts SyncE device/port relations, and renders
Documents back into configuration text.

Example:
    >>> from ptp_conf import parse, render_synce
    >>> doc = parse(profile.synce4l_conf, profile_name=profile.name)
    >>> text, relations = render_synce(doc, profile.ptp_settings)
"""

from .domain import ClockRole, Document, EventSource, Iface, Section, SectionKind
from .exceptions import (
    ConfigError,
    MalformedSectionError,
    OptionOutsideSectionError,
    ParseError,
    ProfileError,
    PtpConfError,
    RenderError,
    StructuralMismatchError,
)
from .parser import parse
from .render import render, render_synce
from .source import resolve_source
from .synce import Relations, SyncEDeviceConfig, assign_clock_ids, extract_relations

__version__ = "0.1.0"

__all__ = [
    # Operations
    "parse",
    "render",
    "render_synce",
    "resolve_source",
    "extract_relations",
    "assign_clock_ids",
    # Models
    "ClockRole",
    "Document",
    "EventSource",
    "Iface",
    "Section",
    "SectionKind",
    "Relations",
    "SyncEDeviceConfig",
    # Exceptions
    "PtpConfError",
    "ParseError",
    "MalformedSectionError",
    "OptionOutsideSectionError",
    "RenderError",
    "StructuralMismatchError",
    "ProfileError",
    "ConfigError",
]
