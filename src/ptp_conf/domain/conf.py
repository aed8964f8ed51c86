"""Configuration text domain models.

This module defines the in-memory form of a ptp4l/ts2phc/synce4l style
configuration: an ordered sequence of bracketed sections, each holding
freeform key/value options.

Model Hierarchy:
---------------
- Document
  └── Section (tuple, source order)
      ├── SectionKind: PLAIN | DEVICE | EXTERNAL_SOURCE
      └── options: insertion-ordered dict[str, str]

Section Shapes:
---------------
- ``[eth0]``     plain section (port, ``[global]``, ``[nmea]``, ...)
- ``[<synce1>]`` device marker grouping the sections that follow it
- ``[{gnss}]``   external frequency source of the current device

Key Features:
-------------
- **Immutable**: frozen=True on Section and Document
- **Strict Schema**: extra="forbid" rejects unknown fields
- **Deterministic**: options keep insertion order, so rendering is stable

Usage:
------
>>> from ptp_conf.parser import parse
>>> doc = parse("[global]\\ndomainNumber 24\\n[ens1f0]\\nmasterOnly 0")
>>> doc.clock_role
<ClockRole.OC: 'OC'>
"""

from enum import Enum
import re
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

__all__ = [
    "GLOBAL_SECTION",
    "NMEA_SECTION",
    "ClockRole",
    "Document",
    "Section",
    "SectionKind",
    "strip_delimiters",
]

GLOBAL_SECTION = "[global]"
NMEA_SECTION = "[nmea]"

_DELIMITERS = re.compile(r"[{}<>\[\] ]+")


def strip_delimiters(header: str) -> str:
    """Remove bracket, angle, brace and space characters from a header."""
    return _DELIMITERS.sub("", header)


class SectionKind(str, Enum):
    """Shape of a section header."""

    PLAIN = "plain"
    DEVICE = "device"
    EXTERNAL_SOURCE = "external_source"

    @classmethod
    def from_header(cls, header: str) -> "SectionKind":
        if header.startswith("[<"):
            return cls.DEVICE
        if header.startswith("[{"):
            return cls.EXTERNAL_SOURCE
        return cls.PLAIN


class ClockRole(str, Enum):
    """PTP topology role of the node.

    GM: no slave-facing port configured
    BC: slave-facing port plus more than one other section besides global
    OC: single slave-facing port
    """

    GM = "GM"
    BC = "BC"
    OC = "OC"

    @classmethod
    def classify(cls, has_slave_port: bool, section_count: int) -> "ClockRole":
        if not has_slave_port:
            return cls.GM
        if section_count > 2:
            return cls.BC
        return cls.OC


class Section(BaseModel):
    """One bracketed section with its options.

    Attributes:
        header: Header exactly as written, brackets included (e.g. "[<synce1>]")
        kind: Header shape, decided once at parse time
        name: Header with delimiters removed (e.g. "synce1")
        options: Option key to raw value, in insertion order
    """

    model_config = {"frozen": True, "extra": "forbid"}

    header: str
    kind: SectionKind
    name: str
    options: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_header(cls, header: str, options: Optional[Dict[str, str]] = None) -> "Section":
        return cls(
            header=header,
            kind=SectionKind.from_header(header),
            name=strip_delimiters(header),
            options=dict(options or {}),
        )

    @property
    def is_global(self) -> bool:
        return self.header == GLOBAL_SECTION

    @property
    def is_device(self) -> bool:
        return self.kind is SectionKind.DEVICE


class Document(BaseModel):
    """Parsed configuration.

    Holds exactly one ``[global]`` section. Created by ``ptp_conf.parser.parse``
    and never modified afterwards; renderers build new text from it.

    Attributes:
        sections: Sections in source order
        clock_role: Derived PTP role of the node
        profile_name: Name of the profile this configuration belongs to
    """

    model_config = {"frozen": True, "extra": "forbid"}

    sections: Tuple[Section, ...]
    clock_role: ClockRole
    profile_name: str = ""

    @property
    def global_section(self) -> Section:
        return next(section for section in self.sections if section.is_global)

    @property
    def device_sections(self) -> Tuple[Section, ...]:
        return tuple(section for section in self.sections if section.is_device)
