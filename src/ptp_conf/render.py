"""Render Documents back into daemon configuration text.

Both renderers emit a ``#profile: <name>`` header, a blank line, then every
section header followed by its ``key value`` option lines, in Document order.

- render: ptp4l/ts2phc text plus the interfaces it configures
- render_synce: synce4l text with clock_id injected into device sections

Example:
    >>> from ptp_conf.parser import parse
    >>> text, ifaces = render(parse("[ens1f0]\\nmasterOnly 1", profile_name="gm"))
    >>> print(text)
    #profile: gm
    <BLANKLINE>
    [ens1f0]
    masterOnly 1
    [global]
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .domain.conf import NMEA_SECTION, Document, Section
from .domain.events import EventSource, Iface
from .exceptions import StructuralMismatchError
from .source import parse_bool, resolve_source
from .synce.extract import extract_relations
from .synce.protocols import ClockIdAssigner
from .synce.relations import Relations, assign_clock_ids

__all__ = ["render", "render_synce"]

logger = logging.getLogger(__name__)

TS2PHC_MASTER = "ts2phc.master"
MASTER_ONLY = "masterOnly"
CLOCK_ID = "clock_id"


def render(document: Document) -> Tuple[str, List[Iface]]:
    """Render a ptp4l/ts2phc configuration.

    Every section other than [global] and [nmea] is reported as an interface.
    An interface's event source comes from its own ts2phc.master option,
    else from the last [nmea] section seen before it, else PPS.

    Args:
        document: Parsed configuration

    Returns:
        (configuration text, interfaces in section order). The ordered
        interface mapping is `[iface.name for iface in ifaces]`.
    """
    ifaces: List[Iface] = []
    nmea_source: Optional[EventSource] = None

    for section in document.sections:
        if section.header == NMEA_SECTION:
            if TS2PHC_MASTER in section.options:
                nmea_source = resolve_source(section.options[TS2PHC_MASTER])
            continue
        if section.is_global:
            continue
        ifaces.append(_iface_for(section, nmea_source))

    text = _render_sections(document.profile_name, ((section, section.options) for section in document.sections))
    return text, ifaces


def render_synce(
    document: Document,
    settings: Mapping[str, str],
    assigner: Optional[ClockIdAssigner] = None,
) -> Tuple[str, Relations]:
    """Render a synce4l configuration with clock identifiers.

    Relations are extracted from the document and handed to ``assigner``
    (``assign_clock_ids`` by default) together with ``settings``. The n-th
    device section is then paired with the n-th extracted device; a device
    section without its own clock_id option gets that device's clock_id.

    Args:
        document: Parsed synce4l configuration
        settings: Profile settings mapping used for clock id assignment
        assigner: Clock id assignment collaborator

    Returns:
        (configuration text, relations with clock ids assigned)

    Raises:
        StructuralMismatchError: Device section count differs from extracted devices
    """
    relations = extract_relations(document)
    (assigner or assign_clock_ids)(relations, settings)

    device_sections = document.device_sections
    if len(device_sections) != len(relations):
        raise StructuralMismatchError(expected=len(device_sections), found=len(relations))

    devices = iter(relations.devices)
    rendered = []
    for section in document.sections:
        options = section.options
        if section.is_device:
            options = _with_clock_id(section, next(devices).clock_id)
        rendered.append((section, options))

    return _render_sections(document.profile_name, rendered), relations


# Private helpers


def _render_sections(profile_name: str, sections: Iterable[Tuple[Section, Dict[str, str]]]) -> str:
    lines = [f"#profile: {profile_name}", ""]
    for section, options in sections:
        lines.append(section.header)
        lines.extend(f"{key} {value}" for key, value in options.items())
    return "\n".join(lines)


def _iface_for(section: Section, nmea_source: Optional[EventSource]) -> Iface:
    if TS2PHC_MASTER in section.options:
        source = resolve_source(section.options[TS2PHC_MASTER])
    else:
        source = nmea_source or EventSource.PPS

    is_master = False
    if MASTER_ONLY in section.options:
        parsed = parse_bool(section.options[MASTER_ONLY])
        if parsed is None:
            logger.warning(f"Unparseable masterOnly value {section.options[MASTER_ONLY]!r} in {section.header}, treating as 0")
        is_master = bool(parsed)

    return Iface(name=section.name, source=source, is_master=is_master)


def _with_clock_id(section: Section, clock_id: str) -> Dict[str, str]:
    """Options of a device section with clock_id added when missing."""
    if CLOCK_ID in section.options:
        return section.options
    if not clock_id:
        logger.warning(f"No clock id assigned to SyncE device {section.header}, leaving clock_id unset")
        return section.options
    return {**section.options, CLOCK_ID: clock_id}
