"""Extract SyncE device/port relations from a parsed Document.

Sections are read in order:

1. A device marker ``[<synce1>]`` starts a new device. Every port section
   after it, up to the next device marker, belongs to that device.
2. An external source marker ``[{gnss}]`` names the current device's
   external frequency source.
3. Any other section except ``[global]`` is a port of the current device.

Port sections appearing before the first device marker belong to no device
and are dropped.

Example:
    >>> from ptp_conf.parser import parse
    >>> doc = parse("[<dev1>]\\nnetwork_option 2\\n[eth0]\\n[eth1]\\n[<dev2>]\\n[eth2]")
    >>> [(d.name, d.ifaces, d.network_option) for d in extract_relations(doc)]
    [('dev1', ['eth0', 'eth1'], 2), ('dev2', ['eth2'], 1)]
"""

from functools import reduce
import logging
import re
from typing import NamedTuple, Optional

from ..domain.conf import Document, Section, SectionKind
from .models import EXTENDED_TLV_DISABLED, NETWORK_OPTION_1, SyncEDeviceConfig
from .relations import Relations

__all__ = ["extract_relations"]

logger = logging.getLogger(__name__)

# Decimal integer as accepted by the daemon, no separators or non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


class _Accumulator(NamedTuple):
    """Fold state: relations built so far and the device being collected."""

    relations: Relations
    device: SyncEDeviceConfig


def extract_relations(document: Document) -> Relations:
    """Group port sections under their device markers.

    Args:
        document: Parsed configuration

    Returns:
        Relations with devices and their ports in source order
    """
    initial = _Accumulator(relations=Relations(), device=SyncEDeviceConfig())
    final = reduce(_fold_section, document.sections, initial)
    relations = _flush(final)

    logger.debug(f"Extracted {len(relations)} SyncE device(s) from profile '{document.profile_name}'")
    return relations


# Private helpers


def _fold_section(acc: _Accumulator, section: Section) -> _Accumulator:
    if section.kind is SectionKind.DEVICE:
        relations = _flush(acc)
        return _Accumulator(relations=relations, device=_new_device(section))

    if section.kind is SectionKind.EXTERNAL_SOURCE:
        device = acc.device.model_copy(update={"external_source": section.name})
        return acc._replace(device=device)

    if section.is_global:
        return acc

    if not acc.device.name:
        logger.debug(f"Port section {section.header} precedes any device section, skipping")
    device = acc.device.model_copy(update={"ifaces": [*acc.device.ifaces, section.name]})
    return acc._replace(device=device)


def _flush(acc: _Accumulator) -> Relations:
    """Register the device being collected if it has a name."""
    if acc.device.name:
        acc.relations.register_device_config(acc.device)
    return acc.relations


def _new_device(section: Section) -> SyncEDeviceConfig:
    return SyncEDeviceConfig(
        name=section.name,
        network_option=_int_option(section, "network_option", NETWORK_OPTION_1),
        extended_tlv=_int_option(section, "extended_tlv", EXTENDED_TLV_DISABLED),
    )


def _int_option(section: Section, key: str, default: int) -> int:
    """Read an integer option, keeping the default when it does not parse."""
    raw: Optional[str] = section.options.get(key)
    if raw is None:
        return default
    value = raw.strip()
    if _INTEGER.fullmatch(value):
        return int(value)
    logger.error(f"Error parsing `{key}` value {raw!r} in {section.header}, setting {key} to default {default}")
    return default
