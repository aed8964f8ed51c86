"""SyncE device/port relations.

Builds the relation graph between SyncE devices and the ports grouped under
them, and fills in their clock identifiers.

Example:
    >>> from ptp_conf.parser import parse
    >>> from ptp_conf.synce import assign_clock_ids, extract_relations
    >>> relations = extract_relations(parse(synce4l_conf))
    >>> assign_clock_ids(relations, profile.ptp_settings)
"""

from .extract import extract_relations
from .models import EXTENDED_TLV_DISABLED, EXTENDED_TLV_ENABLED, NETWORK_OPTION_1, NETWORK_OPTION_2, QualityLevelInfo, SyncEDeviceConfig
from .protocols import ClockIdAssigner, RelationRegistry
from .relations import Relations, assign_clock_ids, clock_id_key

__all__ = [
    # Models
    "SyncEDeviceConfig",
    "QualityLevelInfo",
    "NETWORK_OPTION_1",
    "NETWORK_OPTION_2",
    "EXTENDED_TLV_DISABLED",
    "EXTENDED_TLV_ENABLED",
    # Relations
    "Relations",
    "assign_clock_ids",
    "clock_id_key",
    "extract_relations",
    # Protocols
    "ClockIdAssigner",
    "RelationRegistry",
]
