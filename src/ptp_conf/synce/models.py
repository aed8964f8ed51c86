"""SyncE device models.

Defines SyncEDeviceConfig, one logical frequency-synchronization device and
the ports grouped under it, plus the quality-level record kept for it at
runtime.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

__all__ = [
    "EXTENDED_TLV_DISABLED",
    "EXTENDED_TLV_ENABLED",
    "NETWORK_OPTION_1",
    "NETWORK_OPTION_2",
    "QualityLevelInfo",
    "SyncEDeviceConfig",
]

NETWORK_OPTION_1 = 1
NETWORK_OPTION_2 = 2
EXTENDED_TLV_DISABLED = 0
EXTENDED_TLV_ENABLED = 1


class QualityLevelInfo(BaseModel):
    """Last quality level seen on a port.

    Attributes:
        priority: Selection priority
        ssm: Synchronization status message code
        extended_ssm: Enhanced SSM code (extended TLV)
    """

    priority: int = 0
    ssm: int = 0
    extended_ssm: int = 0


class SyncEDeviceConfig(BaseModel):
    """One SyncE device and the interfaces grouped under it.

    Attributes:
        name: Device name from its [<name>] marker
        ifaces: Interface names in source order
        clock_id: Clock identifier, assigned after extraction
        network_option: ITU-T G.8264 network option (1 or 2)
        extended_tlv: Extended QL TLV switch (0 disabled, 1 enabled)
        external_source: Name from the device's [{name}] section, if any
        last_ql_state: Per-port quality levels, owned by the SyncE runtime
        last_clock_state: Last device clock state, owned by the SyncE runtime
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    name: str = ""
    ifaces: List[str] = Field(default_factory=list)
    clock_id: str = ""
    network_option: int = NETWORK_OPTION_1
    extended_tlv: int = EXTENDED_TLV_DISABLED
    external_source: str = ""
    last_ql_state: Dict[str, QualityLevelInfo] = Field(default_factory=dict)
    last_clock_state: str = ""
