"""SyncE relation graph and default clock identifier assignment.

Example:
    >>> relations = Relations()
    >>> relations.register_device_config(SyncEDeviceConfig(name="synce1", ifaces=["ens1f0"]))
    >>> assign_clock_ids(relations, {"clockId[ens1f0]": "5799633565432596414"})
    >>> relations.devices[0].clock_id
    '5799633565432596414'
"""

import logging
from typing import Iterator, List, Mapping, Optional

from .models import SyncEDeviceConfig

__all__ = ["CLOCK_ID_KEY", "Relations", "assign_clock_ids", "clock_id_key"]

logger = logging.getLogger(__name__)

CLOCK_ID_KEY = "clockId[{iface}]"


def clock_id_key(iface: str) -> str:
    """Settings key holding the clock identifier of an interface."""
    return CLOCK_ID_KEY.format(iface=iface)


class Relations:
    """Ordered SyncE devices extracted from one configuration.

    Devices keep the order of their [<name>] markers in the source text.
    """

    def __init__(self, devices: Optional[List[SyncEDeviceConfig]] = None):
        self.devices: List[SyncEDeviceConfig] = list(devices or [])

    def register_device_config(self, config: SyncEDeviceConfig) -> None:
        logger.debug(f"Registering SyncE device '{config.name}' with ifaces {config.ifaces}")
        self.devices.append(config)

    def get_device(self, name: str) -> Optional[SyncEDeviceConfig]:
        for device in self.devices:
            if device.name == name:
                return device
        return None

    def __iter__(self) -> Iterator[SyncEDeviceConfig]:
        return iter(self.devices)

    def __len__(self) -> int:
        return len(self.devices)

    def __repr__(self) -> str:
        return f"Relations(devices={[device.name for device in self.devices]})"


def assign_clock_ids(relations: Relations, settings: Mapping[str, str]) -> None:
    """Fill each device's clock_id from the profile settings.

    The first interface of a device with a ``clockId[<iface>]`` entry
    provides the identifier. Devices without a match keep their clock_id.

    Args:
        relations: Relation graph to update in place
        settings: Profile settings mapping
    """
    for device in relations:
        for iface in device.ifaces:
            clock_id = settings.get(clock_id_key(iface))
            if clock_id:
                device.clock_id = clock_id.strip()
                break
        else:
            logger.debug(f"No clock id in settings for SyncE device '{device.name}'")
