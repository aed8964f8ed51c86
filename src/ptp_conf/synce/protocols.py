"""Protocol definitions for the SyncE runtime seams.

The SyncE runtime that owns relations at daemon level is external to this
package. These protocols describe the two entry points rendering relies on,
so a runtime can plug in its own implementation.
"""

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

from .models import SyncEDeviceConfig

if TYPE_CHECKING:
    from .relations import Relations


@runtime_checkable
class RelationRegistry(Protocol):
    """Collection that accepts device configs in source order."""

    def register_device_config(self, config: SyncEDeviceConfig) -> None: ...


class ClockIdAssigner(Protocol):
    """Callable that fills clock_id on every device of a relation graph.

    Receives the Relations produced by extraction and the profile settings
    mapping (string to string).
    """

    def __call__(self, relations: "Relations", settings: Mapping[str, str]) -> None: ...
