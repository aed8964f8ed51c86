"""PTP profile payloads and configuration updates.

A controller hands the daemon its node profiles as JSON, either a list of
profiles or, for older controllers, a single profile object. ConfigUpdate
keeps the last applied profiles and turns them into Documents, falling back
to the node's default ptp4l configuration when a profile carries none.

Example:
    >>> update = ConfigUpdate.from_settings(load_settings())
    >>> if update.update_config(payload):
    ...     for profile in update.node_profiles:
    ...         doc = update.ptp4l_document(profile)
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .config import Settings
from .domain.conf import Document
from .exceptions import ConfigError, ProfileError
from .parser import parse
from .utils import compute_hash, read_text

__all__ = ["ConfigUpdate", "PtpProfile", "load_profiles"]

logger = logging.getLogger(__name__)


class PtpProfile(BaseModel):
    """One node profile as sent by the controller.

    Field names follow the controller's camelCase JSON; unknown keys are
    ignored so newer controllers do not break older daemons.
    """

    model_config = {"extra": "ignore", "populate_by_name": True}

    name: Optional[str] = None
    interface: Optional[str] = None
    ptp4l_opts: Optional[str] = Field(default=None, alias="ptp4lOpts")
    phc2sys_opts: Optional[str] = Field(default=None, alias="phc2sysOpts")
    ptp4l_conf: Optional[str] = Field(default=None, alias="ptp4lConf")
    ts2phc_opts: Optional[str] = Field(default=None, alias="ts2phcOpts")
    ts2phc_conf: Optional[str] = Field(default=None, alias="ts2phcConf")
    synce4l_opts: Optional[str] = Field(default=None, alias="synce4lOpts")
    synce4l_conf: Optional[str] = Field(default=None, alias="synce4lConf")
    ptp_scheduling_policy: Optional[str] = Field(default=None, alias="ptpSchedulingPolicy")
    ptp_scheduling_priority: Optional[int] = Field(default=None, alias="ptpSchedulingPriority")
    ptp_settings: Dict[str, str] = Field(default_factory=dict, alias="ptpSettings")

    @property
    def is_empty(self) -> bool:
        """Old controllers send '{"name":null,"interface":null}' for no profile."""
        return self.name is None or self.interface is None


_PROFILE_LIST = TypeAdapter(List[PtpProfile])


def load_profiles(payload: Union[str, bytes]) -> List[PtpProfile]:
    """Decode a profile payload.

    Tries a JSON list of profiles first, then a single profile object.

    Raises:
        ProfileError: Payload matches neither schema
    """
    profiles, _ = _decode_profiles(payload)
    return profiles


def _decode_profiles(payload: Union[str, bytes]) -> Tuple[List[PtpProfile], bool]:
    """Return the profiles and whether the single-profile schema was used."""
    try:
        return _PROFILE_LIST.validate_json(payload), False
    except ValidationError:
        pass

    try:
        profile = PtpProfile.model_validate_json(payload)
    except ValidationError as e:
        raise ProfileError(f"Unable to load profile config: {e}") from e

    return [profile], True


class ConfigUpdate:
    """Tracks applied node profiles and the default ptp4l configuration.

    Attributes:
        default_ptp4l_conf: Text used when a profile has no ptp4lConf
        node_profiles: Profiles from the last applied payload
    """

    def __init__(self, default_ptp4l_conf: str):
        self.default_ptp4l_conf = default_ptp4l_conf
        self.node_profiles: List[PtpProfile] = []
        self._applied_hash: Optional[str] = None

    @classmethod
    def from_file(cls, path: Union[Path, str]) -> "ConfigUpdate":
        """Create an update tracker seeded with the node's default ptp4l.conf.

        Raises:
            ConfigError: File does not exist or cannot be read
        """
        try:
            text = read_text(path)
        except FileNotFoundError as e:
            raise ConfigError(f"{path} file doesn't exist") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e
        return cls(text)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigUpdate":
        """Create an update tracker from the configured paths.ptp4l_conf."""
        return cls.from_file(settings.paths.ptp4l_conf)

    def update_config(self, payload: Union[str, bytes]) -> bool:
        """Apply a profile payload.

        Returns:
            True when new profiles were applied, False when the payload
            equals the last applied one or carries an empty profile

        Raises:
            ProfileError: Payload cannot be decoded
        """
        payload_hash = compute_hash(payload)
        if payload_hash == self._applied_hash:
            return False

        profiles, single = _decode_profiles(payload)
        if single and profiles[0].is_empty:
            logger.info(f"Skip no profile {profiles[0].model_dump(by_alias=True)}")
            return False

        logger.info(f"Load {len(profiles)} profile(s){' using the single-profile schema' if single else ''}")
        self._applied_hash = payload_hash
        self.node_profiles = profiles
        return True

    def ptp4l_document(self, profile: PtpProfile) -> Document:
        """Parse a profile's ptp4l configuration, or the default one."""
        text = profile.ptp4l_conf if profile.ptp4l_conf is not None else self.default_ptp4l_conf
        return parse(text, profile_name=profile.name or "")

    def synce_document(self, profile: PtpProfile) -> Document:
        """Parse a profile's synce4l configuration."""
        return parse(profile.synce4l_conf, profile_name=profile.name or "")
