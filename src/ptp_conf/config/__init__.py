"""Settings for ptp-conf tooling.

Load and validate TOML settings with Pydantic models and environment
overrides. May import: exceptions.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python >= 3.11
except ImportError:
    import tomli as tomllib  # Python < 3.11

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import ConfigError

__all__ = [
    "Settings",
    "PathsConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_settings",
    "ENV_PREFIX",
    "DEFAULT_PTP4L_CONF",
]

ENV_PREFIX = "PTP_CONF_"
DEFAULT_PTP4L_CONF = Path("/etc/ptp4l.conf")


# ============================================================================
# Configuration Models
# ============================================================================


class PathsConfig(BaseModel):
    """File locations."""

    ptp4l_conf: Path = Field(default=DEFAULT_PTP4L_CONF)

    @field_validator("ptp4l_conf", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path:
        """Expand environment variables and user home in paths."""
        if isinstance(v, str):
            return Path(os.path.expandvars(os.path.expanduser(v)))
        return v


class RenderConfig(BaseModel):
    """Rendering defaults."""

    profile_name: str = Field(default="")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    structured: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got '{v}'")
        return v_upper


class Settings(BaseModel):
    """Complete ptp-conf settings."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}  # Reject unknown keys


# ============================================================================
# Loading Functions
# ============================================================================


def load_settings(
    toml_path: Path | str | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Settings:
    """Load and validate settings from TOML and environment.

    Args:
        toml_path: Path to TOML settings file (optional)
        env_prefix: Environment variable prefix (default: PTP_CONF_)

    Returns:
        Validated Settings object

    Raises:
        ConfigError: If toml_path is missing, unreadable or invalid
    """
    raw = _read_toml(Path(toml_path)) if toml_path is not None else {}
    _apply_env_overrides(raw, env_prefix)

    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise ConfigError(f"Settings file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings {path}: {e}") from e

    try:
        return tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _apply_env_overrides(settings: dict[str, Any], prefix: str) -> None:
    """Merge PTP_CONF_* variables into ``settings`` in place.

    ``__`` separates nesting levels, so PTP_CONF_PATHS__PTP4L_CONF sets
    paths.ptp4l_conf.
    """
    overrides = {name[len(prefix) :].lower(): value for name, value in os.environ.items() if name.startswith(prefix)}
    for key, value in sorted(overrides.items()):
        *tables, leaf = key.split("__")
        target = settings
        for table in tables:
            target = target.setdefault(table, {})
        target[leaf] = _parse_env_value(value)


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to bool or str.

    Numbers stay strings; pydantic coerces them where a field is numeric.
    """
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False
    return value
