"""Pytest configuration and shared fixtures for ptp_conf tests.

Provides:
- Fixture paths for sample ptp4l, ts2phc and synce4l configurations
- Configuration texts loaded from those files
- Temporary configuration file factory
"""

from pathlib import Path

import pytest

FIXTURES_ROOT = Path(__file__).parent / "fixtures"
CONFIGS_ROOT = FIXTURES_ROOT / "configs"

# ============================================================================
# Path Configuration
# ============================================================================


@pytest.fixture(scope="session")
def configs_root() -> Path:
    """Directory containing sample configuration files."""
    return CONFIGS_ROOT


@pytest.fixture(scope="session")
def bc_ptp4l_path(configs_root: Path) -> Path:
    """Boundary clock ptp4l configuration: one slave port, one master port."""
    return configs_root / "bc_ptp4l.conf"


@pytest.fixture(scope="session")
def gm_ts2phc_path(configs_root: Path) -> Path:
    """Grandmaster ts2phc configuration fed by GNSS through [nmea]."""
    return configs_root / "gm_ts2phc.conf"


@pytest.fixture(scope="session")
def synce4l_path(configs_root: Path) -> Path:
    """synce4l configuration with two devices; synce2 carries its own clock_id."""
    return configs_root / "synce4l.conf"


# ============================================================================
# Configuration Texts
# ============================================================================


@pytest.fixture
def bc_ptp4l_conf(bc_ptp4l_path: Path) -> str:
    return bc_ptp4l_path.read_text(encoding="utf-8")


@pytest.fixture
def gm_ts2phc_conf(gm_ts2phc_path: Path) -> str:
    return gm_ts2phc_path.read_text(encoding="utf-8")


@pytest.fixture
def synce4l_conf(synce4l_path: Path) -> str:
    return synce4l_path.read_text(encoding="utf-8")


# ============================================================================
# Temporary Files
# ============================================================================


@pytest.fixture
def write_conf(tmp_path: Path):
    """Factory writing configuration text to a file under tmp_path."""

    def _write(text: str, name: str = "ptp4l.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
