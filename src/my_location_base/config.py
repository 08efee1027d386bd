"""
Runtime settings read from the environment.
Data directory, log level/file, GPS fix timeout and an optional fixed position for desktop runs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "MY_LOCATION_BASE_"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_GPS_TIMEOUT = 30.0
DB_FILENAME = "locations.db"
PREFERENCES_FILENAME = "preferences.json"
LOG_FILENAME = "my_location_base.log"


def _env(name: str) -> str:
    return (os.environ.get(ENV_PREFIX + name) or "").strip()


def default_data_dir() -> Path:
    """Return the user data directory (MY_LOCATION_BASE_DATA or ~/.my_location_base)."""
    value = _env("DATA")
    return Path(value) if value else Path.home() / ".my_location_base"


def parse_position(value: str) -> tuple[float, float] | None:
    """Parse "lat,lon" into a tuple. None if empty or malformed."""
    if not value:
        return None
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        logger.warning("Ignoring malformed fixed position %r (expected 'lat,lon')", value)
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        logger.warning("Ignoring malformed fixed position %r (expected 'lat,lon')", value)
        return None


def _parse_timeout(value: str) -> float:
    if not value:
        return DEFAULT_GPS_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_GPS_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_GPS_TIMEOUT


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None
    gps_timeout: float = DEFAULT_GPS_TIMEOUT
    fixed_position: tuple[float, float] | None = None

    @property
    def db_path(self) -> Path:
        return self.data_dir / DB_FILENAME

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / PREFERENCES_FILENAME

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from MY_LOCATION_BASE_* variables.
        LOG_FILE set to an empty string is treated as unset (default file);
        LOG_FILE="-" disables file logging.
        """
        data_dir = default_data_dir()
        log_file_env = _env("LOG_FILE")
        if log_file_env == "-":
            log_file = None
        elif log_file_env:
            log_file = Path(log_file_env)
        else:
            log_file = data_dir / LOG_FILENAME
        return cls(
            data_dir=data_dir,
            log_level=(_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            log_file=log_file,
            gps_timeout=_parse_timeout(_env("GPS_TIMEOUT")),
            fixed_position=parse_position(_env("FIXED_POSITION")),
        )

    def ensure_data_dir(self) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir
