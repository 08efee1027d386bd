"""
Platform location access: foreground permission request and a one-shot position fix.

PlyerLocationProvider talks to the device (plyer GPS facade, android.permissions on Android).
StaticLocationProvider replays configured coordinates for desktop runs.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from plyer import gps as plyer_gps
from plyer.utils import platform

from .._async import run_sync
from ..errors import PositionUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float


class LocationProvider(Protocol):
    async def request_foreground_permission(self) -> bool: ...

    async def get_current_position(self) -> Position: ...


def _coordinate(kwargs: dict[str, Any], short: str, long: str) -> float | None:
    value = kwargs.get(short)
    if value is None:
        value = kwargs.get(long)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class PlyerLocationProvider:
    """Device GPS via plyer. The fix is one-shot: start updates, take the first location, stop."""

    def __init__(self, fix_timeout: float = 30.0) -> None:
        self.fix_timeout = fix_timeout

    async def request_foreground_permission(self) -> bool:
        # Only Android has a runtime permission prompt; elsewhere access is decided by the OS.
        if platform != "android":
            return True
        from android.permissions import Permission, check_permission, request_permissions

        wanted = [Permission.ACCESS_FINE_LOCATION, Permission.ACCESS_COARSE_LOCATION]
        missing = [p for p in wanted if not check_permission(p)]
        if not missing:
            return True

        answered = threading.Event()
        grants: list[bool] = []

        def _on_result(_permissions: list[str], results: list[bool]) -> None:
            grants.extend(bool(r) for r in results)
            answered.set()

        logger.debug("Requesting location permissions: %s", missing)
        request_permissions(missing, _on_result)
        await run_sync(answered.wait)
        # Either fine or coarse access is enough for a foreground fix.
        return any(grants) or len(missing) < len(wanted)

    async def get_current_position(self) -> Position:
        fixed = threading.Event()
        fix: dict[str, float] = {}

        def _on_location(**kwargs: Any) -> None:
            if fixed.is_set():
                return
            lat = _coordinate(kwargs, "lat", "latitude")
            lon = _coordinate(kwargs, "lon", "longitude")
            if lat is None or lon is None:
                return
            fix["latitude"] = lat
            fix["longitude"] = lon
            fixed.set()

        def _on_status(status_type: str, status: Any) -> None:
            logger.debug("GPS status %s: %s", status_type, status)

        try:
            plyer_gps.configure(on_location=_on_location, on_status=_on_status)
            plyer_gps.start(minTime=1000, minDistance=0)
        except NotImplementedError as exc:
            raise PositionUnavailable(f"GPS is not available on platform {platform}") from exc
        except Exception as exc:
            raise PositionUnavailable(f"GPS could not be started: {exc}") from exc

        try:
            got_fix = await run_sync(fixed.wait, self.fix_timeout)
        finally:
            plyer_gps.stop()

        if not got_fix:
            raise PositionUnavailable(f"No position fix within {self.fix_timeout:g}s")
        return Position(latitude=fix["latitude"], longitude=fix["longitude"])


class StaticLocationProvider:
    """
    Returns the given positions in order, repeating the last one once exhausted.
    With granted=False every permission request is refused.
    """

    def __init__(self, positions: Sequence[tuple[float, float]], *, granted: bool = True) -> None:
        self._positions = [Position(latitude=lat, longitude=lon) for lat, lon in positions]
        self._index = 0
        self.granted = granted

    async def request_foreground_permission(self) -> bool:
        return self.granted

    async def get_current_position(self) -> Position:
        if not self._positions:
            raise PositionUnavailable("No fixed position configured")
        pos = self._positions[min(self._index, len(self._positions) - 1)]
        self._index += 1
        return pos


def provider_from_settings(fixed_position: tuple[float, float] | None, gps_timeout: float) -> LocationProvider:
    """Fixed position if configured, otherwise the device GPS."""
    if fixed_position is not None:
        logger.info("Using fixed position %s, %s", *fixed_position)
        return StaticLocationProvider([fixed_position])
    return PlyerLocationProvider(fix_timeout=gps_timeout)
