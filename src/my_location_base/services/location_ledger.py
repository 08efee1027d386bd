"""
Location ledger: append-only store of captured points plus the permission-gated capture workflow.

capture() runs permission -> position -> insert strictly in that order. Every failure is terminal
for the invocation and leaves the table untouched.
"""

from __future__ import annotations

import logging
import sqlite3

from .._async import run_sync
from ..db.location_repo import LocationPoint, insert_location, list_locations
from ..db.schema import create_schema
from ..errors import PermissionDenied, PositionUnavailable, StorageReadError, StorageWriteError
from .location_provider import LocationProvider, Position

logger = logging.getLogger(__name__)


def _check_range(position: Position) -> None:
    if not -90.0 <= position.latitude <= 90.0:
        raise PositionUnavailable(f"Latitude out of range: {position.latitude}")
    if not -180.0 <= position.longitude <= 180.0:
        raise PositionUnavailable(f"Longitude out of range: {position.longitude}")


class LocationLedger:
    """Holds the database handle it is given; does not open or close it."""

    def __init__(self, conn: sqlite3.Connection, provider: LocationProvider) -> None:
        self._conn = conn
        self._provider = provider

    async def ensure_schema(self) -> None:
        try:
            await run_sync(create_schema, self._conn)
        except sqlite3.Error as exc:
            raise StorageWriteError(f"Could not create locations table: {exc}") from exc

    async def capture(self) -> LocationPoint:
        """
        Capture the current device position and store it.
        Raises PermissionDenied, PositionUnavailable or StorageWriteError.
        """
        logger.debug("Capture: requesting permission")
        if not await self._provider.request_foreground_permission():
            logger.info("Capture: location permission denied")
            raise PermissionDenied("Location permission denied")

        logger.debug("Capture: requesting position")
        position = await self._provider.get_current_position()
        _check_range(position)

        logger.debug("Capture: persisting %s, %s", position.latitude, position.longitude)
        try:
            point = await run_sync(insert_location, self._conn, position.latitude, position.longitude)
        except sqlite3.Error as exc:
            raise StorageWriteError(f"Could not insert location: {exc}") from exc
        logger.info("Captured location %d (%s, %s)", point.id, point.latitude, point.longitude)
        return point

    async def list_all(self) -> list[LocationPoint]:
        """All stored points, ascending id. Raises StorageReadError."""
        try:
            return await run_sync(list_locations, self._conn)
        except sqlite3.Error as exc:
            raise StorageReadError(f"Could not load locations: {exc}") from exc
