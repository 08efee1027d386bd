"""
App-wide state: owns the database connection, the ledger, the preference store and the
in-memory list the screen renders. Create at startup, close on exit.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable

import anyio

from .._async import run_sync
from ..config import Settings
from ..db.location_repo import LocationPoint
from ..db.schema import connect
from ..errors import (
    PermissionDenied,
    PositionUnavailable,
    StorageReadError,
    StorageWriteError,
)
from .location_ledger import LocationLedger
from .location_provider import LocationProvider
from .preferences import PreferenceStore

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "Location permission denied."
POSITION_UNAVAILABLE_MESSAGE = "Could not get the current location."


class AppState:
    """
    Screen state shared by the views.

    locations mirrors the ledger: replaced wholesale by load(), appended to only after a
    successful capture. Listeners are called (no arguments) after every change.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        ledger: LocationLedger,
        preferences: PreferenceStore,
        *,
        on_alert: Callable[[str], None] | None = None,
    ) -> None:
        self._conn: sqlite3.Connection | None = conn
        self.ledger = ledger
        self.preferences = preferences
        self.on_alert = on_alert
        self.locations: list[LocationPoint] = []
        self.dark_mode = False
        self.is_loading = False
        self._capturing = False
        self._listeners: list[Callable[[], None]] = []

    @classmethod
    async def open(
        cls,
        settings: Settings,
        provider: LocationProvider,
        *,
        on_alert: Callable[[str], None] | None = None,
    ) -> AppState:
        """Open the database in settings.data_dir, ensure the schema and build the components."""
        settings.ensure_data_dir()
        conn = await run_sync(connect, settings.db_path)
        ledger = LocationLedger(conn, provider)
        try:
            await ledger.ensure_schema()
        except StorageWriteError:
            await run_sync(conn.close)
            raise
        return cls(conn, ledger, PreferenceStore(settings.preferences_path), on_alert=on_alert)

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database connection is closed")
        return self._conn

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _set_loading(self, value: bool) -> None:
        self.is_loading = value
        self._notify()

    def _alert(self, message: str) -> None:
        if self.on_alert is not None:
            self.on_alert(message)

    async def _load_dark_mode(self) -> None:
        self.dark_mode = await self.preferences.get_dark_mode()

    async def _load_locations(self) -> None:
        try:
            self.locations = await self.ledger.list_all()
        except StorageReadError:
            logger.exception("Error loading locations")
            self.locations = []

    async def load(self) -> None:
        """Read dark mode and all stored locations concurrently."""
        self._set_loading(True)
        try:
            async with anyio.create_task_group() as tg:
                tg.start_soon(self._load_dark_mode)
                tg.start_soon(self._load_locations)
        finally:
            self._set_loading(False)

    async def toggle_dark_mode(self) -> bool:
        """Flip and persist the flag. A failed write is logged; the in-memory flag still flips."""
        self.dark_mode = not self.dark_mode
        self._notify()
        try:
            await self.preferences.set_dark_mode(self.dark_mode)
        except StorageWriteError:
            logger.exception("Error saving dark mode preference")
        return self.dark_mode

    async def capture_location(self) -> LocationPoint | None:
        """
        Run the capture workflow. Returns the new point, or None if the capture failed or another
        capture is still pending. Permission and position failures are reported through on_alert.
        """
        if self._capturing:
            logger.debug("Capture already in progress; ignoring request")
            return None
        self._capturing = True
        try:
            self._set_loading(True)
            point = await self.ledger.capture()
        except PermissionDenied:
            self._alert(PERMISSION_DENIED_MESSAGE)
            return None
        except PositionUnavailable as exc:
            logger.warning("Position unavailable: %s", exc)
            self._alert(POSITION_UNAVAILABLE_MESSAGE)
            return None
        except StorageWriteError:
            logger.exception("Error inserting location")
            return None
        finally:
            self._capturing = False
            self._set_loading(False)
        self.locations = [*self.locations, point]
        self._notify()
        return point

    async def close(self) -> None:
        if self._conn is not None:
            conn, self._conn = self._conn, None
            await run_sync(conn.close)

    async def __aenter__(self) -> AppState:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
