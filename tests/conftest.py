"""Shared fixtures: settings in a temp data dir and scripted location providers."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from my_location_base.config import Settings
from my_location_base.errors import PositionUnavailable
from my_location_base.services.location_provider import Position, StaticLocationProvider


class FailingPositionProvider:
    """Grants permission, then never gets a fix."""

    def __init__(self) -> None:
        self.position_requests = 0

    async def request_foreground_permission(self) -> bool:
        return True

    async def get_current_position(self) -> Position:
        self.position_requests += 1
        raise PositionUnavailable("no fix")


class CountingDeniedProvider(StaticLocationProvider):
    """Refuses permission and records whether a position was ever requested."""

    def __init__(self) -> None:
        super().__init__([(0.0, 0.0)], granted=False)
        self.position_requests = 0

    async def get_current_position(self) -> Position:
        self.position_requests += 1
        return await super().get_current_position()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", log_file=None)


@pytest.fixture
def two_cities() -> StaticLocationProvider:
    return StaticLocationProvider([(37.7749, -122.4194), (40.7128, -74.0060)])
