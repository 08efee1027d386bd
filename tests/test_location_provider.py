"""Tests for the platform location providers."""

import pytest

from my_location_base.errors import PositionUnavailable
from my_location_base.services.location_provider import (
    PlyerLocationProvider,
    Position,
    StaticLocationProvider,
    _coordinate,
)


async def test_static_provider_replays_then_repeats_last() -> None:
    provider = StaticLocationProvider([(1.0, 2.0), (3.0, 4.0)])
    assert await provider.request_foreground_permission() is True
    assert await provider.get_current_position() == Position(1.0, 2.0)
    assert await provider.get_current_position() == Position(3.0, 4.0)
    assert await provider.get_current_position() == Position(3.0, 4.0)


async def test_static_provider_denied() -> None:
    provider = StaticLocationProvider([(1.0, 2.0)], granted=False)
    assert await provider.request_foreground_permission() is False


async def test_static_provider_without_positions() -> None:
    with pytest.raises(PositionUnavailable):
        await StaticLocationProvider([]).get_current_position()


async def test_plyer_provider_on_desktop() -> None:
    # No GPS backend on the CI host: permission is implicit and the fix fails cleanly.
    provider = PlyerLocationProvider(fix_timeout=0.1)
    assert await provider.request_foreground_permission() is True
    with pytest.raises(PositionUnavailable):
        await provider.get_current_position()


def test_coordinate_normalisation() -> None:
    assert _coordinate({"lat": "12.5"}, "lat", "latitude") == 12.5
    assert _coordinate({"latitude": 7}, "lat", "latitude") == 7.0
    assert _coordinate({"lat": None, "latitude": 3.0}, "lat", "latitude") == 3.0
    assert _coordinate({"lat": "n/a"}, "lat", "latitude") is None
    assert _coordinate({}, "lat", "latitude") is None
