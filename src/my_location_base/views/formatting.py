"""Display strings for a captured point (list tile title and subtitle)."""

from __future__ import annotations

from ..db.location_repo import LocationPoint


def location_title(point: LocationPoint) -> str:
    return f"Location {point.id}"


def location_description(point: LocationPoint) -> str:
    return f"Latitude: {point.latitude} | Longitude: {point.longitude}"
