"""Location rows: insert one captured point, list all points in capture order."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class LocationPoint:
    id: int
    latitude: float
    longitude: float


def insert_location(conn: sqlite3.Connection, latitude: float, longitude: float) -> LocationPoint:
    """
    Insert a row and commit. On any sqlite error the transaction is rolled back before
    the error propagates, so a failed insert never leaves a row behind.
    """
    try:
        cur = conn.execute(
            "INSERT INTO locations (latitude, longitude) VALUES (?, ?)",
            (latitude, longitude),
        )
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    return LocationPoint(id=cur.lastrowid, latitude=latitude, longitude=longitude)


def list_locations(conn: sqlite3.Connection) -> list[LocationPoint]:
    cur = conn.execute("SELECT id, latitude, longitude FROM locations ORDER BY id")
    return [LocationPoint(id=r[0], latitude=r[1], longitude=r[2]) for r in cur.fetchall()]


def count_locations(conn: sqlite3.Connection) -> int:
    cur = conn.execute("SELECT COUNT(*) FROM locations")
    return cur.fetchone()[0]
