"""Unit tests for the locations table (schema, insert, ordered listing)."""

import sqlite3

import pytest

from my_location_base.db.location_repo import LocationPoint, count_locations, insert_location, list_locations
from my_location_base.db.schema import create_schema, init_database


def test_create_schema_is_idempotent() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    insert_location(conn, 1.0, 2.0)
    create_schema(conn)
    tables = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'locations'").fetchall()
    assert len(tables) == 1
    assert count_locations(conn) == 1
    conn.close()


def test_insert_assigns_increasing_ids() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    first = insert_location(conn, 37.7749, -122.4194)
    second = insert_location(conn, 40.7128, -74.0060)
    assert first == LocationPoint(id=1, latitude=37.7749, longitude=-122.4194)
    assert second.id == 2
    conn.close()


def test_list_locations_empty() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    assert list_locations(conn) == []
    conn.close()


def test_list_locations_ordered_by_id() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    # Rows inserted out of id order still come back ascending.
    conn.execute("INSERT INTO locations (id, latitude, longitude) VALUES (5, 1.0, 1.0)")
    conn.execute("INSERT INTO locations (id, latitude, longitude) VALUES (2, 2.0, 2.0)")
    conn.commit()
    assert [p.id for p in list_locations(conn)] == [2, 5]
    conn.close()


def test_ids_not_reused_after_delete() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    insert_location(conn, 1.0, 1.0)
    last = insert_location(conn, 2.0, 2.0)
    conn.execute("DELETE FROM locations WHERE id = ?", (last.id,))
    conn.commit()
    assert insert_location(conn, 3.0, 3.0).id == last.id + 1
    conn.close()


def test_init_database_creates_file(tmp_path) -> None:
    path = tmp_path / "locations.db"
    conn = init_database(path)
    insert_location(conn, 10.0, 20.0)
    conn.close()
    conn = init_database(path)
    assert list_locations(conn) == [LocationPoint(id=1, latitude=10.0, longitude=20.0)]
    conn.close()


def test_failed_commit_leaves_no_row(tmp_path) -> None:
    path = tmp_path / "locations.db"
    conn = sqlite3.connect(str(path), timeout=0)
    create_schema(conn)
    reader = sqlite3.connect(str(path), timeout=0, isolation_level=None)
    # An open read transaction keeps a shared lock, so the INSERT runs but COMMIT cannot.
    reader.execute("BEGIN")
    reader.execute("SELECT COUNT(*) FROM locations").fetchall()
    with pytest.raises(sqlite3.OperationalError):
        insert_location(conn, 37.7749, -122.4194)
    reader.execute("COMMIT")
    reader.close()
    assert count_locations(conn) == 0
    assert insert_location(conn, 40.7128, -74.0060).id == 1
    conn.close()
