"""
SQLite schema for My Location BASE.
One table: locations (id, latitude, longitude). Ids are AUTOINCREMENT so they are never reused.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


def create_schema(conn: sqlite3.Connection) -> None:
    """
    Create the locations table. Idempotent: uses IF NOT EXISTS, so calling it on an
    existing database neither fails nor touches stored rows.
    """
    conn.execute("""
        CREATE TABLE IF NOT EXISTS locations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            latitude REAL,
            longitude REAL
        )
    """)
    conn.commit()


def connect(db_path: Path | str) -> sqlite3.Connection:
    """
    Open the database at db_path. check_same_thread is off because statements are run
    from worker threads (one at a time per operation).
    """
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    logger.debug("Opened database %s", db_path)
    return conn


def init_database(db_path: Path | str) -> sqlite3.Connection:
    """
    Create or open the database at db_path and create the schema.
    Returns an open connection (caller is responsible for closing it).
    """
    conn = connect(db_path)
    create_schema(conn)
    return conn
