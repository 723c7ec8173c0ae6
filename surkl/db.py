"""SQLite database access shared by the storage layers."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass

log = logging.getLogger(__name__)

APPLICATION_ID = 314159265


@dataclass(frozen=True)
class DatabaseConfig:
    """Name of the database file and of the connection that uses it."""

    database_name: str
    connection_name: str


DB_CONFIG = DatabaseConfig(
    database_name="Surkl.db",
    connection_name="Surkl_db_connection",
)
DB_CONFIG_TEST = DatabaseConfig(
    database_name="Surkl_test.db",
    connection_name="Surkl_test_db_connection",
)


def connect(database_name: str) -> sqlite3.Connection:
    """Open the database and apply the application's pragmas."""
    if not database_name:
        log.warning("DB name not set!")

    conn = sqlite3.connect(database_name)
    conn.execute("PRAGMA synchronous = OFF;")
    conn.execute(f"PRAGMA application_id = {APPLICATION_ID};")
    return conn


def table_exists(conn: sqlite3.Connection, name: str) -> bool:
    """Return True if a table called *name* exists in the database."""
    row = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
        (name,),
    ).fetchone()
    return row is not None