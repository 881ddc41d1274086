"""
Database connection, transactions and initialization.
"""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .schema import all_schema_sql

# Seconds a writer waits for another transaction's lock before failing
BUSY_TIMEOUT = 5.0


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """
    Return a new SQLite connection in autocommit mode.
    Writes go through transaction(); ensure close() is called.
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), timeout=BUSY_TIMEOUT, isolation_level=None, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """
    Run the block as one atomic unit.
    BEGIN IMMEDIATE takes the write lock up front, so a read-check and the
    write that depends on it see the same snapshot. Any exception rolls back.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        conn.execute("ROLLBACK")
        raise
    else:
        conn.execute("COMMIT")


def init_db(db_path: str | Path) -> None:
    """Create or ensure all tables exist."""
    conn = get_connection(db_path)
    try:
        conn.executescript(all_schema_sql())
    finally:
        conn.close()
