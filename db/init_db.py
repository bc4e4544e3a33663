"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import sqlite3

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Songs table: one row per song, length in seconds
CREATE TABLE IF NOT EXISTS songs (
    id      INTEGER PRIMARY KEY,
    name    TEXT,
    length  INTEGER
);
"""

DROP_SQL = "DROP TABLE IF EXISTS songs;"


def create_tables(conn: sqlite3.Connection) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


def drop_tables(conn: sqlite3.Connection) -> None:
    """Drop every table created by `create_tables`."""
    try:
        conn.execute(DROP_SQL)
        conn.commit()
        logger.info("Database schema dropped.")
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Failed to drop schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_connection, get_connection, close_connection
    init_connection()
    create_tables(get_connection())
    close_connection()
    print("Database schema created successfully.")
