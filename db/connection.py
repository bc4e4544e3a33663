"""
db/connection.py
----------------
Manages the SQLite connection handle.
The entry point opens one shared handle and passes it to the repositories.
"""

import sqlite3
from typing import Optional

from config import DB_PATH
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: sqlite3.Connection | None = None


def open_connection(path: str) -> sqlite3.Connection:
    """
    Open a new SQLite connection.

    Args:
        path: Database file path, or ":memory:" for a throwaway database.

    Raises:
        sqlite3.OperationalError: If the file cannot be opened.
    """
    try:
        conn = sqlite3.connect(path)
    except sqlite3.OperationalError as e:
        logger.error(f"Failed to open database {path}: {e}")
        raise
    logger.debug(f"Opened SQLite database at {path}")
    return conn


def init_connection(path: Optional[str] = None) -> None:
    """
    Initialize the shared connection handle.

    Args:
        path: Database file path. Defaults to ``config.DB_PATH``.
    """
    global _conn
    if _conn is not None:
        return
    _conn = open_connection(path or DB_PATH)
    logger.info("Database connection initialized successfully.")


def get_connection() -> sqlite3.Connection:
    """
    Get the shared connection handle.

    Raises:
        RuntimeError: If the handle has not been initialized.
    """
    if _conn is None:
        raise RuntimeError("Database connection not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the shared connection handle."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("Database connection closed.")
