"""
repositories/song_repo.py
-------------------------
Data access layer for songs.
All SQL queries related to the `songs` table live here.
"""

import sqlite3
from typing import Optional

from db.init_db import create_tables, drop_tables
from models.song import Song
from utils.logger import get_logger

logger = get_logger(__name__)

SELECT_ALL_SQL = "SELECT * FROM songs"
FIND_BY_NAME_SQL = "SELECT * FROM songs WHERE name = ? LIMIT 1"
INSERT_SQL = "INSERT INTO songs (name, length) VALUES (?, ?)"
INSERT_WITH_ID_SQL = "INSERT INTO songs (id, name, length) VALUES (?, ?, ?)"
UPDATE_SQL = "UPDATE songs SET name = ?, length = ? WHERE id = ?"


class SongRepository:
    """Repository for reading and writing rows of the songs table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    # ── SCHEMA ────────────────────────────────────────────

    def create_table(self) -> None:
        """Create the songs table if it does not exist yet."""
        create_tables(self.conn)

    def drop_table(self) -> None:
        """Drop the songs table if it exists."""
        drop_tables(self.conn)

    # ── READ ──────────────────────────────────────────────

    def all(self) -> list[Song]:
        """
        Fetch every song, in the order the database returns them.

        Returns:
            List of Song objects (empty if the table has no rows).
        """
        logger.debug(SELECT_ALL_SQL)
        rows = self.conn.execute(SELECT_ALL_SQL).fetchall()
        return [Song.new_from_db(r) for r in rows]

    def find_by_name(self, name: str) -> Optional[Song]:
        """
        Fetch one song with an exact name match.

        When several rows share the name, whichever one SQLite yields
        first is returned.

        Returns:
            A Song object or None if not found.
        """
        logger.debug(f"{FIND_BY_NAME_SQL} -- {name!r}")
        row = self.conn.execute(FIND_BY_NAME_SQL, (name,)).fetchone()
        return Song.new_from_db(row) if row is not None else None

    # ── WRITE ─────────────────────────────────────────────

    def save(self, song: Song) -> Song:
        """
        Insert a new song, or update the stored row of a persisted one.

        A song whose `id` has no stored row (a deleted row, or one read
        from another database) is inserted under that same id.

        Args:
            song: The Song domain object to persist.

        Returns:
            The same Song with its `id` populated.
        """
        try:
            if song.is_persisted():
                song_id = song.id
                cur = self.conn.execute(UPDATE_SQL, (song.name, song.length, song_id))
                if cur.rowcount == 0:
                    self.conn.execute(INSERT_WITH_ID_SQL, (song_id, song.name, song.length))
            else:
                cur = self.conn.execute(INSERT_SQL, (song.name, song.length))
                song_id = cur.lastrowid
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            logger.error(f"Failed to save song {song.name!r}: {e}")
            raise
        song.id = song_id
        logger.info(f"Saved song #{song.id} ({song.name})")
        return song

    def create(self, name: str, length: int) -> Song:
        """Build a new Song and persist it in one step."""
        return self.save(Song(name=name, length=length))
