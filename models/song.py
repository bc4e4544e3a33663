"""
models/song.py
--------------
Domain model for songs, plus the row mapper that rebuilds one from a stored row.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

# Column order of the `songs` table.
SONG_COLUMNS = ("id", "name", "length")


@dataclass
class Song:
    """
    Represents a single song.

    Attributes:
        name: Song title.
        length: Duration in seconds.
        id: Database primary key (None for new records). Once set it
            cannot be rebound to a different value.
    """
    name: str
    length: int
    id: Optional[int] = None

    def __setattr__(self, key: str, value: object) -> None:
        if key == "id":
            current = self.__dict__.get("id")
            if current is not None and value != current:
                raise AttributeError(f"Song id is already set to {current}")
        super().__setattr__(key, value)

    @classmethod
    def new_from_db(cls, row: Sequence) -> "Song":
        """
        Build a Song from a database row.

        Args:
            row: Ordered values ``(id, name, length)``, e.g. a tuple or
                a ``sqlite3.Row``. Values are taken as-is.

        Raises:
            ValueError: If the row does not have exactly three columns.
        """
        if len(row) != len(SONG_COLUMNS):
            raise ValueError(
                f"Expected a row of {len(SONG_COLUMNS)} columns {SONG_COLUMNS}, got {len(row)}"
            )
        return cls(id=row[0], name=row[1], length=row[2])

    def is_persisted(self) -> bool:
        """Returns True once the song has a database id."""
        return self.id is not None

    def __str__(self) -> str:
        ref = f"#{self.id}" if self.is_persisted() else "(unsaved)"
        return f"{ref} {self.name} ({self.length}s)"
