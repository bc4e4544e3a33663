"""Shared fixtures: an in-memory database with the songs table."""

import sqlite3

import pytest

from repositories.song_repo import SongRepository


@pytest.fixture
def conn():
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def repo(conn) -> SongRepository:
    repo = SongRepository(conn)
    repo.create_table()
    return repo
