"""
main.py
-------
Entry point for the songs command-line tool.

Responsibilities:
    - Open the SQLite database and make sure the schema exists.
    - Dispatch the `list`, `find` and `add` commands to the SongRepository.
"""

import argparse
import sys

from db.connection import init_connection, get_connection, close_connection
from repositories.song_repo import SongRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="songs", description="Browse the songs table.")
    parser.add_argument("--db", default=None, help="SQLite database path (default: SONGS_DB_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Print every song.")

    find = sub.add_parser("find", help="Find a song by exact name.")
    find.add_argument("name")

    add = sub.add_parser("add", help="Add a song.")
    add.add_argument("name")
    add.add_argument("length", type=int, help="Length in seconds")

    return parser


def run(repo: SongRepository, args: argparse.Namespace) -> int:
    """
    Execute one parsed command against a repository.

    Returns:
        Process exit status.
    """
    if args.command == "list":
        for song in repo.all():
            print(song)
        return 0

    if args.command == "find":
        song = repo.find_by_name(args.name)
        if song is None:
            print(f"No song named {args.name!r}.")
            return 1
        print(song)
        return 0

    if args.command == "add":
        print(repo.create(args.name, args.length))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, open the database and run the command."""
    args = _build_arg_parser().parse_args(argv)

    init_connection(args.db)
    try:
        repo = SongRepository(get_connection())
        repo.create_table()
        return run(repo, args)
    finally:
        close_connection()


if __name__ == "__main__":
    sys.exit(main())
