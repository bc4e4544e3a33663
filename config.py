"""
config.py
---------
Central configuration module. Loads environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── SQLite ────────────────────────────────────────────────
DB_PATH: str = os.getenv("SONGS_DB_PATH", "songs.db")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
