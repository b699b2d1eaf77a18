"""SQLite datastore: schema bootstrap and per-operation connections.

Each operation opens its own connection and runs in a single transaction, so
nothing is shared between requests served on different threads.
"""
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a datastore read or write fails."""
    pass


SCHEMA = """
CREATE TABLE IF NOT EXISTS tracks (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL,
    artist TEXT NOT NULL,
    album TEXT NOT NULL,
    duration REAL NOT NULL,
    bpm REAL NOT NULL,
    energy REAL NOT NULL,
    valence REAL NOT NULL,
    danceability REAL NOT NULL,
    source TEXT NOT NULL,
    filename TEXT NOT NULL,
    path TEXT NOT NULL,
    created_at INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS playlists (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    tracks TEXT NOT NULL, -- JSON array of track ids
    created_at INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_tracks_created_at ON tracks(created_at);
CREATE INDEX IF NOT EXISTS idx_playlists_created_at ON playlists(created_at);
"""


class Database:
    """SQLite database holding the tracks and playlists tables."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._schema_ready = False

    def _open(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        if not self._schema_ready:
            conn.executescript(SCHEMA)
            self._schema_ready = True
            logger.info("Database ready: %s", self.db_path)
        return conn

    def initialize(self) -> None:
        """Create tables if missing."""
        with self.connect():
            pass

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back on error, always close.

        sqlite3 errors are re-raised as StoreError.
        """
        try:
            conn = self._open()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
