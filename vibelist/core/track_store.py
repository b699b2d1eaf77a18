"""Persist and load tracks (SQLite)."""
import logging
import time
import uuid
from typing import Iterable, List

from vibelist.core.database import Database
from vibelist.models.track import Track

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, title, artist, album, duration, bpm, energy, valence, danceability, "
    "source, filename, path, created_at"
)
_INSERT_SQL = f"INSERT INTO tracks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)"


def new_track_id() -> str:
    return str(uuid.uuid4())


def now_ms() -> int:
    return int(time.time() * 1000)


def _track_params(t: Track) -> tuple:
    return (
        t.id,
        t.title,
        t.artist,
        t.album,
        t.duration,
        t.bpm,
        t.energy,
        t.valence,
        t.danceability,
        t.source,
        t.filename,
        t.path,
        t.created_at,
    )


def _row_to_track(row) -> Track:
    return Track(
        id=row["id"],
        title=row["title"],
        artist=row["artist"],
        album=row["album"],
        duration=row["duration"],
        bpm=row["bpm"],
        energy=row["energy"],
        valence=row["valence"],
        danceability=row["danceability"],
        source=row["source"],
        filename=row["filename"],
        path=row["path"],
        created_at=row["created_at"],
    )


class TrackStore:
    """Append-only track collection."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def insert(self, track: Track) -> Track:
        """Insert one track."""
        with self._db.connect() as conn:
            conn.execute(_INSERT_SQL, _track_params(track))
        logger.debug("Inserted track %s (%s)", track.id, track.title)
        return track

    def bulk_insert(self, tracks: Iterable[Track]) -> List[Track]:
        """Insert a batch in one transaction: all rows become visible together or none do."""
        batch = list(tracks)
        if not batch:
            return batch
        with self._db.connect() as conn:
            conn.executemany(_INSERT_SQL, [_track_params(t) for t in batch])
        logger.info("Inserted %d tracks", len(batch))
        return batch

    def list_all(self, newest_first: bool = True) -> List[Track]:
        """All tracks, newest first by default; insertion order otherwise."""
        if newest_first:
            order = "created_at DESC, seq DESC"
        else:
            order = "seq ASC"
        with self._db.connect() as conn:
            rows = conn.execute(f"SELECT * FROM tracks ORDER BY {order}").fetchall()
        return [_row_to_track(r) for r in rows]

    def count(self) -> int:
        with self._db.connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM tracks").fetchone()[0]
