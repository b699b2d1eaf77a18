"""Persist and load saved playlists (SQLite, track ids as JSON text)."""
import json
import logging
import uuid
from typing import List, Sequence

from vibelist.core.database import Database
from vibelist.core.track_store import now_ms
from vibelist.models.playlist import Playlist

logger = logging.getLogger(__name__)


class PlaylistStore:
    def __init__(self, db: Database) -> None:
        self._db = db

    def save(self, name: str, track_ids: Sequence[str]) -> Playlist:
        """Store a new playlist with the given ordered track ids verbatim."""
        playlist = Playlist(
            id=str(uuid.uuid4()),
            name=name,
            tracks=list(track_ids),
            created_at=now_ms(),
        )
        with self._db.connect() as conn:
            conn.execute(
                "INSERT INTO playlists (id, name, tracks, created_at) VALUES (?, ?, ?, ?)",
                (playlist.id, playlist.name, json.dumps(playlist.tracks), playlist.created_at),
            )
        logger.info("Saved playlist %r (%d tracks)", name, len(playlist.tracks))
        return playlist

    def list_all(self) -> List[Playlist]:
        """All playlists, newest first."""
        with self._db.connect() as conn:
            rows = conn.execute(
                "SELECT * FROM playlists ORDER BY created_at DESC, seq DESC"
            ).fetchall()
        return [
            Playlist(
                id=row["id"],
                name=row["name"],
                tracks=json.loads(row["tracks"]),
                created_at=row["created_at"],
            )
            for row in rows
        ]
