"""Shared application state (injected into routes)."""
from pathlib import Path

from vibelist.config import DB_PATH, UPLOADS_DIR
from vibelist.core.database import Database
from vibelist.core.playlist_store import PlaylistStore
from vibelist.core.track_store import TrackStore


class AppState:
    """Datastore handles and upload location. Holds no per-request data."""

    def __init__(self, db_path: Path = DB_PATH, uploads_dir: Path = UPLOADS_DIR) -> None:
        self.db = Database(db_path)
        self.tracks = TrackStore(self.db)
        self.playlists = PlaylistStore(self.db)
        self.uploads_dir = Path(uploads_dir)


_state = AppState()


def get_state() -> AppState:
    return _state
