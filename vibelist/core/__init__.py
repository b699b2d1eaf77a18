"""Core services: feature derivation, stores, vibe classification, selection."""
from vibelist.core.database import Database, StoreError
from vibelist.core.playlist_store import PlaylistStore
from vibelist.core.track_store import TrackStore

__all__ = ["Database", "PlaylistStore", "StoreError", "TrackStore"]
