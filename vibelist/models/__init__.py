"""Data models for tracks, features, and playlists."""
from vibelist.models.playlist import GenerationResult, Playlist
from vibelist.models.track import Features, Track

__all__ = [
    "Features",
    "GenerationResult",
    "Playlist",
    "Track",
]
