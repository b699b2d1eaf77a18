"""Saved playlists and generator output."""
from dataclasses import dataclass, field
from typing import List

from vibelist.models.track import Track


@dataclass(frozen=True)
class Playlist:
    """Saved playlist: ordered track ids, frozen at save time."""
    id: str
    name: str
    tracks: List[str]
    created_at: int  # epoch ms


@dataclass
class GenerationResult:
    """Tracks picked by the generator and their summed duration in seconds."""
    playlist: List[Track] = field(default_factory=list)
    total_duration: float = 0.0
