"""Track record and derived mood features."""
from dataclasses import dataclass

SOURCE_UPLOAD = "upload"  # locally playable file under the uploads dir
SOURCE_EXTERNAL = "external"  # CSV row, no local audio
SOURCE_DATASET = "dataset"  # seeded row, no local audio


@dataclass(frozen=True)
class Features:
    """Pseudo mood features for one track."""
    bpm: float
    energy: float
    valence: float
    danceability: float


@dataclass(frozen=True)
class Track:
    """Stored track. Immutable once inserted."""
    id: str
    title: str
    artist: str
    album: str
    duration: float  # seconds
    bpm: float
    energy: float
    valence: float
    danceability: float
    source: str
    filename: str
    path: str
    created_at: int  # epoch ms

    @property
    def is_local(self) -> bool:
        return self.source == SOURCE_UPLOAD
