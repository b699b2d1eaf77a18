"""Uploaded audio: store bytes under a unique name, probe tags, derive features."""
import logging
import random
import time
from pathlib import Path

from vibelist.core import audio_probe
from vibelist.core.features import FALLBACK_DURATION_SEC, derive, fallback_features
from vibelist.core.track_store import new_track_id, now_ms
from vibelist.models.track import SOURCE_UPLOAD, Track

logger = logging.getLogger(__name__)


def unique_filename(original_name: str) -> str:
    """'<epoch ms>-<random>' plus the original extension."""
    suffix = Path(original_name or "").suffix
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"


def save_upload(uploads_dir: Path, original_name: str, data: bytes) -> Path:
    """Write the uploaded bytes to a fresh file in uploads_dir and return its path."""
    uploads_dir.mkdir(parents=True, exist_ok=True)
    path = uploads_dir / unique_filename(original_name)
    while path.exists():
        path = uploads_dir / unique_filename(original_name)
    path.write_bytes(data)
    return path


def track_from_file(path: Path, original_name: str) -> Track:
    """Build a Track for a stored upload. Unreadable audio gets the fixed fallback features."""
    tags = audio_probe.probe_audio(str(path))
    if tags is None:
        features = fallback_features()
        duration = FALLBACK_DURATION_SEC
        title = artist = album = None
    else:
        features = derive(tags.duration, tags.bpm)
        duration = tags.duration
        title, artist, album = tags.title, tags.artist, tags.album

    return Track(
        id=new_track_id(),
        title=title or Path(original_name or path.name).stem,
        artist=artist or "Unknown Artist",
        album=album or "Unknown Album",
        duration=duration,
        bpm=features.bpm,
        energy=features.energy,
        valence=features.valence,
        danceability=features.danceability,
        source=SOURCE_UPLOAD,
        filename=path.name,
        path=str(path),
        created_at=now_ms(),
    )


def import_upload(uploads_dir: Path, original_name: str, data: bytes) -> Track:
    """Store one uploaded file and return its (not yet inserted) Track."""
    path = save_upload(uploads_dir, original_name, data)
    track = track_from_file(path, original_name)
    logger.info(
        "Upload %s -> %s (%.0fs, energy %.2f, bpm %.0f)",
        original_name,
        path.name,
        track.duration,
        track.energy,
        track.bpm,
    )
    return track


def discard_upload(track: Track) -> None:
    """Remove the stored file of a track that never made it into the store."""
    if not track.is_local or not track.path:
        return
    Path(track.path).unlink(missing_ok=True)
    logger.info("Discarded upload %s", track.filename)
