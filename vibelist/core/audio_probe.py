"""Read duration and basic tags from an audio file via mutagen."""
import logging
from dataclasses import dataclass
from typing import Optional

from mutagen import File as MutagenFile

logger = logging.getLogger(__name__)


@dataclass
class AudioTags:
    """What we could read from the file; tag fields are None when absent."""
    duration: float
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    bpm: Optional[float] = None


def _first(audio, key: str) -> Optional[str]:
    values = audio.get(key) or [None]
    value = values[0]
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _parse_bpm(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        bpm = float(raw)
    except ValueError:
        return None
    return bpm if bpm > 0 else None


def probe_audio(path: str) -> Optional[AudioTags]:
    """Return duration and tags, or None if the file cannot be read or parsed."""
    try:
        audio = MutagenFile(path, easy=True)
    except Exception as e:
        logger.warning("Cannot read audio metadata from %s: %s", path, e)
        return None
    if audio is None:
        logger.warning("Unrecognized audio format: %s", path)
        return None

    duration = float(audio.info.length) if audio.info and audio.info.length else 0.0
    return AudioTags(
        duration=duration,
        title=_first(audio, "title"),
        artist=_first(audio, "artist"),
        album=_first(audio, "album"),
        bpm=_parse_bpm(_first(audio, "bpm")),
    )
