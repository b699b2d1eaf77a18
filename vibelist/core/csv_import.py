"""CSV rows -> Track records with per-field defaults.

Every column is optional. Headers are matched case-insensitively, preferring
the exact column name, then its lower-case form, then any other casing.
A cell that is empty or does not parse falls back to the field default, so a
malformed row never aborts the import.
"""
import csv
import io
import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from vibelist.core.track_store import new_track_id, now_ms
from vibelist.models.track import SOURCE_EXTERNAL, Track

logger = logging.getLogger(__name__)

EXTERNAL_FILENAME = "External Source"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _parse_text(raw: str) -> Optional[str]:
    return raw.strip() or None


def _parse_seconds(raw: str) -> Optional[float]:
    # leading integer only: "215.7" -> 215, "3:30" -> 3, "200s" -> 200
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    seconds = int(match.group(0))
    return float(seconds) if seconds > 0 else None


def _parse_positive(raw: str) -> Optional[float]:
    value = _parse_number(raw)
    return value if value is not None and value > 0 else None


def _parse_number(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class CsvField:
    column: str
    parse: Callable[[str], Optional[object]]
    default: object


FIELDS: Dict[str, CsvField] = {
    "title": CsvField("Title", _parse_text, "Unknown Title"),
    "artist": CsvField("Artist", _parse_text, "Unknown Artist"),
    "album": CsvField("Album", _parse_text, "Unknown Album"),
    "duration": CsvField("Duration", _parse_seconds, 180.0),
    "bpm": CsvField("BPM", _parse_positive, 120.0),
    "energy": CsvField("Energy", _parse_number, 0.5),
    "valence": CsvField("Valence", _parse_number, 0.5),
    "danceability": CsvField("Danceability", _parse_number, 0.5),
}


def resolve_columns(headers: List[str]) -> Dict[str, Optional[str]]:
    """Map each field name to the CSV header that supplies it (None if absent)."""
    resolved: Dict[str, Optional[str]] = {}
    for name, field in FIELDS.items():
        choice = None
        for candidate in (field.column, field.column.lower()):
            if candidate in headers:
                choice = candidate
                break
        if choice is None:
            wanted = field.column.casefold()
            choice = next((h for h in headers if h.strip().casefold() == wanted), None)
        resolved[name] = choice
    return resolved


def row_values(
    row: Mapping[str, Optional[str]], columns: Dict[str, Optional[str]]
) -> Dict[str, object]:
    """Parse one row into field values, applying defaults."""
    values: Dict[str, object] = {}
    for name, field in FIELDS.items():
        column = columns.get(name)
        raw = row.get(column) if column else None
        parsed = field.parse(raw) if raw is not None else None
        if parsed is None:
            if raw not in (None, ""):
                logger.debug("Column %s: %r unusable, using default %r", field.column, raw, field.default)
            parsed = field.default
        values[name] = parsed
    return values


def parse_csv(
    text: str, source: str = SOURCE_EXTERNAL, filename: str = EXTERNAL_FILENAME
) -> List[Track]:
    """Parse CSV text into tracks (not yet stored). All rows share one created_at."""
    reader = csv.DictReader(io.StringIO(text))
    columns = resolve_columns(list(reader.fieldnames or []))
    created_at = now_ms()
    tracks = []
    for row in reader:
        values = row_values(row, columns)
        tracks.append(
            Track(
                id=new_track_id(),
                title=values["title"],
                artist=values["artist"],
                album=values["album"],
                duration=values["duration"],
                bpm=values["bpm"],
                energy=values["energy"],
                valence=values["valence"],
                danceability=values["danceability"],
                source=source,
                filename=filename,
                path="",
                created_at=created_at,
            )
        )
    logger.info("Parsed %d CSV rows", len(tracks))
    return tracks


def decode_csv(data: bytes) -> str:
    """Decode an uploaded CSV payload (UTF-8, BOM tolerated)."""
    return data.decode("utf-8-sig", errors="replace")
