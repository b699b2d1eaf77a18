"""Deterministic pseudo mood features derived from track duration.

Stands in for a learned feature extractor: the values are reproducible rather
than meaningful, so re-uploading identical audio yields identical features.
"""
import math
from typing import Optional

from vibelist.models.track import Features

FEATURE_SEED = 123.45

# Used when the audio file cannot be read at all
FALLBACK_DURATION_SEC = 180.0
FALLBACK_BPM = 100.0
FALLBACK_ENERGY = 0.5
FALLBACK_VALENCE = 0.5
FALLBACK_DANCEABILITY = 0.5


def derive(duration_seconds: Optional[float], known_bpm: Optional[float] = None) -> Features:
    """Compute bpm/energy/valence/danceability from duration (and tag BPM if any)."""
    p = (duration_seconds or 0) * FEATURE_SEED
    energy = abs(math.sin(p))
    valence = abs(math.cos(p * 2))
    danceability = abs(math.sin(p * 3))
    if known_bpm is not None and known_bpm > 0:
        bpm = float(known_bpm)
    else:
        bpm = 60 + energy * 120
    return Features(bpm=bpm, energy=energy, valence=valence, danceability=danceability)


def fallback_features() -> Features:
    """Fixed features for unreadable audio."""
    return Features(
        bpm=FALLBACK_BPM,
        energy=FALLBACK_ENERGY,
        valence=FALLBACK_VALENCE,
        danceability=FALLBACK_DANCEABILITY,
    )
