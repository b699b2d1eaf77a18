"""Vibe policies: filter + sort a track collection into generation candidates."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from vibelist.models.track import Track

logger = logging.getLogger(__name__)

# Fewer filtered candidates than this and the whole library is used instead
MIN_CANDIDATES = 5


class Vibe(str, Enum):
    ENERGETIC = "energetic"
    CHILL = "chill"
    FOCUS = "focus"
    PARTY = "party"
    DEFAULT = "default"

    @classmethod
    def parse(cls, name: Optional[str]) -> "Vibe":
        """Map a request string to a vibe; anything unrecognized is DEFAULT."""
        key = (name or "").strip().lower()
        for vibe in cls:
            if vibe.value == key:
                return vibe
        return cls.DEFAULT


@dataclass(frozen=True)
class VibePolicy:
    """Keep tracks matching `accepts`; order by `sort_key` when set, else keep insertion order."""
    accepts: Callable[[Track], bool]
    sort_key: Optional[Callable[[Track], float]] = None
    descending: bool = False


POLICIES: Dict[Vibe, VibePolicy] = {
    Vibe.ENERGETIC: VibePolicy(
        accepts=lambda t: t.energy > 0.6,
        sort_key=lambda t: t.energy,
        descending=True,
    ),
    Vibe.CHILL: VibePolicy(
        accepts=lambda t: t.energy < 0.5 and t.bpm < 110,
        sort_key=lambda t: t.energy,
    ),
    Vibe.FOCUS: VibePolicy(accepts=lambda t: t.danceability < 0.5),
    Vibe.PARTY: VibePolicy(accepts=lambda t: t.valence > 0.6 and t.danceability > 0.6),
    Vibe.DEFAULT: VibePolicy(accepts=lambda t: True),
}


def classify(vibe: Vibe, tracks: Sequence[Track]) -> List[Track]:
    """Return the ordered candidate list for a vibe.

    Falls back to the full, unsorted collection when fewer than MIN_CANDIDATES match.
    """
    policy = POLICIES[vibe]
    candidates = [t for t in tracks if policy.accepts(t)]
    if policy.sort_key is not None:
        # sorted() is stable: ties keep insertion order
        candidates = sorted(candidates, key=policy.sort_key, reverse=policy.descending)
    if len(candidates) < MIN_CANDIDATES:
        logger.info(
            "Vibe %s matched %d tracks (< %d); using full library of %d",
            vibe.value,
            len(candidates),
            MIN_CANDIDATES,
            len(tracks),
        )
        return list(tracks)
    return candidates
