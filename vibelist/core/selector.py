"""Greedy duration-bounded selection over an ordered candidate list."""
from typing import List, Sequence, Tuple

from vibelist.models.track import Track

OVERSHOOT_ALLOWANCE_SEC = 120


def select(candidates: Sequence[Track], target_seconds: float) -> Tuple[List[Track], float]:
    """Walk candidates in order, keeping each track that still fits within target + allowance.

    Single pass, no reordering or backtracking; a track that does not fit is
    skipped and later (shorter) tracks are still considered.
    """
    limit = target_seconds + OVERSHOOT_ALLOWANCE_SEC
    playlist: List[Track] = []
    total = 0.0
    for track in candidates:
        if total + track.duration <= limit:
            playlist.append(track)
            total += track.duration
    return playlist, total
