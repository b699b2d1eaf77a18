"""Playlist generation: classify the library by vibe, then fill the target duration."""
import logging
from typing import Optional, Sequence

from vibelist.core.selector import select
from vibelist.core.vibes import Vibe, classify
from vibelist.models.playlist import GenerationResult
from vibelist.models.track import Track

logger = logging.getLogger(__name__)


def generate_playlist(
    tracks: Sequence[Track], vibe: Optional[str], duration_minutes: int
) -> GenerationResult:
    """Build a playlist for `vibe` lasting about `duration_minutes`.

    An empty result is not an error; it means the library is too small.
    """
    parsed = Vibe.parse(vibe)
    target_seconds = duration_minutes * 60
    candidates = classify(parsed, tracks)
    playlist, total = select(candidates, target_seconds)
    logger.info(
        "Generated %s playlist: %d/%d tracks, %.0fs of %ds target",
        parsed.value,
        len(playlist),
        len(candidates),
        total,
        target_seconds,
    )
    return GenerationResult(playlist=playlist, total_duration=total)
