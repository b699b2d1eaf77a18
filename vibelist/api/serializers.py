"""Model -> JSON dict helpers shared by routes."""
from vibelist.models.playlist import Playlist
from vibelist.models.track import Track


def track_to_dict(t: Track) -> dict:
    return {
        "id": t.id,
        "title": t.title,
        "artist": t.artist,
        "album": t.album,
        "duration": t.duration,
        "bpm": t.bpm,
        "energy": t.energy,
        "valence": t.valence,
        "danceability": t.danceability,
        "source": t.source,
        "filename": t.filename,
        "path": t.path,
        "created_at": t.created_at,
    }


def playlist_to_dict(p: Playlist) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "tracks": list(p.tracks),
        "created_at": p.created_at,
    }
