"""Shared fixtures: temporary datastore, track factory, API client."""
import itertools

import pytest
from fastapi.testclient import TestClient

from vibelist.api.app import app
from vibelist.api.state import AppState, get_state
from vibelist.core.database import Database
from vibelist.core.playlist_store import PlaylistStore
from vibelist.core.track_store import TrackStore
from vibelist.models.track import SOURCE_EXTERNAL, Track

_ids = itertools.count(1)


def make_track(
    energy=0.5,
    valence=0.5,
    danceability=0.5,
    bpm=100.0,
    duration=180.0,
    title=None,
    created_at=1_700_000_000_000,
):
    """Build a Track with sensible defaults for tests."""
    n = next(_ids)
    return Track(
        id=f"track-{n}",
        title=title or f"Track {n}",
        artist="Artist",
        album="Album",
        duration=duration,
        bpm=bpm,
        energy=energy,
        valence=valence,
        danceability=danceability,
        source=SOURCE_EXTERNAL,
        filename="External Source",
        path="",
        created_at=created_at,
    )


@pytest.fixture
def track_factory():
    return make_track


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "library.db")
    database.initialize()
    return database


@pytest.fixture
def track_store(db):
    return TrackStore(db)


@pytest.fixture
def playlist_store(db):
    return PlaylistStore(db)


@pytest.fixture
def state(tmp_path):
    return AppState(db_path=tmp_path / "api.db", uploads_dir=tmp_path / "uploads")


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
