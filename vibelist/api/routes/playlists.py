"""Playlist generation, saving, and listing."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from vibelist.api.serializers import playlist_to_dict, track_to_dict
from vibelist.api.state import AppState, get_state
from vibelist.core.database import StoreError
from vibelist.core.generator import generate_playlist

router = APIRouter()


class GenerateBody(BaseModel):
    vibe: str = ""
    duration: int = Field(..., ge=0, description="Target length in minutes")


class TrackRef(BaseModel):
    """Track as sent back by the client; only the id is stored."""
    id: str


class SavePlaylistBody(BaseModel):
    name: str
    tracks: List[TrackRef] = []


@router.post("/generate")
def generate(body: GenerateBody, state: AppState = Depends(get_state)):
    """Pick tracks for a vibe that fill `duration` minutes (plus a two minute allowance)."""
    try:
        library = state.tracks.list_all(newest_first=False)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    result = generate_playlist(library, body.vibe, body.duration)
    return {
        "playlist": [track_to_dict(t) for t in result.playlist],
        "totalDuration": result.total_duration,
    }


@router.post("/save-playlist")
def save_playlist(body: SavePlaylistBody, state: AppState = Depends(get_state)):
    """Save a playlist as the ordered list of its track ids."""
    try:
        playlist = state.playlists.save(body.name, [t.id for t in body.tracks])
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Playlist saved successfully", "id": playlist.id}


@router.get("/playlists")
def list_playlists(state: AppState = Depends(get_state)):
    """List saved playlists, newest first."""
    try:
        playlists = state.playlists.list_all()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [playlist_to_dict(p) for p in playlists]
