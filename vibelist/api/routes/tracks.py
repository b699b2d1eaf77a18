"""Track library: list, audio upload, CSV import."""
import csv
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from vibelist.api.serializers import track_to_dict
from vibelist.api.state import AppState, get_state
from vibelist.core.csv_import import decode_csv, parse_csv
from vibelist.core.database import StoreError
from vibelist.core.uploads import discard_upload, import_upload

router = APIRouter()


@router.get("/tracks")
def list_tracks(state: AppState = Depends(get_state)):
    """List all tracks, newest first."""
    try:
        tracks = state.tracks.list_all()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [track_to_dict(t) for t in tracks]


@router.post("/upload")
def upload_tracks(
    files: List[UploadFile] = File(...),
    state: AppState = Depends(get_state),
):
    """Store uploaded audio files and add one track per file."""
    results = []
    for upload in files:
        data = upload.file.read()
        track = import_upload(state.uploads_dir, upload.filename or "", data)
        try:
            state.tracks.insert(track)
        except StoreError as e:
            discard_upload(track)
            # files before this one are already stored
            raise HTTPException(
                status_code=500,
                detail={"error": str(e), "tracks": [track_to_dict(t) for t in results]},
            )
        results.append(track)
    return {"message": "Uploaded successfully", "tracks": [track_to_dict(t) for t in results]}


@router.post("/upload-csv")
def upload_csv(
    file: Optional[UploadFile] = File(None),
    state: AppState = Depends(get_state),
):
    """Import tracks from a CSV file (Title, Artist, Album, Duration, BPM, Energy, Valence, Danceability)."""
    if file is None:
        raise HTTPException(status_code=400, detail="No CSV file uploaded")
    try:
        tracks = parse_csv(decode_csv(file.file.read()))
    except csv.Error as e:
        raise HTTPException(status_code=400, detail=f"Invalid CSV: {e}")
    try:
        state.tracks.bulk_insert(tracks)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "message": f"Imported {len(tracks)} tracks from CSV",
        "tracks": [track_to_dict(t) for t in tracks],
    }
