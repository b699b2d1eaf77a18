"""FastAPI app, CORS, static files, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Configure logging in the worker process (so import/generation INFO logs are visible with uvicorn --reload)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from vibelist.api.state import AppState, get_state
from vibelist.config import CORS_ORIGINS, STATIC_DIR, UPLOADS_DIR, ensure_data_dir

# Import routes after state to avoid circular imports
from vibelist.api.routes import playlists, tracks

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    state = get_state()
    state.db.initialize()
    logger.info("Library: %d tracks (%s)", state.tracks.count(), state.db.db_path)
    yield


app = FastAPI(
    title="Vibelist API",
    description="Local REST API for the Vibelist music library and playlist generator",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tracks.router, prefix="/api", tags=["tracks"])
app.include_router(playlists.router, prefix="/api", tags=["playlists"])


@app.get("/health")
def health():
    return {"ok": True}


# Stored uploads are addressable by their generated filename
app.mount("/uploads", StaticFiles(directory=str(UPLOADS_DIR), check_dir=False), name="uploads")
# Browser UI (only if present); mounted last so /api and /uploads win
if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
