"""Configuration: env, data paths, API host/port."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of vibelist package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so VIBELIST_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("VIBELIST_DATA_DIR", str(BASE_DIR / "data")))
DB_PATH = Path(os.getenv("VIBELIST_DB_PATH", str(DATA_DIR / "library.db")))
UPLOADS_DIR = Path(os.getenv("VIBELIST_UPLOADS_DIR", str(DATA_DIR / "uploads")))
# Browser UI, served at / when present
STATIC_DIR = Path(os.getenv("VIBELIST_STATIC_DIR", str(BASE_DIR / "public")))

# API
API_HOST = os.getenv("VIBELIST_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VIBELIST_API_PORT", "3000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("VIBELIST_CORS_ORIGINS", "*").split(",") if o.strip()]


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
