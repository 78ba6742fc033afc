"""Runtime settings read from the environment."""

import logging
import os
from pathlib import Path
from typing import List

DEFAULT_UPLOAD_DIR = "uploads"


def log_level_name() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def log_level() -> int:
    return getattr(logging, log_level_name(), logging.INFO)


def upload_dir() -> Path:
    """Directory where uploaded campaign images are written and served from."""
    return Path(os.getenv("UPLOAD_DIR", DEFAULT_UPLOAD_DIR))


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
