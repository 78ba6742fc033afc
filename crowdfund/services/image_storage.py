"""
Disk storage for uploaded campaign images.

Files are written under the configured upload directory with a generated
name of the form ``<epoch-millis>-<random><ext>``; only that name is stored
on the campaign row.
"""
from __future__ import annotations

import logging
import os
import secrets
import shutil
import time
from pathlib import Path
from typing import BinaryIO, Optional

from crowdfund.errors import ValidationError
from crowdfund.utils import config

logger = logging.getLogger(__name__)

IMAGE_REQUIRED = "Image is required"
IMAGE_ONLY = "Only image files are allowed!"


class ImageStorage:
    """Writes and removes campaign images in one directory."""

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else config.upload_dir()

    def ensure_root(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    @staticmethod
    def generate_filename(original_filename: Optional[str]) -> str:
        ext = os.path.splitext(original_filename or "")[1].lower()
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"

    def save(self, stream: BinaryIO, original_filename: Optional[str], content_type: Optional[str]) -> str:
        """Persist an uploaded image and return its stored filename."""
        if not (content_type or "").startswith("image/"):
            raise ValidationError(IMAGE_ONLY)
        filename = self.generate_filename(original_filename)
        target = self.ensure_root() / filename
        with open(target, "wb") as out:
            shutil.copyfileobj(stream, out)
        logger.info("image_stored filename=%s", filename)
        return filename

    def path_for(self, filename: str) -> Path:
        return self.root / filename

    def delete(self, filename: str) -> None:
        try:
            self.path_for(filename).unlink()
        except FileNotFoundError:
            logger.warning("image_delete_missing filename=%s", filename)


def get_image_storage() -> ImageStorage:
    """FastAPI dependency returning storage rooted at UPLOAD_DIR."""
    return ImageStorage()
