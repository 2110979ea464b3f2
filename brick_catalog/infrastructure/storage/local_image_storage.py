"""Local filesystem storage for catalog record images.

Storage layout:
    <upload_dir>/<record_id>_<sanitised_set_number>.<ext>
"""

import logging
import re
from pathlib import Path

from brick_catalog.application.interfaces import ImageStorage
from brick_catalog.domain.exceptions import UnsupportedImageTypeError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png", "gif", "webp")
DEFAULT_EXTENSION = "jpg"

_UNSAFE_CHARS = re.compile(r'[/\\:*?"<>| ]')


def sanitise_set_number(set_number: str) -> str:
    """Replace path separators and other characters unsafe in filenames with underscores."""
    return _UNSAFE_CHARS.sub("_", set_number)


def image_extension(original_filename: str) -> str:
    """Return the lower-cased extension of an upload, defaulting to jpg when it has none."""
    suffix = Path(original_filename).suffix
    if not suffix:
        return DEFAULT_EXTENSION
    ext = suffix.lstrip(".").lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedImageTypeError(suffix, ALLOWED_EXTENSIONS)
    return ext


class LocalImageStorage(ImageStorage):
    """Infrastructure adapter storing record images in a single directory."""

    def __init__(self, upload_dir: str):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    async def save(
        self, content: bytes, original_filename: str, record_id: str, set_number: str
    ) -> str:
        ext = image_extension(original_filename)
        filename = f"{record_id}_{sanitise_set_number(set_number)}.{ext}"

        dest_path = self._upload_dir / filename
        dest_path.write_bytes(content)

        logger.info("Stored image: %s (%d bytes)", dest_path, len(content))
        return filename

    async def delete(self, filename: str) -> bool:
        if not filename:
            return False

        file_path = self._upload_dir / Path(filename).name
        if not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted image from disk: %s", file_path)
        return True

    def get_path(self, filename: str) -> Path:
        return self._upload_dir / Path(filename).name
