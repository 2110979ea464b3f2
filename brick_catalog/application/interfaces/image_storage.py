"""Abstract interface (port) for storing the image attached to a catalog record."""

from abc import ABC, abstractmethod
from pathlib import Path


class ImageStorage(ABC):
    """Port for image files — implemented in the infrastructure layer."""

    @abstractmethod
    async def save(
        self, content: bytes, original_filename: str, record_id: str, set_number: str
    ) -> str:
        """Store an image and return the stored filename.

        Raises UnsupportedImageTypeError before writing anything when the
        extension is not allowed.
        """
        ...

    @abstractmethod
    async def delete(self, filename: str) -> bool:
        """Remove a stored image. Returns False if it was already absent."""
        ...

    @abstractmethod
    def get_path(self, filename: str) -> Path:
        """Return the on-disk path of a stored image."""
        ...
