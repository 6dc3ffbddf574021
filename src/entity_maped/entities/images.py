"""
Image loading for entity types.

Entity images are PNG files stored next to the descriptor file and named
after the entity type.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image

from .models import IMAGE_EXTENSION


class EntityImageLoader:
    """Load entity images from disk with Pillow.

    Every call re-reads the file unless use_cache is enabled, in which case
    decoded images are kept per resolved path and copies are handed out.
    """

    def __init__(self, use_cache: bool = False):
        self.use_cache = use_cache
        self._cache: Dict[Path, Image.Image] = {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def image_path(directory: str | Path, name: str) -> Path:
        """Return the path of the image for the given entity name."""
        return Path(directory) / f"{name}.{IMAGE_EXTENSION}"

    def load(self, directory: str | Path, name: str) -> Optional[Image.Image]:
        """Load and decode the image for an entity name.

        Returns:
            Decoded image, or None if the file is missing or cannot be decoded
        """
        image_path = self.image_path(directory, name)

        if self.use_cache:
            cached = self._cache.get(image_path.resolve())
            if cached is not None:
                return cached.copy()

        if not image_path.is_file():
            self.logger.warning(f'Image file "{image_path}" is not found!')
            return None

        try:
            with Image.open(image_path) as image:
                # Force decoding while the file is still open
                image.load()
        except (OSError, ValueError) as e:
            self.logger.warning(f'Cannot read image file "{image_path}": {e}')
            return None

        if self.use_cache:
            self._cache[image_path.resolve()] = image
            return image.copy()
        return image

    def clear_cache(self) -> None:
        """Drop all cached images."""
        self._cache.clear()

    @property
    def cached_count(self) -> int:
        return len(self._cache)
