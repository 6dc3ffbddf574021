"""
Editor behaviour settings for entity-maped.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class EditorSettings:
    """Manages editor behaviour settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    @property
    def image_cache_enabled(self) -> bool:
        """Check if decoded entity images are cached in memory."""
        return self._get_bool("editor/image_cache_enabled", False)

    @image_cache_enabled.setter
    def image_cache_enabled(self, value: bool) -> None:
        """Enable or disable the entity image cache."""
        self.settings.setValue("editor/image_cache_enabled", value)
        self.settings.sync()
