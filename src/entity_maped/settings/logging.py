"""
Logging options read by setup_logging().
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/entity_maped.csv"

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings:
    """Console and file logging switches stored under "logging/"."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _flag(self, key: str, default: bool) -> bool:
        value = self.settings.value(f"logging/{key}", default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _store(self, key: str, value: object) -> None:
        self.settings.setValue(f"logging/{key}", value)
        self.settings.sync()

    @property
    def console_logging(self) -> bool:
        return self._flag("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store("console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Level name for the console handler, INFO unless configured."""
        value = self.settings.value("logging/console_level", "INFO")
        return str(value) if value else "INFO"

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in LEVEL_NAMES:
            logger.warning(f"Ignoring unknown console log level '{value}'")
            return
        self._store("console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._flag("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store("console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Whether rows are also written to LOG_FILE_PATH."""
        return self._flag("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store("file_enabled", value)

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH
