"""
Core settings management for entity-maped.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigError, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .editor import EditorSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the native store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("entity_maped", "entity_maped")

        if self.settings.status() != QSettings.Status.NoError:
            raise ConfigError(
                f"Cannot access settings storage: {self.settings.fileName()}"
            )

        self.profile = profile
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._editor = EditorSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def editor(self) -> EditorSettings:
        """Access editor settings subsystem."""
        return self._editor

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def project_directory(self) -> str:
        """Get directory holding the descriptor file and entity images."""
        return self._paths.project_directory

    @project_directory.setter
    def project_directory(self, value: Union[str, Path]) -> None:
        """Set project directory."""
        self._paths.project_directory = value

    @property
    def project_file_name(self) -> str:
        """Get descriptor file name."""
        return self._paths.project_file_name

    @project_file_name.setter
    def project_file_name(self, value: str) -> None:
        """Set descriptor file name."""
        self._paths.project_file_name = value

    @property
    def project_file_path(self) -> Path:
        """Full path of the configured descriptor file."""
        return self._paths.project_file_path

    @property
    def recent_projects(self) -> List[str]:
        """Get list of recently opened descriptor files."""
        return self._paths.recent_projects

    def add_recent_project(self, file_path: Union[str, Path]) -> None:
        """Add descriptor file to recent projects list (max 10 items)."""
        self._paths.add_recent_project(file_path)

    def clear_recent_projects(self) -> None:
        """Clear recent projects list."""
        self._paths.clear_recent_projects()

    # === EDITOR SETTINGS (DELEGATED) ===

    @property
    def image_cache_enabled(self) -> bool:
        """Check if decoded entity images are cached in memory."""
        return self._editor.image_cache_enabled

    @image_cache_enabled.setter
    def image_cache_enabled(self, value: bool) -> None:
        """Enable or disable the entity image cache."""
        self._editor.image_cache_enabled = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
