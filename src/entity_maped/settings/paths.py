"""
Path-related settings for entity-maped.
"""

from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING, cast

from ..entities.models import DEFAULT_DIRECTORY, DEFAULT_FILE_NAME

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

MAX_RECENT_PROJECTS = 10


class PathSettings:
    """Manages project location settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        """Type-safe list retrieval from settings."""
        if default is None:
            default = []
        value = self.settings.value(key, default)
        if isinstance(value, list):
            return [
                str(item) if item is not None else ""
                for item in cast(list[object], value)
            ]
        # INI storage returns single-item lists as plain strings
        if isinstance(value, str):
            return [value] if value else []
        return default

    @property
    def project_directory(self) -> str:
        """Get directory holding the descriptor file and entity images."""
        return self._get_str("paths/project_directory", DEFAULT_DIRECTORY)

    @project_directory.setter
    def project_directory(self, value: Union[str, Path]) -> None:
        """Set project directory."""
        self.settings.setValue("paths/project_directory", str(value))
        self.settings.sync()

    @property
    def project_file_name(self) -> str:
        """Get descriptor file name."""
        return self._get_str("paths/project_file_name", DEFAULT_FILE_NAME)

    @project_file_name.setter
    def project_file_name(self, value: str) -> None:
        """Set descriptor file name."""
        self.settings.setValue("paths/project_file_name", value)
        self.settings.sync()

    @property
    def project_file_path(self) -> Path:
        """Full path of the configured descriptor file."""
        return Path(self.project_directory) / self.project_file_name

    @property
    def recent_projects(self) -> List[str]:
        """Get list of recently opened descriptor files."""
        return self._get_list("paths/recent_projects", [])

    def add_recent_project(self, file_path: Union[str, Path]) -> None:
        """Add descriptor file to recent projects list (max 10 items)."""
        recent = self.recent_projects
        file_str = str(file_path)

        if file_str in recent:
            recent.remove(file_str)

        recent.insert(0, file_str)
        recent = recent[:MAX_RECENT_PROJECTS]

        self.settings.setValue("paths/recent_projects", recent)
        self.settings.sync()

    def set_recent_projects(self, recent: List[str]) -> None:
        """Replace recent projects list."""
        self.settings.setValue("paths/recent_projects", recent[:MAX_RECENT_PROJECTS])
        self.settings.sync()

    def clear_recent_projects(self) -> None:
        """Clear recent projects list."""
        self.settings.setValue("paths/recent_projects", [])
        self.settings.sync()
