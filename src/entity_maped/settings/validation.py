"""
Settings validation system for entity-maped.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        project_dir = Path(self.settings.project_directory)
        if not project_dir.exists():
            warnings.append(f"Project directory does not exist: {project_dir}")
        elif not project_dir.is_dir():
            errors.append(f"Project directory is not a directory: {project_dir}")
        elif not self.settings.project_file_path.exists():
            warnings.append(
                f"Descriptor file not found: {self.settings.project_file_path}"
            )

        if not self.settings.project_file_name:
            errors.append("Descriptor file name is empty")

        # Validate recent projects
        recent = self.settings.recent_projects
        valid_recent: List[str] = []
        for file_path in recent:
            if Path(file_path).exists():
                valid_recent.append(file_path)
            else:
                warnings.append(f"Recent project no longer exists: {file_path}")

        # Clean up invalid recent projects
        if len(valid_recent) != len(recent):
            self.settings.paths.set_recent_projects(valid_recent)

        return ValidationResult(errors=errors, warnings=warnings)
