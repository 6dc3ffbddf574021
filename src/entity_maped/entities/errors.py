"""
Exceptions raised by the entity repository.
"""

from pathlib import Path
from typing import Optional


class EntityRepositoryError(Exception):
    """Base class for all entity repository errors."""
    pass


class RepositoryNotLoadedError(EntityRepositoryError):
    """Raised when a structural operation is used before a successful load."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: no project loaded")
        self.operation = operation


class ProjectLoadError(EntityRepositoryError):
    """Raised when the descriptor file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ProjectSaveError(EntityRepositoryError):
    """Raised when the descriptor file cannot be written."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class DuplicateNameError(EntityRepositoryError, ValueError):
    """Raised when adding an entity type whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(f"Entity type '{name}' already exists")
        self.name = name


class EntityNotFoundError(EntityRepositoryError, LookupError):
    """Raised when no entity type has the requested name."""

    def __init__(self, name: str):
        super().__init__(f"No entity type named '{name}'")
        self.name = name
