"""
Module for working with entity type definitions.

Provides the repository that loads entity types from an objecttypes XML
descriptor, edits them in memory, writes them back and loads the
matching entity images.
"""

from .repository import EntityRepository
from .models import (
    EntityType,
    DEFAULT_DIRECTORY,
    DEFAULT_FILE_NAME,
    DEFAULT_COLOR,
    IMAGE_EXTENSION,
)
from .errors import (
    EntityRepositoryError,
    RepositoryNotLoadedError,
    ProjectLoadError,
    ProjectSaveError,
    DuplicateNameError,
    EntityNotFoundError,
)
from .loaders import ObjectTypesFileLoader
from .images import EntityImageLoader

__all__ = [
    # Main repository
    "EntityRepository",
    # Models and constants
    "EntityType",
    "DEFAULT_DIRECTORY",
    "DEFAULT_FILE_NAME",
    "DEFAULT_COLOR",
    "IMAGE_EXTENSION",
    # Errors
    "EntityRepositoryError",
    "RepositoryNotLoadedError",
    "ProjectLoadError",
    "ProjectSaveError",
    "DuplicateNameError",
    "EntityNotFoundError",
    # Component classes (for advanced usage)
    "ObjectTypesFileLoader",
    "EntityImageLoader",
]
