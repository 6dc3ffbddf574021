"""
entity-maped: entity type repository for a Tiled-based map editor

Loads entity type definitions from an objecttypes XML descriptor, keeps
them in memory for editing, saves them back and loads entity images.
"""

__version__ = "0.1.0"
__author__ = "entity-maped Contributors"

# Core service imports
from .entities import EntityRepository, EntityImageLoader, ObjectTypesFileLoader
from .settings import AppSettings
from .utils.logging_config import setup_logging

# Main data models and errors
from .entities import (
    EntityType,
    EntityRepositoryError,
    RepositoryNotLoadedError,
    ProjectLoadError,
    ProjectSaveError,
    DuplicateNameError,
    EntityNotFoundError,
)

__all__ = [
    # Services
    "EntityRepository",
    "EntityImageLoader",
    "ObjectTypesFileLoader",
    "AppSettings",

    # Logging
    "setup_logging",

    # Data models
    "EntityType",

    # Errors
    "EntityRepositoryError",
    "RepositoryNotLoadedError",
    "ProjectLoadError",
    "ProjectSaveError",
    "DuplicateNameError",
    "EntityNotFoundError",
]
