"""
Repository of entity type definitions backed by an objecttypes XML file.

The in-memory list of EntityType records is the single source of truth:
the XML tree is parsed on load and rebuilt from the list on save.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Union

from PIL import Image

from .errors import (
    DuplicateNameError,
    EntityNotFoundError,
    EntityRepositoryError,
    RepositoryNotLoadedError,
)
from .images import EntityImageLoader
from .loaders import ObjectTypesFileLoader
from .models import DEFAULT_DIRECTORY, DEFAULT_FILE_NAME, EntityType

if TYPE_CHECKING:
    from ..settings import AppSettings


class EntityRepository:
    """Load, edit and save the entity types of a map project.

    The repository is Unloaded until load() succeeds; adding, removing and
    saving require a loaded project. Lookups and iteration work in both
    states (an Unloaded repository is simply empty).

    Images are resolved relative to the project directory as
    "<directory>/<entity name>.png".

    Not thread-safe: use from a single thread.
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        file_name: Optional[str] = None,
        settings: Optional["AppSettings"] = None,
    ):
        """Initialize an empty, unloaded repository.

        Args:
            directory: Folder holding the descriptor file and entity images
            file_name: Descriptor file name
            settings: App settings providing defaults and recent projects
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        if directory is None:
            directory = settings.project_directory if settings else DEFAULT_DIRECTORY
        if file_name is None:
            file_name = settings.project_file_name if settings else DEFAULT_FILE_NAME

        self._directory = str(directory)
        self._file_name = file_name
        self._entities: List[EntityType] = []
        self._loaded = False

        self.loader = ObjectTypesFileLoader()
        self.image_loader = EntityImageLoader(
            use_cache=settings.image_cache_enabled if settings else False
        )

    # === CONFIGURATION ===

    @property
    def directory(self) -> str:
        """Folder holding the descriptor file and entity images."""
        return self._directory

    @directory.setter
    def directory(self, value: Union[str, Path]) -> None:
        self._directory = str(value)

    @property
    def file_name(self) -> str:
        """Descriptor file name."""
        return self._file_name

    @file_name.setter
    def file_name(self, value: str) -> None:
        self._file_name = value

    def set_directory(self, path: Union[str, Path]) -> None:
        self.directory = path

    def get_directory(self) -> str:
        return self.directory

    def set_file_name(self, name: str) -> None:
        self.file_name = name

    def get_file_name(self) -> str:
        return self.file_name

    @property
    def file_path(self) -> Path:
        """Full path of the descriptor file."""
        return Path(self._directory) / self._file_name

    @property
    def is_loaded(self) -> bool:
        """True once a load has succeeded."""
        return self._loaded

    def _require_loaded(self, operation: str) -> None:
        if not self._loaded:
            raise RepositoryNotLoadedError(operation)

    # === LOADING AND SAVING ===

    def load(
        self,
        directory: Optional[Union[str, Path]] = None,
        file_name: Optional[str] = None,
    ) -> None:
        """Load entity types from the descriptor file.

        Supplied arguments replace the stored configuration first. The entity
        list is cleared before parsing; on failure the repository is left
        Unloaded and empty.

        Raises:
            ProjectLoadError: File missing, unreadable or malformed
        """
        if directory is not None:
            self.directory = directory
        if file_name is not None:
            self.file_name = file_name

        self._entities.clear()
        self._loaded = False

        path = self.file_path
        self.logger.info(f"Loading entity types from {path}")
        entities = self.loader.read_entity_types(path)

        # Names in the file are not forced unique; lookups return the first
        duplicates = len(entities) - len({entity.name for entity in entities})
        if duplicates:
            self.logger.warning(f"{duplicates} duplicate entity type name(s) in {path}")
        self._entities.extend(entities)

        self._loaded = True
        self.logger.info(f"Loaded {len(self._entities)} entity types")

        if self.settings is not None:
            self.settings.project_directory = self.directory
            self.settings.project_file_name = self.file_name
            self.settings.add_recent_project(path)

    def try_load(
        self,
        directory: Optional[Union[str, Path]] = None,
        file_name: Optional[str] = None,
    ) -> bool:
        """Load without raising; errors are logged.

        Returns:
            True if the project was loaded
        """
        try:
            self.load(directory, file_name)
        except EntityRepositoryError as e:
            self.logger.error(f"Failed to load project! Cause: {e}")
            return False
        return True

    def save(self) -> None:
        """Write the current entity types to the descriptor file.

        Raises:
            RepositoryNotLoadedError: No project loaded
            ProjectSaveError: Serialization or write failure
        """
        self._require_loaded("save")
        path = self.file_path
        self.loader.write_entity_types(path, self._entities)
        self.logger.info(f"Saved {len(self._entities)} entity types to {path}")

    def try_save(self) -> bool:
        """Save without raising; errors are logged.

        Returns:
            True if the project was written
        """
        try:
            self.save()
        except EntityRepositoryError as e:
            self.logger.error(f"Saving project is unsuccessful! Error is: {e}")
            return False
        return True

    def save_as(self, directory: Union[str, Path], file_name: str) -> None:
        """Point the repository at a new location and save there.

        The location only changes once the write succeeds.

        Raises:
            RepositoryNotLoadedError: No project loaded
            ProjectSaveError: Serialization or write failure
        """
        self._require_loaded("save")
        path = Path(directory) / file_name
        self.loader.write_entity_types(path, self._entities)
        self.directory = directory
        self.file_name = file_name
        self.logger.info(f"Saved {len(self._entities)} entity types to {path}")
        if self.settings is not None:
            self.settings.project_directory = self.directory
            self.settings.project_file_name = self.file_name
            self.settings.add_recent_project(self.file_path)

    # === EDITING ===

    def add_entity(self, entity: EntityType) -> None:
        """Append a new entity type.

        Raises:
            RepositoryNotLoadedError: No project loaded
            DuplicateNameError: An entity type with that name exists
        """
        self._require_loaded("add entity")
        if self.has_entity(entity.name):
            raise DuplicateNameError(entity.name)
        self._entities.append(entity)
        self.logger.debug(f"Added entity type '{entity.name}'")

    def remove_entity(self, entity: EntityType) -> EntityType:
        """Remove `entity` itself, or else the first entity type equal to it.

        Other entity types sharing its name are kept.

        Raises:
            RepositoryNotLoadedError: No project loaded
            EntityNotFoundError: No such entity type
        """
        self._require_loaded("remove entity")
        for index, candidate in enumerate(self._entities):
            if candidate is entity:
                break
        else:
            try:
                index = self._entities.index(entity)
            except ValueError:
                raise EntityNotFoundError(entity.name) from None
        removed = self._entities.pop(index)
        self.logger.debug(f"Removed entity type '{removed.name}'")
        return removed

    def remove_entity_by_name(self, name: str) -> EntityType:
        """Remove and return the first entity type with the given name.

        Raises:
            RepositoryNotLoadedError: No project loaded
            EntityNotFoundError: No such entity type
        """
        self._require_loaded("remove entity")
        for index, entity in enumerate(self._entities):
            if entity.name == name:
                del self._entities[index]
                self.logger.debug(f"Removed entity type '{name}'")
                return entity
        raise EntityNotFoundError(name)

    # === LOOKUP ===

    def get_entity(self, index: int) -> EntityType:
        """Return the entity type at a position.

        Raises:
            IndexError: index is negative or past the end
        """
        if index < 0:
            raise IndexError(f"Entity index out of range: {index}")
        return self._entities[index]

    def get_entity_by_name(self, name: str) -> EntityType:
        """Return the first entity type with the given name.

        Raises:
            EntityNotFoundError: No entity type has that name
        """
        entity = self.find_entity(name)
        if entity is None:
            raise EntityNotFoundError(name)
        return entity

    def find_entity(self, name: str) -> Optional[EntityType]:
        """Return the entity type with the given name, or None."""
        for entity in self._entities:
            if entity.name == name:
                return entity
        return None

    def has_entity(self, name: str) -> bool:
        return self.find_entity(name) is not None

    @property
    def entities(self) -> List[EntityType]:
        """Copy of the entity list, in order."""
        return list(self._entities)

    def names(self) -> List[str]:
        return [entity.name for entity in self._entities]

    def log_entities(self) -> None:
        """Log a description of every entity type."""
        for entity in self._entities:
            self.logger.info(entity.describe())

    def __iter__(self) -> Iterator[EntityType]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EntityType):
            return self.has_entity(item.name)
        if isinstance(item, str):
            return self.has_entity(item)
        return False

    # === IMAGES ===

    def load_image_by_name(self, name: str) -> Optional[Image.Image]:
        """Load "<directory>/<name>.png".

        Returns:
            Decoded image, or None when missing or undecodable
        """
        return self.image_loader.load(self.directory, name)

    def load_entity_image(self, entity: EntityType) -> Optional[Image.Image]:
        """Load the image belonging to an entity type."""
        return self.load_image_by_name(entity.name)

    def image_path(self, name: str) -> Path:
        """Path where the image for an entity name is expected."""
        return self.image_loader.image_path(self.directory, name)
