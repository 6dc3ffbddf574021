"""
Command line entry point for entity-maped.
Usage: python -m entity_maped [options] {list,show,add,remove} ...
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .entities import (
    DuplicateNameError,
    EntityNotFoundError,
    EntityRepository,
    EntityRepositoryError,
    EntityType,
)
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_LOOKUP_ERROR = 2


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "entity-maped", description="Inspect and edit objecttypes descriptors"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--settings-file",
        help="INI file to read and store settings in instead of the native store",
    )
    parser.add_argument(
        "-d", "--directory", help="Project directory (defaults to the last project)"
    )
    parser.add_argument(
        "-f", "--file-name", help="Descriptor file name (defaults to the last project)"
    )
    parser.add_argument(
        "-q",
        "--quiet",
        default=False,
        action="store_true",
        help="Disable all printing to stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="Log debug messages to the console",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List entity types")

    show_parser = subparsers.add_parser("show", help="Show one entity type")
    show_parser.add_argument("name")

    add_parser = subparsers.add_parser("add", help="Add an entity type and save")
    add_parser.add_argument("name")
    add_parser.add_argument("--drawbox")
    add_parser.add_argument("--hitbox")
    add_parser.add_argument("--class", dest="entity_class")
    add_parser.add_argument("--color")

    remove_parser = subparsers.add_parser("remove", help="Remove an entity type and save")
    remove_parser.add_argument("name")

    return parser.parse_args(argv)


def _print(args: argparse.Namespace, message: str) -> None:
    if not args.quiet:
        print(message)


def _show_entity(args: argparse.Namespace, repository: EntityRepository) -> int:
    entity = repository.get_entity_by_name(args.name)
    _print(args, entity.describe())
    for prop_name, attributes in entity.extra_properties.items():
        _print(args, f"  {prop_name} = {attributes.get('default', '')}")

    image = repository.load_entity_image(entity)
    if image is None:
        _print(args, f"  image: missing ({repository.image_path(entity.name)})")
    else:
        _print(args, f"  image: {image.width}x{image.height} {image.mode}")
    return EXIT_OK


def _add_entity(args: argparse.Namespace, repository: EntityRepository) -> int:
    entity = EntityType(
        name=args.name,
        drawbox=args.drawbox,
        hitbox=args.hitbox,
        type=args.entity_class,
    )
    if args.color:
        entity.color = args.color
    repository.add_entity(entity)
    repository.save()
    _print(args, f"Added {entity.describe()}")
    return EXIT_OK


def _remove_entity(args: argparse.Namespace, repository: EntityRepository) -> int:
    entity = repository.remove_entity_by_name(args.name)
    repository.save()
    _print(args, f"Removed {entity.name}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface and return an exit code."""
    args = get_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(settings_file=args.settings_file)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    setup_logging(settings, console_level="DEBUG" if args.verbose else None)

    validation = settings.validate()
    for warning in validation.warnings:
        logger.debug(f"Configuration warning: {warning}")

    repository = EntityRepository(
        directory=args.directory, file_name=args.file_name, settings=settings
    )

    try:
        repository.load()

        if args.command == "list":
            for entity in repository:
                _print(args, entity.describe())
            return EXIT_OK
        if args.command == "show":
            return _show_entity(args, repository)
        if args.command == "add":
            return _add_entity(args, repository)
        if args.command == "remove":
            return _remove_entity(args, repository)

    except (EntityNotFoundError, DuplicateNameError) as e:
        logger.error(str(e))
        return EXIT_LOOKUP_ERROR
    except EntityRepositoryError as e:
        logger.error(str(e))
        return EXIT_IO_ERROR

    logger.error(f"Unknown command: {args.command}")
    return EXIT_LOOKUP_ERROR


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
