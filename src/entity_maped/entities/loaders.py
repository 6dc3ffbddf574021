"""
File loader for the objecttypes XML descriptor.

Reads <objecttype> elements into EntityType records and serializes a
list of records back into a fresh document tree.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ProjectLoadError, ProjectSaveError
from .models import (
    CLASS_PROPERTY,
    COLOR_ATTR,
    DEFAULT_ATTR,
    DEFAULT_COLOR,
    DRAWBOX_PROPERTY,
    HITBOX_PROPERTY,
    KNOWN_PROPERTIES,
    NAME_ATTR,
    OBJECTTYPE_TAG,
    PROPERTY_TAG,
    ROOT_TAG,
    TYPE_ATTR,
    EntityType,
)


class ObjectTypesFileLoader:
    """Reads and writes objecttypes descriptor files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read_entity_types(self, xml_file: Path) -> List[EntityType]:
        """Parse a descriptor file into entity types, in document order.

        Objecttype elements without any <property> child produce no record.

        Args:
            xml_file: Path to the objecttypes XML file

        Returns:
            List of parsed entity types

        Raises:
            ProjectLoadError: File missing, unreadable or malformed
        """
        try:
            tree = ET.parse(xml_file)
        except ET.ParseError as e:
            raise ProjectLoadError(f"Malformed XML in {xml_file}: {e}", xml_file) from e
        except OSError as e:
            raise ProjectLoadError(f"Cannot read {xml_file}: {e}", xml_file) from e

        root = tree.getroot()
        if root.tag != ROOT_TAG:
            raise ProjectLoadError(
                f"Unexpected root element <{root.tag}> in {xml_file}, expected <{ROOT_TAG}>",
                xml_file,
            )

        entities: List[EntityType] = []
        for element in root.iter(OBJECTTYPE_TAG):
            name = element.get(NAME_ATTR)
            if name is None:
                raise ProjectLoadError(
                    f"<{OBJECTTYPE_TAG}> without '{NAME_ATTR}' attribute in {xml_file}",
                    xml_file,
                )

            entity = self.parse_objecttype(name, element)
            if entity is None:
                self.logger.debug(f"Skipping '{name}': no properties")
                continue
            entities.append(entity)

        self.logger.debug(f"Read {len(entities)} entity types from {xml_file}")
        return entities

    @staticmethod
    def parse_objecttype(name: str, element: ET.Element) -> Optional[EntityType]:
        """Build an EntityType from one <objecttype> element.

        Returns None when the element has no <property> children. When a
        property name repeats, the later one wins.
        """
        properties = list(element.iter(PROPERTY_TAG))
        if not properties:
            return None

        entity = EntityType(
            name=name,
            color=element.get(COLOR_ATTR, DEFAULT_COLOR),
            attributes={
                key: value
                for key, value in element.attrib.items()
                if key not in (NAME_ATTR, COLOR_ATTR)
            },
        )
        for prop in properties:
            prop_name = prop.get(NAME_ATTR)
            value = prop.get(DEFAULT_ATTR, "")
            if prop_name == DRAWBOX_PROPERTY:
                entity.drawbox = value
            elif prop_name == HITBOX_PROPERTY:
                entity.hitbox = value
            elif prop_name == CLASS_PROPERTY:
                entity.type = value
            elif prop_name:
                entity.extra_properties[prop_name] = dict(prop.attrib)
                continue
            else:
                entity.unnamed_properties.append(dict(prop.attrib))
                continue
            entity.property_attributes[prop_name] = dict(prop.attrib)
        return entity

    @staticmethod
    def build_tree(entities: Iterable[EntityType]) -> ET.ElementTree:
        """Build a fresh objecttypes document from entity types."""
        root = ET.Element(ROOT_TAG)
        for entity in entities:
            attributes = {NAME_ATTR: entity.name, COLOR_ATTR: entity.color}
            attributes.update(
                (key, value)
                for key, value in entity.attributes.items()
                if key not in (NAME_ATTR, COLOR_ATTR)
            )
            objecttype = ET.SubElement(root, OBJECTTYPE_TAG, attributes)

            for prop_name, value in entity.known_properties().items():
                if value is None:
                    continue
                prop_attributes = dict(
                    entity.property_attributes.get(prop_name)
                    or {NAME_ATTR: prop_name, TYPE_ATTR: "string"}
                )
                prop_attributes[NAME_ATTR] = prop_name
                prop_attributes[DEFAULT_ATTR] = value
                ET.SubElement(objecttype, PROPERTY_TAG, prop_attributes)

            for prop_name, prop_attributes in entity.extra_properties.items():
                if prop_name in KNOWN_PROPERTIES:
                    continue
                prop_attributes = dict(prop_attributes)
                prop_attributes[NAME_ATTR] = prop_name
                ET.SubElement(objecttype, PROPERTY_TAG, prop_attributes)

            for prop_attributes in entity.unnamed_properties:
                ET.SubElement(objecttype, PROPERTY_TAG, dict(prop_attributes))

            # Objecttypes without properties are skipped on load
            if len(objecttype) == 0:
                ET.SubElement(
                    objecttype,
                    PROPERTY_TAG,
                    {NAME_ATTR: CLASS_PROPERTY, TYPE_ATTR: "string", DEFAULT_ATTR: ""},
                )

        tree = ET.ElementTree(root)
        ET.indent(tree, space=" ")
        return tree

    def write_entity_types(self, xml_file: Path, entities: Iterable[EntityType]) -> None:
        """Serialize entity types to a descriptor file.

        The document is rendered in memory first so a serialization
        failure never truncates the existing file.

        Raises:
            ProjectSaveError: Serialization or write failure
        """
        tree = self.build_tree(entities)
        try:
            data = ET.tostring(tree.getroot(), encoding="UTF-8", xml_declaration=True)
        except (TypeError, ValueError) as e:
            raise ProjectSaveError(f"Cannot serialize entity types: {e}", xml_file) from e

        try:
            xml_file.parent.mkdir(parents=True, exist_ok=True)
            with xml_file.open("wb") as f:
                f.write(data)
        except OSError as e:
            raise ProjectSaveError(f"Cannot write {xml_file}: {e}", xml_file) from e

        self.logger.debug(f"Wrote {xml_file} ({len(data)} bytes)")
