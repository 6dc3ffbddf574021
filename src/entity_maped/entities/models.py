"""
Data models for entity type definitions.

Contains the EntityType dataclass and the XML vocabulary of the
objecttypes descriptor. Models are intentionally lightweight: no
file-system or parsing logic lives here.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TypeAlias

# Default project location
DEFAULT_DIRECTORY = "res/"
DEFAULT_FILE_NAME = "objecttypes.xml"

# Colour attribute written for every objecttype, needed by the Tiled editor
DEFAULT_COLOR = "000000"

IMAGE_EXTENSION = "png"

# XML vocabulary
ROOT_TAG = "objecttypes"
OBJECTTYPE_TAG = "objecttype"
PROPERTY_TAG = "property"

NAME_ATTR = "name"
COLOR_ATTR = "color"
TYPE_ATTR = "type"
DEFAULT_ATTR = "default"

DRAWBOX_PROPERTY = "drawbox"
HITBOX_PROPERTY = "hitbox"
CLASS_PROPERTY = "class"

KNOWN_PROPERTIES = (DRAWBOX_PROPERTY, HITBOX_PROPERTY, CLASS_PROPERTY)

PropertyAttributes: TypeAlias = Dict[str, str]
"""Raw attributes of a single <property> element."""


@dataclass
class EntityType:
    """Template describing a category of placeable object.

    drawbox and hitbox are kept as the string-encoded geometry found in
    the descriptor; `type` maps to the "class" property. Whatever else the
    descriptor holds for the objecttype is carried along so that a
    load/save round trip keeps it:

    - attributes: <objecttype> attributes other than name and color
    - property_attributes: raw attributes of the drawbox/hitbox/class
      properties as read (their "default" is replaced by the field value)
    - extra_properties: properties the editor does not understand
    - unnamed_properties: <property> elements without a name
    """

    name: str
    drawbox: Optional[str] = None
    hitbox: Optional[str] = None
    type: Optional[str] = None
    color: str = DEFAULT_COLOR
    extra_properties: Dict[str, PropertyAttributes] = field(default_factory=dict)
    attributes: Dict[str, str] = field(default_factory=dict)
    property_attributes: Dict[str, PropertyAttributes] = field(default_factory=dict)
    unnamed_properties: List[PropertyAttributes] = field(default_factory=list)

    def known_properties(self) -> Dict[str, Optional[str]]:
        """Return drawbox/hitbox/class values keyed by property name."""
        return {
            DRAWBOX_PROPERTY: self.drawbox,
            HITBOX_PROPERTY: self.hitbox,
            CLASS_PROPERTY: self.type,
        }

    def describe(self) -> str:
        """One-line human readable summary."""
        return (
            f"{self.name}: class={self.type} drawbox={self.drawbox} "
            f"hitbox={self.hitbox} color=#{self.color}"
        )
