"""Shared fixtures for entity-maped tests."""

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from entity_maped.settings import AppSettings

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<objecttypes>
 <objecttype name="Wall" color="a0a0a4">
  <property name="drawbox" type="string" default="0,0,32,32"/>
  <property name="hitbox" type="string" default="0,0,32,32"/>
  <property name="class" type="string" default="StaticWall"/>
 </objecttype>
 <objecttype name="Marker" color="000000"/>
 <objecttype name="Player" color="ff0000">
  <property name="class" type="string" default="Hero"/>
  <property name="drawbox" type="string" default="0,0,16,24"/>
  <property name="speed" type="float" default="1.5"/>
 </objecttype>
 <objecttype name="Door" color="000000">
  <property name="hitbox" type="string" default="0,0,8,32"/>
 </objecttype>
</objecttypes>
"""

WALL_ONLY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<objecttypes>
 <objecttype name="Wall">
  <property name="drawbox" default="0,0,32,32"/>
  <property name="hitbox" default="0,0,32,32"/>
  <property name="class" default="StaticWall"/>
 </objecttype>
</objecttypes>
"""


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an XML descriptor into tmp_path and return its path."""

    def _write(content: str, file_name: str = "objecttypes.xml") -> Path:
        path = tmp_path / file_name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path, write_xml: Callable[[str, str], Path]) -> Path:
    """Project directory holding SAMPLE_XML as objecttypes.xml."""
    write_xml(SAMPLE_XML, "objecttypes.xml")
    return tmp_path


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[..., Path]:
    """Write a small RGBA PNG named after an entity."""

    def _write(name: str, size: tuple[int, int] = (16, 8), directory: Path = tmp_path) -> Path:
        path = directory / f"{name}.png"
        Image.new("RGBA", size, (255, 0, 0, 255)).save(path, format="PNG")
        return path

    return _write


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """AppSettings stored in an INI file inside tmp_path."""
    return AppSettings(settings_file=tmp_path / "settings.ini")


@pytest.fixture
def wall_only_xml() -> str:
    return WALL_ONLY_XML
