"""Tests for the command line interface."""

import logging
from pathlib import Path
from typing import Callable, List
import xml.etree.ElementTree as ET

import pytest

from entity_maped.__main__ import EXIT_IO_ERROR, EXIT_LOOKUP_ERROR, EXIT_OK, main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def run_cli(project_dir: Path) -> Callable[..., int]:
    """Run the CLI against the sample project with isolated settings."""

    def _run(*args: str) -> int:
        argv: List[str] = [
            "--settings-file",
            str(project_dir / "cli_settings.ini"),
            "-d",
            str(project_dir),
            "-f",
            "objecttypes.xml",
            *args,
        ]
        return main(argv)

    return _run


class TestCommands:
    """Test each subcommand."""

    def test_list(self, run_cli: Callable[..., int], capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("list") == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert [line.split(":")[0] for line in lines] == ["Wall", "Player", "Door"]

    def test_quiet_list(self, run_cli: Callable[..., int], capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("-q", "list") == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_show(
        self,
        run_cli: Callable[..., int],
        write_png: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_png("Player", (16, 24))
        assert run_cli("show", "Player") == EXIT_OK
        out = capsys.readouterr().out
        assert "Player: class=Hero" in out
        assert "speed = 1.5" in out
        assert "image: 16x24 RGBA" in out

    def test_show_without_image(
        self, run_cli: Callable[..., int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_cli("show", "Door") == EXIT_OK
        assert "image: missing" in capsys.readouterr().out

    def test_show_unknown(self, run_cli: Callable[..., int]) -> None:
        assert run_cli("show", "Ghost") == EXIT_LOOKUP_ERROR

    def test_add_saves_file(self, run_cli: Callable[..., int], project_dir: Path) -> None:
        code = run_cli("add", "Crate", "--class", "Prop", "--hitbox", "0,0,16,16", "--color", "884400")
        assert code == EXIT_OK

        root = ET.parse(project_dir / "objecttypes.xml").getroot()
        crate = root.find("objecttype[@name='Crate']")
        assert crate is not None
        assert crate.get("color") == "884400"

    def test_add_duplicate(self, run_cli: Callable[..., int]) -> None:
        assert run_cli("add", "Wall") == EXIT_LOOKUP_ERROR

    def test_remove_saves_file(self, run_cli: Callable[..., int], project_dir: Path) -> None:
        assert run_cli("remove", "Wall") == EXIT_OK
        root = ET.parse(project_dir / "objecttypes.xml").getroot()
        assert root.find("objecttype[@name='Wall']") is None

    def test_missing_descriptor(self, project_dir: Path) -> None:
        argv = [
            "--settings-file",
            str(project_dir / "cli_settings.ini"),
            "-d",
            str(project_dir),
            "-f",
            "missing.xml",
            "list",
        ]
        assert main(argv) == EXIT_IO_ERROR

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "entity-maped" in capsys.readouterr().out
