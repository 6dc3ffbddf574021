"""Unit tests for EntityImageLoader."""

from pathlib import Path
from typing import Callable

from entity_maped.entities import EntityImageLoader


class TestEntityImageLoader:
    """Test PNG loading with and without the cache."""

    def test_image_path(self, tmp_path: Path) -> None:
        assert EntityImageLoader.image_path(tmp_path, "Wall") == tmp_path / "Wall.png"

    def test_only_png_extension_is_used(
        self, tmp_path: Path
    ) -> None:
        """Test an image stored under another extension is not picked up."""
        (tmp_path / "Wall.jpg").write_bytes(b"")
        assert EntityImageLoader().load(tmp_path, "Wall") is None

    def test_no_cache_rereads_file(
        self, tmp_path: Path, write_png: Callable[..., Path]
    ) -> None:
        """Test every call decodes the current file from disk."""
        loader = EntityImageLoader()
        write_png("Wall", (8, 8))
        first = loader.load(tmp_path, "Wall")
        write_png("Wall", (4, 4))
        second = loader.load(tmp_path, "Wall")
        assert first is not None and second is not None
        assert first.size == (8, 8)
        assert second.size == (4, 4)
        assert loader.cached_count == 0

    def test_cache_returns_copies(
        self, tmp_path: Path, write_png: Callable[..., Path]
    ) -> None:
        """Test cached images are served as independent copies."""
        loader = EntityImageLoader(use_cache=True)
        write_png("Wall", (8, 8))
        first = loader.load(tmp_path, "Wall")
        write_png("Wall", (4, 4))
        second = loader.load(tmp_path, "Wall")
        assert first is not None and second is not None
        assert second.size == (8, 8)
        assert first is not second
        assert loader.cached_count == 1

        loader.clear_cache()
        third = loader.load(tmp_path, "Wall")
        assert third is not None
        assert third.size == (4, 4)

    def test_missing_image_not_cached(self, tmp_path: Path) -> None:
        loader = EntityImageLoader(use_cache=True)
        assert loader.load(tmp_path, "Ghost") is None
        assert loader.cached_count == 0
