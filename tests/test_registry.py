# topmark:header:start
#
#   project      : DailyTip
#   file         : test_registry.py
#   file_relpath : tests/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the collection registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dailytip.errors import LoadError, UnknownCollectionError
from dailytip.loaders.composite import CompositeTipLoader
from dailytip.loaders.json_loader import JsonTipLoader
from dailytip.registry import (
    available_collections,
    build_loader,
    bundled_collections_dir,
    resolve_collections,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_bundled_collections_are_available() -> None:
    """The package should ship the two reference collections."""
    names = available_collections(bundled_collections_dir())

    assert names == ["leadership-tone", "productivity-hacks"]


def test_bundled_collections_load() -> None:
    """Every bundled collection should be valid and non-empty."""
    directory = bundled_collections_dir()
    for name in available_collections(directory):
        loader = JsonTipLoader(directory / f"{name}.json")
        assert loader.get_collection_title()
        assert loader.get_tips()


def test_available_collections_lists_json_stems_sorted(collections_dir: Path) -> None:
    """Only ``*.json`` files should be listed, by stem, sorted."""
    (collections_dir / "notes.txt").write_text("ignored", encoding="utf-8")
    (collections_dir / "nested.json").mkdir()

    assert available_collections(collections_dir) == ["alpha", "beta-gamma"]


def test_available_collections_missing_dir_is_empty(tmp_path: Path) -> None:
    """A missing directory should list no collections."""
    assert available_collections(tmp_path / "nope") == []


def test_resolve_collections_keeps_order(collections_dir: Path) -> None:
    """Paths should follow the requested order."""
    paths = resolve_collections(["beta-gamma", "alpha"], collections_dir)

    assert paths == [collections_dir / "beta-gamma.json", collections_dir / "alpha.json"]


def test_resolve_collections_reports_every_unknown_name(collections_dir: Path) -> None:
    """All unknown names should be reported at once."""
    with pytest.raises(UnknownCollectionError) as excinfo:
        resolve_collections(["alpha", "nope", "missing"], collections_dir)

    assert excinfo.value.names == ("nope", "missing")
    assert str(excinfo.value) == "Collections 'nope', 'missing' not found."
    assert isinstance(excinfo.value, LoadError)


def test_single_unknown_name_message(collections_dir: Path) -> None:
    """A single unknown name uses the singular message."""
    with pytest.raises(UnknownCollectionError, match=r"^Collection 'nope' not found\.$"):
        resolve_collections(["nope"], collections_dir)


def test_build_loader_single_path_is_plain(collections_dir: Path) -> None:
    """One path should give a plain JSON loader with untagged titles."""
    loader = build_loader([collections_dir / "alpha.json"])

    assert isinstance(loader, JsonTipLoader)
    assert [t.title for t in loader.get_tips()] == ["First", "Second"]


def test_build_loader_several_paths_is_composite(collections_dir: Path) -> None:
    """Several paths should be merged into a composite loader."""
    loader = build_loader(
        [collections_dir / "alpha.json", collections_dir / "beta-gamma.json"]
    )

    assert isinstance(loader, CompositeTipLoader)
    assert loader.get_collection_title() == "Alpha, Beta Gamma"


def test_build_loader_requires_paths() -> None:
    """An empty path list is a programming error."""
    with pytest.raises(ValueError):
        build_loader([])
