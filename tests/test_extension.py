"""Tests for the extension filters."""
from __future__ import annotations

from pathlib import Path

import pytest

from pathfilter.filters.extension import ExtensionFilter, ExtensionsFilter

NO_EXTENSION_PATHS = ["Makefile", "src/LICENSE", ".gitignore", "src/.env", "", ".."]


def test_extension_filter() -> None:
    """Test single extension matching."""
    f = ExtensionFilter(".rs")
    assert f.ignore("src/lib.rs")
    assert f.ignore("src/main.rs")
    assert f.ignore(Path("test.rs"))
    assert not f.ignore("src/lib.txt")
    assert not f.ignore("src/Program.cs")


@pytest.mark.parametrize("ext", ["rs", "txt", "tar.gz", "", ".hidden"])
def test_extension_filter_leading_dot_is_optional(ext: str) -> None:
    """Test that a leading dot never changes the filter."""
    assert ExtensionFilter(ext) == ExtensionFilter("." + ext)


def test_extension_filter_strips_all_leading_dots() -> None:
    """Test that the whole leading run of dots is removed."""
    assert ExtensionFilter("..rs").extension == "rs"
    assert ExtensionFilter("tar.gz").extension == "tar.gz"


def test_extension_filter_is_case_sensitive() -> None:
    """Test that extension comparison keeps case."""
    f = ExtensionFilter("rs")
    assert not f.ignore("src/LIB.RS")
    assert ExtensionFilter("RS").ignore("src/LIB.RS")


def test_extension_filter_only_final_extension() -> None:
    """Test that only the last extension is compared."""
    assert ExtensionFilter("gz").ignore("archive.tar.gz")
    assert not ExtensionFilter("tar").ignore("archive.tar.gz")
    # A multi-dot extension can never equal a single path extension
    assert not ExtensionFilter("tar.gz").ignore("archive.tar.gz")


def test_extension_filter_empty_extension() -> None:
    """Test that an empty extension only matches names ending in a dot."""
    f = ExtensionFilter("")
    assert f.ignore("notes.")
    assert not f.ignore("notes")
    assert not f.ignore("notes.txt")


@pytest.mark.parametrize("path", NO_EXTENSION_PATHS)
def test_no_extension_never_ignored(path: str) -> None:
    """Test paths without an extension against both filters."""
    assert not ExtensionFilter("rs").ignore(path)
    assert not ExtensionFilter("gitignore").ignore(path)
    assert not ExtensionsFilter(["rs", "env", "gitignore", ""]).ignore(path)


def test_extension_filter_is_immutable() -> None:
    """Test that filters cannot be changed after construction."""
    f = ExtensionFilter("rs")
    with pytest.raises(AttributeError):
        f.extension = "txt"  # type: ignore[misc]


def test_extensions_filter() -> None:
    """Test multiple extension matching."""
    f = ExtensionsFilter([".rs", ".txt"])
    assert f.ignore("src/lib.rs")
    assert f.ignore("src/main.rs")
    assert f.ignore("a.txt")
    assert not f.ignore("a.png")
    assert not f.ignore("src/main.png")


def test_extensions_filter_normalizes_and_dedupes() -> None:
    """Test that duplicate extensions collapse after normalization."""
    f = ExtensionsFilter(["rs", ".rs", "..rs", "txt"])
    assert f.extensions == frozenset({"rs", "txt"})


def test_extensions_filter_order_independent() -> None:
    """Test that insertion order does not matter."""
    assert ExtensionsFilter(["rs", "txt", "md"]) == ExtensionsFilter(["md", "rs", "txt"])


def test_extensions_filter_rejects_single_string() -> None:
    """Test that a bare string is not split into characters."""
    with pytest.raises(TypeError):
        ExtensionsFilter("rs")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ExtensionsFilter(b"rs")  # type: ignore[arg-type]


def test_extensions_filter_empty() -> None:
    """Test that an empty set ignores nothing."""
    f = ExtensionsFilter()
    assert not f.ignore("src/lib.rs")
    assert not f.ignore("notes.")


def test_with_extension_builder() -> None:
    """Test that the builder matches the constructor."""
    built = ExtensionsFilter([]).with_extension("rs")
    assert built == ExtensionsFilter(["rs"])
    assert built.ignore("src/lib.rs")
    assert not built.ignore("src/lib.txt")


def test_with_extension_chains_and_copies() -> None:
    """Test that builder calls chain and leave the original untouched."""
    base = ExtensionsFilter(["rs"])
    extended = base.with_extension(".txt").with_extension("md")
    assert extended.extensions == frozenset({"rs", "txt", "md"})
    assert base.extensions == frozenset({"rs"})
    assert not base.ignore("README.md")
    assert extended.ignore("README.md")


def test_extension_filters_to_dict() -> None:
    """Test the dict encoding."""
    assert ExtensionFilter(".rs").to_dict() == {"type": "extension", "extension": "rs"}
    assert ExtensionsFilter(["txt", ".rs"]).to_dict() == {
        "type": "extensions",
        "extensions": ["rs", "txt"],
    }


def test_filter_paths() -> None:
    """Test that filter_paths keeps only paths that are not ignored."""
    f = ExtensionsFilter(["png", "jpg"])
    paths = ["a.py", "logo.png", "b.md", "photo.jpg"]
    assert f.filter_paths(paths) == ["a.py", "b.md"]
