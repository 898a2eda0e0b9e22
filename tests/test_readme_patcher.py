"""Tests for marker-delimited README patching."""

from pathlib import Path

from zoorofile.core.readme_patcher import (
    END_MARKER,
    START_MARKER,
    patch,
    read_document,
    write_document,
)


def _block(content: str) -> str:
    return f"{START_MARKER}\n{content}\n{END_MARKER}"


def test_patch_replaces_managed_region() -> None:
    """Test only the region between markers is replaced."""
    existing = f"# Hello\n\n{_block('old pet')}\n\n## Footer\n"
    
    result = patch(existing, _block("new pet"))
    
    assert result == f"# Hello\n\n{_block('new pet')}\n\n## Footer\n"


def test_patch_appends_when_markers_absent() -> None:
    existing = "# My profile\n"
    block = _block("pet")
    
    assert patch(existing, block) == existing + "\n\n" + block


def test_patch_empty_document() -> None:
    block = _block("pet")
    assert patch("", block) == block


def test_patch_appends_when_end_marker_missing() -> None:
    existing = f"# Title\n{START_MARKER}\nbroken"
    block = _block("pet")
    
    assert patch(existing, block) == existing + "\n\n" + block


def test_patch_ignores_end_marker_before_start() -> None:
    """Test an end marker preceding the start marker is not used."""
    existing = f"{END_MARKER}\nintro\n{_block('old')}\ntail"
    
    result = patch(existing, _block("new"))
    
    assert result == f"{END_MARKER}\nintro\n{_block('new')}\ntail"


def test_patch_round_trip() -> None:
    """Test patching twice keeps prefix/suffix and ends with the second block."""
    prefix = "# About me\n\n"
    suffix = "\n\n## Contact\n"
    text = prefix + _block("placeholder") + suffix
    
    once = patch(text, _block("A"))
    twice = patch(once, _block("B"))
    
    assert twice == prefix + _block("B") + suffix


def test_patch_is_idempotent() -> None:
    text = "intro"
    block = _block("same")
    
    once = patch(text, block)
    assert patch(once, block) == once


def test_read_missing_document(tmp_path: Path) -> None:
    assert read_document(tmp_path / "README.md") == ""


def test_write_and_read_document(tmp_path: Path) -> None:
    path = tmp_path / "profile" / "README.md"
    
    write_document(path, "🐾 hello")
    
    assert read_document(path) == "🐾 hello"
