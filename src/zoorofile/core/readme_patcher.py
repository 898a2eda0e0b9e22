"""Marker-delimited in-place README patching."""

from pathlib import Path

START_MARKER = "<!-- ZOOROFILE_START -->"
END_MARKER = "<!-- ZOOROFILE_END -->"


def patch(
    existing: str,
    block: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> str:
    """
    Replace the managed region of ``existing`` with ``block``.
    
    The managed region runs from the first start marker through the first
    end marker after it, markers included. ``block`` is expected to carry
    both markers itself. If either marker is missing, ``block`` is appended,
    separated from non-empty content by a blank line.
    """
    start_idx = existing.find(start_marker)
    end_idx = -1
    if start_idx != -1:
        end_idx = existing.find(end_marker, start_idx + len(start_marker))
    
    if start_idx == -1 or end_idx == -1:
        separator = "\n\n" if existing else ""
        return existing + separator + block
    
    before = existing[:start_idx]
    after = existing[end_idx + len(end_marker):]
    return before + block + after


def read_document(path: Path) -> str:
    """Read the README, treating a missing file as empty."""
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def write_document(path: Path, text: str) -> None:
    """Write the README in a single call."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
