"""Read the input document (private)."""

from pathlib import Path


def _read_document(path: Path) -> str:
    """Read a document so that writing it back reproduces the same bytes.

    Undecodable bytes survive as surrogate escapes and line endings are left
    untranslated.
    """
    with path.open(encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()
