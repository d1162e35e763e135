"""Atomic whole-file write (private)."""

from contextlib import suppress
from pathlib import Path


def _write_atomic(path: Path, content: str) -> None:
    """Write content to a temp sibling, then rename it over ``path``."""
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        with temp_path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(content)
        temp_path.replace(path)
    except OSError:
        with suppress(OSError):
            temp_path.unlink()
        raise
