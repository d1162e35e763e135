"""Immutable basename index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from .FileRecord import FileRecord


class Index(Mapping[str, FileRecord]):
    """Read-only mapping from basename to FileRecord.

    Built once by ``build_index`` and never mutated afterwards. The records
    passed in are copied, so later changes to the source dict are not seen.
    """

    def __init__(self, root: Path, records: Mapping[str, FileRecord]):
        self._root = root
        self._records = MappingProxyType(dict(records))

    @property
    def root(self) -> Path:
        return self._root

    def __getitem__(self, key: str) -> FileRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Index(root={str(self._root)!r}, entries={len(self._records)})"

    def to_list(self) -> list[dict[str, str]]:
        """Entries sorted by basename, as plain dicts."""
        return [self._records[key].to_dict() for key in sorted(self._records)]
