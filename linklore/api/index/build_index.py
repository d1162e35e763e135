"""Directory indexer (UNO: single function)."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from ._constants import MAX_INDEX_FILES
from ._matches_glob import _matches_glob
from .DuplicateKeyError import DuplicateKeyError
from .FileRecord import FileRecord
from .Index import Index
from .TooManyFilesError import TooManyFilesError
from .WalkError import WalkError

logger = logging.getLogger(__name__)


def build_index(root_dir: str | Path, ignore_patterns: list[str] | None = None) -> Index:
    """Walk ``root_dir`` and map every file's basename to its FileRecord.

    Args:
        root_dir: Directory to index
        ignore_patterns: Glob patterns tested against each entry's base name.
            A matching directory is pruned with its whole subtree, a matching
            file is skipped.

    Returns:
        The completed Index

    Raises:
        DuplicateKeyError: Two files share a basename
        TooManyFilesError: More than MAX_INDEX_FILES files were accepted
        WalkError: The directory tree could not be traversed
    """
    root = Path(root_dir)
    patterns = list(ignore_patterns or [])
    records: dict[str, FileRecord] = {}

    def _add(path: Path, filename: str) -> None:
        # ".gitignore" keys as ".gitignore": a leading dot is not an extension
        basename, ext = os.path.splitext(filename)
        relative_path = PurePath(os.path.relpath(path, root)).as_posix()

        existing = records.get(basename)
        if existing is not None:
            raise DuplicateKeyError(basename, existing.relative_path, relative_path)

        records[basename] = FileRecord(
            name=filename,
            basename=basename,
            ext=ext,
            relative_path=relative_path,
        )
        if len(records) > MAX_INDEX_FILES:
            raise TooManyFilesError(MAX_INDEX_FILES)

    def _walk(directory: Path) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise WalkError(str(e.filename or directory), e.strerror or str(e)) from e

        # Entries are visited in name order; a directory is descended when reached
        for entry in entries:
            path = directory / entry.name
            if _matches_glob(patterns, entry.name):
                logger.debug(f"Ignoring {path}")
                continue
            try:
                # Symlinks are not followed; index them like any other entry
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise WalkError(str(path), e.strerror or str(e)) from e
            if is_dir:
                _walk(path)
            else:
                _add(path, entry.name)

    _walk(root)
    logger.info(f"Indexed {len(records)} files under {root}")
    return Index(root, records)
