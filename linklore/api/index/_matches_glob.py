"""Glob pattern matching helper."""

import fnmatch


def _matches_glob(patterns: list[str], name: str) -> bool:
    """Check if an entry's base name matches any of the glob patterns."""
    if not patterns:
        return False
    for pattern in patterns:
        if not pattern:
            continue
        if fnmatch.fnmatchcase(name, pattern):
            return True
    return False
