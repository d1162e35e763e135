"""Duplicate basename error."""

from .IndexBuildError import IndexBuildError


class DuplicateKeyError(IndexBuildError):
    """Two files share a basename."""

    def __init__(self, key: str, existing_path: str, new_path: str):
        self.key = key
        self.existing_path = existing_path
        self.new_path = new_path
        super().__init__(f"duplicate key: {key} (existing: {existing_path}, conflicting: {new_path})")
