"""File count ceiling error."""

from .IndexBuildError import IndexBuildError


class TooManyFilesError(IndexBuildError):
    """More indexable files than the index allows."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"too many files, limit is {limit}")
