"""Base error for index construction."""


class IndexBuildError(Exception):
    """Raised when the index cannot be built. No partial index is exposed."""
