"""Directory traversal error."""

from .IndexBuildError import IndexBuildError


class WalkError(IndexBuildError):
    """Underlying traversal failure (missing root, permissions, I/O)."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot walk {path}: {reason}")
