"""Index API module."""

from .._output_schemas.index import IndexShowOutput

__all__ = ["IndexShowOutput"]
