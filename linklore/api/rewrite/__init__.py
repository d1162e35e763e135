"""Rewrite API module."""

from .._output_schemas.rewrite import RewriteConvertOutput

__all__ = ["RewriteConvertOutput"]
