"""Document rewriter (UNO: single function)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ..index.FileRecord import FileRecord
from ._write_atomic import _write_atomic
from .OutputExistsError import OutputExistsError
from .rewrite_text import rewrite_text
from .RewriteResult import RewriteResult

logger = logging.getLogger(__name__)


def rewrite_document(
    text: str,
    index: Mapping[str, FileRecord],
    prefix: str,
    force: bool,
    output_path: str | Path,
) -> RewriteResult:
    """Rewrite ``text`` and write the result to ``output_path`` in one write.

    Args:
        text: Document content
        index: Basename index
        prefix: Prepended to every resolved relative path
        force: Overwrite ``output_path`` if it exists
        output_path: Destination file

    Returns:
        RewriteResult with the written content and per-link diagnostics

    Raises:
        OutputExistsError: ``output_path`` exists and ``force`` is false
        OSError: The output could not be written
    """
    output = Path(output_path)
    if not force and output.exists():
        raise OutputExistsError(output)

    result = rewrite_text(text, index, prefix)
    _write_atomic(output, result.content)
    logger.info(f"Wrote {output} ({result.replaced} links, {len(result.diagnostics)} unresolved)")
    return result
