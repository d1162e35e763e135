"""In-memory document rewrite (UNO: single function)."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ..index.FileRecord import FileRecord
from ..link.LINK_PATTERN import LINK_PATTERN
from ..link.LinkToken import LinkToken
from ..link.resolve_link import resolve_link
from .RewriteResult import RewriteResult

logger = logging.getLogger(__name__)


def rewrite_text(text: str, index: Mapping[str, FileRecord], prefix: str) -> RewriteResult:
    """Replace every wikilink in ``text`` with its markdown link.

    Text outside links is preserved exactly. Unresolved links stay as written
    and are collected in ``diagnostics`` in document order.
    """
    result = RewriteResult(content=text)

    def replacer(match: re.Match[str]) -> str:
        token = LinkToken.from_match(match)
        rendered, error = resolve_link(token, index, prefix)
        if error is not None:
            logger.warning(str(error))
            result.diagnostics.append(error)
        else:
            result.replaced += 1
        return rendered

    result.content = LINK_PATTERN.sub(replacer, text)
    return result
