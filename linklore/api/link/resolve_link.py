"""Link resolver (UNO: single function)."""

from __future__ import annotations

import os
from collections.abc import Mapping

from ..index.FileRecord import FileRecord
from .LinkNotFoundError import LinkNotFoundError
from .LinkToken import LinkToken


def resolve_link(
    token: LinkToken,
    index: Mapping[str, FileRecord],
    prefix: str,
) -> tuple[str, LinkNotFoundError | None]:
    """Render a token as a markdown link.

    The base is looked up as-is first, then with its trailing extension
    stripped so that ``image.png`` finds the entry keyed ``image``.

    Args:
        token: Parsed wikilink
        index: Basename index
        prefix: Prepended to the record's relative path

    Returns:
        ``("[display](target)", None)`` when found, otherwise the token's
        original text and a LinkNotFoundError describing it
    """
    record = index.get(token.base)
    if record is None:
        stem, _ = os.path.splitext(token.base)
        record = index.get(stem)
    if record is None:
        return token.raw, LinkNotFoundError(token.base, token.raw)

    target = prefix + record.relative_path
    if token.anchor:
        target += "#" + token.anchor

    display = token.alias if token.alias is not None else token.base
    return f"[{display}]({target})", None
