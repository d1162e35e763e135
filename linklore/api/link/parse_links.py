"""Wikilink parser (UNO: single function)."""

from collections.abc import Iterator

from .LINK_PATTERN import LINK_PATTERN
from .LinkToken import LinkToken


def parse_links(text: str) -> Iterator[LinkToken]:
    """Extract all wikilinks from text.

    Scanning is leftmost-first and non-overlapping. Candidates with extra or
    out-of-order components, or without a closing ``]]``, are not links.

    Args:
        text: Document content to scan

    Yields:
        LinkToken objects in document order
    """
    for match in LINK_PATTERN.finditer(text):
        yield LinkToken.from_match(match)
