"""LinkToken model (UNO: single model)."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class LinkToken:
    """A parsed wikilink.

    ``embed`` and ``block`` are recorded but do not change how the token is
    rendered.
    """

    embed: bool
    base: str
    alias: str | None
    anchor: str | None
    block: str | None
    raw: str

    @staticmethod
    def from_match(match: re.Match[str]) -> LinkToken:
        """Build a token from a LINK_PATTERN match."""
        return LinkToken(
            embed=match.group(1) is not None,
            base=match.group(2),
            alias=match.group(3),
            anchor=match.group(4),
            block=match.group(5),
            raw=match.group(0),
        )
