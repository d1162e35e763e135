"""Rewrite result model."""

from dataclasses import dataclass, field

from ..link.LinkNotFoundError import LinkNotFoundError


@dataclass
class RewriteResult:
    content: str
    replaced: int = 0
    diagnostics: list[LinkNotFoundError] = field(default_factory=list)
