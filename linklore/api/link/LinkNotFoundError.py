"""Unresolved link error."""

from .LinkResolutionError import LinkResolutionError


class LinkNotFoundError(LinkResolutionError):
    """No index entry for the link's base or its extension-stripped form.

    Returned as a diagnostic value rather than raised.
    """

    def __init__(self, base: str, raw: str):
        self.base = base
        self.raw = raw
        super().__init__(f"file not found for link: {raw}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkNotFoundError):
            return NotImplemented
        return (self.base, self.raw) == (other.base, other.raw)

    def __hash__(self) -> int:
        return hash((self.base, self.raw))

    def to_dict(self) -> dict[str, str]:
        return {"base": self.base, "raw": self.raw}
