"""Base error for link resolution."""


class LinkResolutionError(Exception):
    """A wikilink could not be turned into a markdown link."""
