"""Output schemas for API commands.

Importing this package registers every schema.
"""

from . import config, index, rewrite  # noqa: F401
