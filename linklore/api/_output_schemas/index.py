"""Output schemas for index commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class IndexShowOutput(BaseOutputSchema):
    """Output schema for index show command.

    Output structure:
    - base_dir: str - directory that was indexed
    - count: int - number of indexed files, 0 if the build failed
    - entries: list[dict] - one dict per FileRecord, sorted by basename
    """
    base_dir: str = Field(..., description="Indexed root directory")
    count: int = Field(..., description="Number of indexed files")
    entries: list[dict[str, str]] = Field(..., description="Indexed files sorted by basename")


register_output_schema("index", "show", IndexShowOutput)
