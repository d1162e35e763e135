"""Output schemas for rewrite commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RewriteConvertOutput(BaseOutputSchema):
    """Output schema for the convert command.

    Unresolved links are reported in ``unresolved`` and as warnings; they do
    not fail the command.
    """
    input_file: str = Field(..., description="Document that was read")
    output_file: str = Field(..., description="File that was written, or would have been")
    indexed_files: int = Field(..., description="Number of files in the index")
    replaced: int = Field(..., description="Number of links rendered")
    unresolved: list[dict[str, str]] = Field(..., description="Links left as written (base and raw text)")
    written: bool = Field(..., description="Whether the output file was written")


register_output_schema("rewrite", "convert", RewriteConvertOutput)
