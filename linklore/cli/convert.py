"""Convert Typer app factory - rewrite wikilinks in one document."""

from typing import Annotated

import typer

from linklore.api.rewrite.cmd_convert import cmd_convert
from linklore.cli._build_overrides import _build_overrides
from linklore.cli._handle_stage_result import _handle_stage_result


def convert() -> typer.Typer:
    """Create and configure the convert Typer app."""
    app = typer.Typer(
        name="convert",
        help="Rewrite wikilinks in a document as markdown links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        input_file: Annotated[str | None, typer.Option("--input", "-i", help="Input file")] = None,
        output_file: Annotated[
            str | None, typer.Option("--output", "-o", help="Output file (default: <input>.out.md)")
        ] = None,
        base_dir: Annotated[str | None, typer.Option("--dir", "-d", help="Base directory to index")] = None,
        prefix: Annotated[str | None, typer.Option("--prefix", "-p", help="Prefix for resolved paths")] = None,
        ignore: Annotated[
            str | None, typer.Option("--ignore", "-x", help="Comma separated ignore patterns")
        ] = None,
        force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite the output file")] = False,
    ) -> None:
        """Rewrite [[wikilinks]] in INPUT as markdown links.

        Unset options fall back to LINKLORE_* environment variables and the
        .env file in the working directory.
        """
        overrides = _build_overrides(input_file, output_file, base_dir, prefix, ignore, force)
        _handle_stage_result(cmd_convert)(overrides)

    return app
