"""Config Typer app factory."""

from typing import Annotated

import typer

from linklore.api.config.cmd_show import cmd_show
from linklore.cli._build_overrides import _build_overrides
from linklore.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Show the effective configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        input_file: Annotated[str | None, typer.Option("--input", "-i", help="Input file")] = None,
        output_file: Annotated[str | None, typer.Option("--output", "-o", help="Output file")] = None,
        base_dir: Annotated[str | None, typer.Option("--dir", "-d", help="Base directory to index")] = None,
        prefix: Annotated[str | None, typer.Option("--prefix", "-p", help="Prefix for resolved paths")] = None,
        ignore: Annotated[
            str | None, typer.Option("--ignore", "-x", help="Comma separated ignore patterns")
        ] = None,
        force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite the output file")] = False,
    ) -> None:
        """Show the configuration a convert run would use."""
        overrides = _build_overrides(input_file, output_file, base_dir, prefix, ignore, force)
        _handle_stage_result(cmd_show)(overrides)

    return app
