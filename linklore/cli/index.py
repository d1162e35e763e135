"""Index Typer app factory."""

from typing import Annotated

import typer

from linklore.api.index.cmd_show import cmd_show
from linklore.cli._handle_stage_result import _handle_stage_result


def index() -> typer.Typer:
    """Create and configure the index Typer app."""
    app = typer.Typer(
        name="index",
        help="Build and show the basename index of a directory",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        base_dir: Annotated[str, typer.Option("--dir", "-d", help="Base directory to index")] = ".",
        ignore: Annotated[
            str | None, typer.Option("--ignore", "-x", help="Comma separated ignore patterns")
        ] = None,
    ) -> None:
        """List every indexed file keyed by basename."""
        patterns = ignore.split(",") if ignore else None
        _handle_stage_result(cmd_show)(base_dir, patterns)

    return app
