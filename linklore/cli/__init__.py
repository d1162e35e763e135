"""CLI - main entry point."""

import os
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from linklore.cli._create_app import _create_app
    from linklore.logging_config import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    setup_logging(os.environ.get("LINKLORE_LOG_LEVEL", "WARNING"))

    if "--version" in argv or "-v" in argv:
        from linklore.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"linklore {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    # Standalone mode: typer reports usage errors itself and exits with 2
    try:
        app(argv, prog_name="linklore")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
