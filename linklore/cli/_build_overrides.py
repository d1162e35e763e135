"""Translate CLI flags into config overrides."""

from typing import Any


def _build_overrides(
    input_file: str | None,
    output_file: str | None,
    base_dir: str | None,
    prefix: str | None,
    ignore: str | None,
    force: bool,
) -> dict[str, Any]:
    """Build the overrides dict for LinkloreConfig.load from flag values."""
    return {
        "input_file": input_file,
        "output_file": output_file,
        "base_dir": base_dir,
        "prefix": prefix,
        "ignore_patterns": ignore.split(",") if ignore else None,
        "force": force,
    }
