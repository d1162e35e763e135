"""Config show API command.

CLI: linklore config [-i INPUT] [-o OUTPUT] [-d DIR] [-p PREFIX] [-x PATTERNS] [-f]
"""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from . import ConfigShowOutput


def cmd_show(overrides: dict[str, Any] | None = None) -> StageResult:
    """Show the effective configuration after env, .env and flag merging."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .LinkloreConfig import LinkloreConfig

        yield (0.5, "Loading configuration...")
        try:
            config = LinkloreConfig.load(overrides)
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load config: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = "Configuration loaded"
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
