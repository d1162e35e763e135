"""Index show API command.

CLI: linklore index [--dir DIR] [--ignore PATTERNS]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import IndexShowOutput


def cmd_show(base_dir: str = ".", ignore: list[str] | None = None) -> StageResult:
    """Build the index for a directory and list its entries.

    Args:
        base_dir: Directory to index
        ignore: Ignore patterns; the default set is used when None
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config._constants import DEFAULT_IGNORE_PATTERNS
        from .build_index import build_index
        from .IndexBuildError import IndexBuildError

        patterns = list(DEFAULT_IGNORE_PATTERNS) if ignore is None else ignore

        yield (0.2, "Walking directory tree...")
        try:
            index = build_index(base_dir, patterns)
        except IndexBuildError as e:
            result_obj.output = IndexShowOutput(
                errors=[str(e)],
                warnings=[],
                base_dir=base_dir,
                count=0,
                entries=[],
            ).model_dump(mode="python")
            result_obj.result = f"Index build failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = IndexShowOutput(
            errors=[],
            warnings=[],
            base_dir=base_dir,
            count=len(index),
            entries=index.to_list(),
        ).model_dump(mode="python")
        result_obj.result = f"Indexed {len(index)} files under {base_dir}"
        result_obj.success = True

    return StageResult(
        announce=f"Indexing {base_dir}...",
        progress_callback=do_work,
    )
