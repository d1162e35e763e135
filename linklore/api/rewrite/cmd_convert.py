"""Convert API command.

CLI: linklore convert -i INPUT [-o OUTPUT] [-d DIR] [-p PREFIX] [-x PATTERNS] [-f]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..StageResult import StageResult
from . import RewriteConvertOutput


def cmd_convert(overrides: dict[str, Any] | None = None) -> StageResult:
    """Rewrite the wikilinks of one document into markdown links.

    Loads the configuration, builds the index of ``base_dir``, rewrites the
    input document and writes it to the output file.

    Args:
        overrides: Config values that take precedence over the environment
            and the .env file (keys are LinkloreConfig field names)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.LinkloreConfig import LinkloreConfig
        from ..index.build_index import build_index
        from ..index.IndexBuildError import IndexBuildError
        from ._read_document import _read_document
        from .OutputExistsError import OutputExistsError
        from .rewrite_document import rewrite_document

        input_file = (overrides or {}).get("input_file") or ""
        output_file = (overrides or {}).get("output_file") or ""

        def fail(message: str, indexed_files: int = 0) -> None:
            result_obj.output = RewriteConvertOutput(
                errors=[message],
                warnings=[],
                input_file=input_file,
                output_file=output_file,
                indexed_files=indexed_files,
                replaced=0,
                unresolved=[],
                written=False,
            ).model_dump(mode="python")
            result_obj.result = f"Conversion failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = LinkloreConfig.load(overrides)
        except ValueError as e:
            fail(f"invalid args: {e}")
            return
        input_file = config.input_file
        output_file = config.output_file

        yield (0.3, f"Building index of {config.base_dir}...")
        try:
            index = build_index(config.base_dir, config.ignore_patterns)
        except IndexBuildError as e:
            fail(f"error building index: {e}")
            return

        yield (0.6, f"Reading {input_file}...")
        try:
            text = _read_document(Path(input_file))
        except OSError as e:
            fail(f"error processing file: {e}", len(index))
            return

        yield (0.8, "Rewriting links...")
        try:
            rewritten = rewrite_document(text, index, config.prefix, config.force, output_file)
        except (OutputExistsError, OSError) as e:
            fail(f"error processing file: {e}", len(index))
            return

        yield (1.0, "Complete")
        result_obj.output = RewriteConvertOutput(
            errors=[],
            warnings=[str(diagnostic) for diagnostic in rewritten.diagnostics],
            input_file=input_file,
            output_file=output_file,
            indexed_files=len(index),
            replaced=rewritten.replaced,
            unresolved=[diagnostic.to_dict() for diagnostic in rewritten.diagnostics],
            written=True,
        ).model_dump(mode="python")
        unresolved_note = f", {len(rewritten.diagnostics)} unresolved" if rewritten.diagnostics else ""
        result_obj.result = f"Wrote {output_file} ({rewritten.replaced} links{unresolved_note})"
        result_obj.success = True

    return StageResult(
        announce="Converting wikilinks...",
        progress_callback=do_work,
    )
