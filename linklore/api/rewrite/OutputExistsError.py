"""Output overwrite guard error."""

from pathlib import Path


class OutputExistsError(Exception):
    """The output file exists and overwriting was not requested."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"output file already exists: {path} (use --force to overwrite)")
