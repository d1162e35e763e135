"""FileRecord model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """One indexed file, keyed in the index by ``basename``."""

    name: str
    basename: str
    ext: str
    relative_path: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "basename": self.basename,
            "ext": self.ext,
            "relative_path": self.relative_path,
        }
