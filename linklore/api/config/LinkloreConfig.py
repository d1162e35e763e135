"""Top-level linklore configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ._constants import DEFAULT_BASE_DIR, DEFAULT_IGNORE_PATTERNS, DEFAULT_OUTPUT_SUFFIX, DEFAULT_PREFIX
from ._read_env_settings import _read_env_settings


class LinkloreConfig(BaseModel):
    """Settings for one conversion run."""

    model_config = ConfigDict(extra="forbid")

    input_file: str = Field(..., min_length=1, description="Document to rewrite")
    output_file: str = Field("", description="Destination file, derived from input_file if empty")
    base_dir: str = Field(DEFAULT_BASE_DIR, min_length=1, description="Root directory to index")
    prefix: str = Field(DEFAULT_PREFIX, description="Prepended to every resolved relative path")
    ignore_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS),
        description="Glob patterns matched against entry base names",
    )
    force: bool = Field(False, description="Overwrite output_file if it exists")

    @field_validator("ignore_patterns")
    @classmethod
    def _validate_ignore_patterns(cls, v: list[str]) -> list[str]:
        for pattern in v:
            trimmed = pattern.strip()
            if not trimmed:
                raise ValueError("invalid ignore pattern: (empty string)")
            if trimmed != pattern:
                raise ValueError(f"invalid ignore pattern: {pattern!r} (leading or trailing whitespace)")
        return v

    @model_validator(mode="after")
    def _default_output_file(self) -> LinkloreConfig:
        if not self.output_file:
            stem, _ = os.path.splitext(self.input_file)
            self.output_file = stem + DEFAULT_OUTPUT_SUFFIX
        return self

    @classmethod
    def load(cls, overrides: dict[str, Any] | None = None, env_file: Path | None = None) -> LinkloreConfig:
        """Load config from the environment, a .env file and explicit overrides.

        Later sources win: process environment, then the .env file (default:
        ``.env`` in the working directory), then ``overrides``. Override values
        that are None, empty or False are treated as unset.

        Raises:
            ValueError: If the merged settings fail validation
        """
        raw = _read_env_settings(os.environ)

        dotenv_path = env_file if env_file is not None else Path.cwd() / ".env"
        if dotenv_path.is_file():
            raw.update(_read_env_settings(dotenv_values(dotenv_path), upper_keys=True))

        for key, value in (overrides or {}).items():
            if value is None or value is False or value == "" or value == []:
                continue
            raw[key] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for display."""
        return self.model_dump(mode="python")
