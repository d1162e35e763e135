"""Map LINKLORE_* variables onto config fields (private)."""

from collections.abc import Mapping
from typing import Any

from ._constants import ENV_KEYS


def _read_env_settings(mapping: Mapping[str, str | None], upper_keys: bool = False) -> dict[str, Any]:
    """Extract config fields from an environment-style mapping.

    Keys are matched exactly unless ``upper_keys`` is set, which upper-cases
    them first (used for .env files). Empty values count as unset.
    """
    values = {(key.upper() if upper_keys else key): value for key, value in mapping.items() if value}
    settings: dict[str, Any] = {}
    for field_name, keys in ENV_KEYS.items():
        for key in keys:
            if key in values:
                settings[field_name] = values[key]

    if "ignore_patterns" in settings:
        settings["ignore_patterns"] = settings["ignore_patterns"].split(",")
    if "force" in settings:
        settings["force"] = settings["force"].strip().lower() in ("true", "1")
    return settings
