"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def optional_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the subset of ``names`` that are set to a non-blank value."""

    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip():
            values[name] = value
    return values


def parse_flag(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
