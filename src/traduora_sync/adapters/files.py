"""Local translation file access."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from traduora_sync.domain.errors import FileReadError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def read_bytes(path: Path) -> bytes:
    """Return the raw contents of ``path``."""

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"Failed to open file {path}: {exc.strerror or exc}") from exc
    log.debug("Read %s bytes from %s", len(data), path)
    return data
