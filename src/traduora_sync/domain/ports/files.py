"""Ports for reading translation file contents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class FileReader(Protocol):
    """Read the raw bytes of a local file, raising ``FileReadError``."""

    def __call__(self, path: Path) -> bytes: ...


@runtime_checkable
class RevisionReader(Protocol):
    """Read the raw bytes of a file at a version-control revision, raising ``RevisionError``."""

    def __call__(self, revision: str, path: Path) -> bytes: ...


__all__ = ["FileReader", "RevisionReader"]
