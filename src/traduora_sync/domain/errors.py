"""Error taxonomy shared by the domain and its collaborators."""

from __future__ import annotations


class TraduoraSyncError(RuntimeError):
    """Base class for failures surfaced to the caller."""


class ParseError(TraduoraSyncError):
    """Raised when a translation source is not a flat JSON object of strings."""


class DecodeError(TraduoraSyncError):
    """Raised when raw bytes are invalid under the resolved text encoding."""


class RemoteError(TraduoraSyncError):
    """Raised when the remote service rejects a request or cannot be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FileReadError(TraduoraSyncError):
    """Raised when the local translation file cannot be read."""


class RevisionError(TraduoraSyncError):
    """Raised when a file cannot be read at the requested git revision."""
