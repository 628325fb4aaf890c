"""Domain port definitions for adapters."""

from __future__ import annotations

from .files import FileReader, RevisionReader
from .remote import ChangeApplier, TermsSource

__all__ = [
    "ChangeApplier",
    "FileReader",
    "RevisionReader",
    "TermsSource",
]
