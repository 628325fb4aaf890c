"""Ports for talking to the remote localization service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from traduora_sync.domain.diff import Change
    from traduora_sync.domain.translations import TranslationMap


@runtime_checkable
class TermsSource(Protocol):
    """Provides the current remote terms of the configured project and locale."""

    def fetch_terms(self) -> TranslationMap:
        """Raise ``RemoteError`` on authentication, network or not-found failures."""
        ...


@runtime_checkable
class ChangeApplier(Protocol):
    """Callable port applying one change to the remote service."""

    def __call__(self, change: Change) -> None:
        """Raise ``RemoteError`` when the remote service rejects the change."""
        ...


__all__ = ["ChangeApplier", "TermsSource"]
