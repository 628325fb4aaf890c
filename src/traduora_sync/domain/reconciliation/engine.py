"""Entry point of the reconciliation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traduora_sync.domain.diff import diff

from .contracts import ClassifiedChange, Unchecked
from .policy import classify

if TYPE_CHECKING:
    from traduora_sync.domain.translations import TranslationMap

_UNCHECKED = Unchecked()


def reconcile(
    remote: TranslationMap,
    local: TranslationMap,
    baseline: TranslationMap | None = None,
) -> list[ClassifiedChange]:
    """Diff ``remote`` against ``local`` and classify every change.

    Without a baseline no sanity check is possible and every change is
    ``Unchecked``. Terms whose remote and local values agree never show up,
    whatever the baseline says.
    """

    candidates = diff(remote, local)
    if baseline is None:
        return [ClassifiedChange(change, _UNCHECKED) for change in candidates]
    return [ClassifiedChange(change, classify(change, baseline)) for change in candidates]
