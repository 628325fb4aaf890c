"""Selection of the changes that should be pushed to the remote service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traduora_sync.domain.diff import ChangeKind

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from traduora_sync.domain.diff import Change
    from traduora_sync.domain.reconciliation import ClassifiedChange

ALL_KINDS: frozenset[ChangeKind] = frozenset(ChangeKind)

_KIND_ORDER = (ChangeKind.ADDED, ChangeKind.REMOVED, ChangeKind.UPDATED)


def plan_updates(
    classified: Iterable[ClassifiedChange],
    *,
    kinds: Collection[ChangeKind] = ALL_KINDS,
    include_conflicts: bool = False,
) -> list[Change]:
    """Select approved changes: additions first, then removals, then updates.

    Conflicting changes are only selected when ``include_conflicts`` is set.
    The order within one kind follows the input order.
    """

    selected = [
        entry.change
        for entry in classified
        if entry.change.kind in kinds and (include_conflicts or entry.is_safe)
    ]
    return sorted(selected, key=lambda change: _KIND_ORDER.index(change.kind))
