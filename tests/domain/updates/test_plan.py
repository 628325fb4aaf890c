from __future__ import annotations

from traduora_sync.domain.diff import Added, ChangeKind, Removed, Updated
from traduora_sync.domain.reconciliation import (
    ClassifiedChange,
    Conflict,
    ConflictReason,
    Safe,
    Unchecked,
)
from traduora_sync.domain.updates import plan_updates

CLASSIFIED = [
    ClassifiedChange(Updated("u1", "a", "b"), Safe()),
    ClassifiedChange(Added("a1", "x"), Unchecked()),
    ClassifiedChange(Removed("r1", "x"), Safe()),
    ClassifiedChange(Added("a2", "y"), Conflict(ConflictReason.DELETED_REMOTELY)),
    ClassifiedChange(Updated("u2", "c", "d"), Conflict(ConflictReason.MODIFIED_REMOTELY)),
    ClassifiedChange(Added("a3", "z"), Safe()),
]


def test_plan_selects_safe_changes_added_removed_updated() -> None:
    plan = plan_updates(CLASSIFIED)

    assert [change.key for change in plan] == ["a1", "a3", "r1", "u1"]


def test_plan_includes_conflicts_only_on_override() -> None:
    plan = plan_updates(CLASSIFIED, include_conflicts=True)

    assert [change.key for change in plan] == ["a1", "a2", "a3", "r1", "u1", "u2"]


def test_plan_filters_by_kind() -> None:
    plan = plan_updates(CLASSIFIED, kinds={ChangeKind.UPDATED, ChangeKind.REMOVED})

    assert [change.key for change in plan] == ["r1", "u1"]


def test_plan_of_nothing_is_empty() -> None:
    assert plan_updates([]) == []
    assert plan_updates(CLASSIFIED, kinds=()) == []
