from __future__ import annotations

import pytest

from traduora_sync.domain.diff import Added, Removed, Updated
from traduora_sync.domain.reconciliation import (
    ClassificationStatus,
    ClassifiedChange,
    Conflict,
    ConflictReason,
    Safe,
    Unchecked,
    reconcile,
)
from traduora_sync.domain.translations import TranslationMap


def _single(result: list[ClassifiedChange]) -> ClassifiedChange:
    assert len(result) == 1
    return result[0]


def test_new_local_term_without_baseline_is_unchecked() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "x"}),
            local=TranslationMap({"a": "x", "b": "y"}),
        )
    )

    assert entry.change == Added("b", "y")
    assert entry.classification == Unchecked()
    assert entry.is_safe


def test_every_change_is_unchecked_without_baseline() -> None:
    result = reconcile(
        remote=TranslationMap({"a": "x", "b": "y", "c": "z"}),
        local=TranslationMap({"a": "changed", "c": "z", "d": "new"}),
    )

    assert len(result) == 3
    assert all(
        entry.classification.status is ClassificationStatus.UNCHECKED for entry in result
    )


def test_term_deleted_remotely_since_baseline_conflicts() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "x"}),
            local=TranslationMap({"a": "x", "b": "y"}),
            baseline=TranslationMap({"a": "x", "b": "y"}),
        )
    )

    assert entry.change == Added("b", "y")
    assert isinstance(entry.classification, Conflict)
    assert entry.classification.reason is ConflictReason.DELETED_REMOTELY
    assert not entry.is_safe


def test_term_new_locally_and_in_baseline_absent_is_safe() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "x"}),
            local=TranslationMap({"a": "x", "b": "y"}),
            baseline=TranslationMap({"a": "x"}),
        )
    )

    assert entry.classification == Safe()


def test_local_removal_of_baseline_term_is_safe() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "x"}),
            local=TranslationMap(),
            baseline=TranslationMap({"a": "x"}),
        )
    )

    assert entry.change == Removed("a", "x")
    assert entry.classification == Safe()


def test_removing_term_added_remotely_after_baseline_conflicts() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "x", "b": "theirs"}),
            local=TranslationMap({"a": "x"}),
            baseline=TranslationMap({"a": "x"}),
        )
    )

    assert entry.change == Removed("b", "theirs")
    assert isinstance(entry.classification, Conflict)
    assert entry.classification.reason is ConflictReason.ADDED_REMOTELY


def test_update_over_remote_edit_conflicts() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "new"}),
            local=TranslationMap({"a": "mine"}),
            baseline=TranslationMap({"a": "old"}),
        )
    )

    assert entry.change == Updated("a", "new", "mine")
    assert isinstance(entry.classification, Conflict)
    assert entry.classification.reason is ConflictReason.MODIFIED_REMOTELY


def test_update_of_untouched_remote_value_is_safe() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "base"}),
            local=TranslationMap({"a": "mine"}),
            baseline=TranslationMap({"a": "base"}),
        )
    )

    assert entry.change == Updated("a", "base", "mine")
    assert entry.classification == Safe()


def test_update_without_baseline_entry_conflicts() -> None:
    entry = _single(
        reconcile(
            remote=TranslationMap({"a": "theirs"}),
            local=TranslationMap({"a": "mine"}),
            baseline=TranslationMap(),
        )
    )

    assert isinstance(entry.classification, Conflict)
    assert entry.classification.reason is ConflictReason.MISSING_BASELINE


def test_equal_terms_never_become_candidates() -> None:
    result = reconcile(
        remote=TranslationMap({"a": "same"}),
        local=TranslationMap({"a": "same"}),
        baseline=TranslationMap({"a": "something else"}),
    )

    assert result == []


def test_no_change_is_dropped() -> None:
    remote = TranslationMap({"a": "1", "b": "2", "c": "3"})
    local = TranslationMap({"a": "1", "b": "changed", "d": "4"})
    baseline = TranslationMap({"a": "1", "b": "other", "d": "4"})

    result = reconcile(remote, local, baseline)

    assert [entry.change.key for entry in result] == ["b", "c", "d"]
    assert [entry.is_safe for entry in result] == [False, False, False]


@pytest.mark.parametrize("baseline", [None, TranslationMap({"a": "x", "b": "old"})])
def test_reconcile_is_deterministic(baseline: TranslationMap | None) -> None:
    remote = TranslationMap({"a": "x", "b": "old", "c": "gone"})
    local = TranslationMap({"a": "y", "b": "new", "d": "added"})

    assert reconcile(remote, local, baseline) == reconcile(remote, local, baseline)
