from __future__ import annotations

from threading import Event

import pytest

from traduora_sync.domain.diff import Added, Change, Removed, Updated
from traduora_sync.domain.errors import ParseError, RemoteError
from traduora_sync.domain.updates import UpdateReport, UpdateStatus, apply_approved

BATCH: list[Change] = [
    Added("one", "1"),
    Removed("two", "2"),
    Updated("three", "old", "3"),
    Added("four", "4"),
    Updated("five", "old", "5"),
]


class RecordingApplier:
    def __init__(
        self, *, failing: set[str] | None = None, cancel_after: Event | None = None
    ) -> None:
        self.calls: list[Change] = []
        self._failing = failing or set()
        self._cancel_after = cancel_after

    def __call__(self, change: Change) -> None:
        self.calls.append(change)
        if self._cancel_after is not None:
            self._cancel_after.set()
        if change.key in self._failing:
            raise RemoteError(f"rejected {change.key}", status_code=500)


def test_failure_in_the_middle_does_not_abort_batch() -> None:
    applier = RecordingApplier(failing={"three"})

    results = apply_approved(BATCH, applier=applier)

    assert len(results) == 5
    assert [result.change for result in results] == BATCH
    assert applier.calls == BATCH
    assert [result.status for result in results] == [
        UpdateStatus.APPLIED,
        UpdateStatus.APPLIED,
        UpdateStatus.FAILED,
        UpdateStatus.APPLIED,
        UpdateStatus.APPLIED,
    ]
    error = results[2].error
    assert isinstance(error, RemoteError)
    assert error.status_code == 500
    assert all(result.error is None for index, result in enumerate(results) if index != 2)


def test_every_call_may_fail_independently() -> None:
    applier = RecordingApplier(failing={"one", "five"})

    results = apply_approved(BATCH, applier=applier)

    assert [result.ok for result in results] == [False, True, True, True, False]


def test_cancelled_batch_keeps_applied_and_skips_the_rest() -> None:
    cancel = Event()
    applier = RecordingApplier(cancel_after=cancel)

    results = apply_approved(BATCH, applier=applier, cancel=cancel)

    assert applier.calls == [BATCH[0]]
    assert results[0].status is UpdateStatus.APPLIED
    assert [result.status for result in results[1:]] == [UpdateStatus.NOT_ATTEMPTED] * 4


def test_unexpected_errors_propagate() -> None:
    def broken(change: Change) -> None:
        raise ParseError(change.key)

    with pytest.raises(ParseError):
        apply_approved(BATCH, applier=broken)


def test_empty_batch() -> None:
    assert apply_approved([], applier=RecordingApplier()) == []


def test_report_counts_outcomes() -> None:
    cancel = Event()
    applier = RecordingApplier(failing={"one"})

    results = apply_approved(BATCH[:2], applier=applier, cancel=cancel)
    cancel.set()
    results += apply_approved(BATCH[2:], applier=applier, cancel=cancel)
    report = UpdateReport(results)

    assert report.applied == 1
    assert report.failed == 1
    assert report.not_attempted == 3
    assert [failure.change.key for failure in report.failures] == ["one"]
    assert not report.ok
    assert UpdateReport(apply_approved(BATCH, applier=RecordingApplier())).ok
