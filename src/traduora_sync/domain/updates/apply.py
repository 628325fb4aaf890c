"""Sequential execution of approved changes with per-change failure isolation.

One failing remote call never aborts the batch: its error is recorded in the
change's result slot and the next change is attempted. A cancelled batch keeps
whatever was already applied and reports the rest as not attempted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from traduora_sync.domain.errors import RemoteError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from threading import Event

    from traduora_sync.domain.diff import Change
    from traduora_sync.domain.ports import ChangeApplier

log = getLogger(__name__)


class UpdateStatus(StrEnum):
    APPLIED = "applied"
    FAILED = "failed"
    NOT_ATTEMPTED = "not_attempted"


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Outcome of pushing one change."""

    change: Change
    status: UpdateStatus
    error: RemoteError | None = None

    @property
    def ok(self) -> bool:
        return self.status is UpdateStatus.APPLIED


def apply_approved(
    changes: Iterable[Change],
    *,
    applier: ChangeApplier,
    cancel: Event | None = None,
) -> list[UpdateResult]:
    """Apply ``changes`` one at a time, returning one result per change in input order."""

    results: list[UpdateResult] = []
    for change in changes:
        if cancel is not None and cancel.is_set():
            results.append(UpdateResult(change, UpdateStatus.NOT_ATTEMPTED))
            continue
        try:
            applier(change)
        except RemoteError as exc:
            log.error("Failed to apply %s of term %r: %s", change.kind, change.key, exc)
            results.append(UpdateResult(change, UpdateStatus.FAILED, exc))
        else:
            log.debug("Applied %s of term %r", change.kind, change.key)
            results.append(UpdateResult(change, UpdateStatus.APPLIED))
    return results


@dataclass(slots=True)
class UpdateReport:
    """Summary of a batch of update results."""

    results: list[UpdateResult] = field(default_factory=list["UpdateResult"])

    @property
    def applied(self) -> int:
        return self._count(UpdateStatus.APPLIED)

    @property
    def failed(self) -> int:
        return self._count(UpdateStatus.FAILED)

    @property
    def not_attempted(self) -> int:
        return self._count(UpdateStatus.NOT_ATTEMPTED)

    @property
    def failures(self) -> list[UpdateResult]:
        return [result for result in self.results if result.status is UpdateStatus.FAILED]

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.not_attempted == 0

    def _count(self, status: UpdateStatus) -> int:
        return sum(1 for result in self.results if result.status is status)
