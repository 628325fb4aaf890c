"""Classification types produced by the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from traduora_sync.domain.diff import Change


class ClassificationStatus(StrEnum):
    """Outcome of checking one candidate change against the baseline."""

    SAFE = "safe"
    CONFLICT = "conflict"
    UNCHECKED = "unchecked"


class ConflictReason(StrEnum):
    """Why a change would overwrite someone else's remote edit."""

    DELETED_REMOTELY = "deleted_remotely"
    ADDED_REMOTELY = "added_remotely"
    MODIFIED_REMOTELY = "modified_remotely"
    MISSING_BASELINE = "missing_baseline"


@dataclass(frozen=True, slots=True)
class Safe:
    """Change is consistent with the baseline and may be applied."""

    status: Literal[ClassificationStatus.SAFE] = ClassificationStatus.SAFE


@dataclass(frozen=True, slots=True)
class Conflict:
    """Remote state diverged from the baseline for this term."""

    reason: ConflictReason
    detail: str = ""
    status: Literal[ClassificationStatus.CONFLICT] = ClassificationStatus.CONFLICT


@dataclass(frozen=True, slots=True)
class Unchecked:
    """No baseline was available; the change counts as safe."""

    status: Literal[ClassificationStatus.UNCHECKED] = ClassificationStatus.UNCHECKED


type Classification = Safe | Conflict | Unchecked


@dataclass(frozen=True, slots=True)
class ClassifiedChange:
    change: Change
    classification: Classification

    @property
    def is_safe(self) -> bool:
        return not isinstance(self.classification, Conflict)

    @property
    def is_conflict(self) -> bool:
        return isinstance(self.classification, Conflict)
