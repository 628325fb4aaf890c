"""Baseline policy deciding whether a candidate change is safe to push.

The baseline is the last state both the local file and the remote agreed on.
A change is a conflict whenever the remote side of that term moved away from the
baseline: pushing the local value would then overwrite a third party's edit.

This stage is deterministic given the change and the baseline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from traduora_sync.domain.diff import Added, Removed, Updated

from .contracts import Conflict, ConflictReason, Safe

if TYPE_CHECKING:
    from traduora_sync.domain.diff import Change
    from traduora_sync.domain.translations import TranslationMap

_SAFE = Safe()


def classify(change: Change, baseline: TranslationMap) -> Safe | Conflict:
    """Classify ``change`` (remote -> local) against ``baseline``."""

    match change:
        case Added(key=key):
            if key in baseline:
                return Conflict(
                    ConflictReason.DELETED_REMOTELY,
                    f"term {key!r} existed at baseline but was deleted remotely",
                )
            return _SAFE
        case Removed(key=key):
            if key not in baseline:
                return Conflict(
                    ConflictReason.ADDED_REMOTELY,
                    f"term {key!r} was added remotely after baseline",
                )
            return _SAFE
        case Updated(key=key, old_value=remote_value):
            baseline_value = baseline.get(key)
            if baseline_value is None:
                return Conflict(
                    ConflictReason.MISSING_BASELINE,
                    f"term {key!r} has no baseline translation to compare against",
                )
            if baseline_value != remote_value:
                return Conflict(
                    ConflictReason.MODIFIED_REMOTELY,
                    f"remote translation of {key!r} changed since baseline "
                    f"({baseline_value!r} -> {remote_value!r})",
                )
            return _SAFE
