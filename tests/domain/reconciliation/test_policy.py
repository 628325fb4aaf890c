from __future__ import annotations

import pytest

from traduora_sync.domain.diff import Added, Change, Removed, Updated
from traduora_sync.domain.reconciliation import Conflict, ConflictReason, Safe, classify
from traduora_sync.domain.translations import TranslationMap

BASELINE = TranslationMap({"shared": "base", "kept": "same"})


@pytest.mark.parametrize(
    ("change", "expected"),
    [
        (Added("fresh", "v"), None),
        (Added("shared", "base"), ConflictReason.DELETED_REMOTELY),
        (Removed("shared", "base"), None),
        (Removed("theirs", "v"), ConflictReason.ADDED_REMOTELY),
        (Updated("shared", "base", "mine"), None),
        (Updated("shared", "edited", "mine"), ConflictReason.MODIFIED_REMOTELY),
        (Updated("unknown", "remote", "mine"), ConflictReason.MISSING_BASELINE),
    ],
)
def test_classify_against_baseline(change: Change, expected: ConflictReason | None) -> None:
    classification = classify(change, BASELINE)

    if expected is None:
        assert classification == Safe()
    else:
        assert isinstance(classification, Conflict)
        assert classification.reason is expected
        assert repr(change.key) in classification.detail


def test_empty_baseline_value_is_compared_like_any_other() -> None:
    baseline = TranslationMap({"a": ""})

    assert classify(Updated("a", "", "filled"), baseline) == Safe()
    assert isinstance(classify(Updated("a", "x", "filled"), baseline), Conflict)
