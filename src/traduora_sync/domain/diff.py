"""Two-way delta between translation maps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from .translations import TranslationMap

if TYPE_CHECKING:
    from collections.abc import Iterable


class ChangeKind(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


@dataclass(frozen=True, slots=True)
class Added:
    """Term exists in the new map only."""

    key: str
    value: str
    kind: Literal[ChangeKind.ADDED] = ChangeKind.ADDED


@dataclass(frozen=True, slots=True)
class Removed:
    """Term exists in the old map only."""

    key: str
    old_value: str
    kind: Literal[ChangeKind.REMOVED] = ChangeKind.REMOVED


@dataclass(frozen=True, slots=True)
class Updated:
    """Term exists in both maps with different translations."""

    key: str
    old_value: str
    new_value: str
    kind: Literal[ChangeKind.UPDATED] = ChangeKind.UPDATED


type Change = Added | Removed | Updated


def diff(old: TranslationMap, new: TranslationMap) -> list[Change]:
    """Return one change per key that differs between ``old`` and ``new``, sorted by key."""

    changes: list[Change] = []
    for key in sorted(old.keys() | new.keys()):
        if key not in old:
            changes.append(Added(key, new[key]))
        elif key not in new:
            changes.append(Removed(key, old[key]))
        elif old[key] != new[key]:
            changes.append(Updated(key, old[key], new[key]))
    return changes


def apply_changes(base: TranslationMap, changes: Iterable[Change]) -> TranslationMap:
    """Return ``base`` with ``changes`` applied; ``apply_changes(a, diff(a, b)) == b``."""

    terms = base.to_dict()
    for change in changes:
        match change:
            case Added(key=key, value=value):
                terms[key] = value
            case Removed(key=key):
                terms.pop(key, None)
            case Updated(key=key, new_value=value):
                terms[key] = value
    return TranslationMap(terms)


def describe(change: Change) -> str:
    """Render a change for listings; removed terms show the key only."""

    match change:
        case Added(key=key, value=value):
            return f"{key} ==> {value}"
        case Removed(key=key):
            return key
        case Updated(key=key, old_value=old, new_value=new):
            return f"{key} ==> {new} (was {old})"
