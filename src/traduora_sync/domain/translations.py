"""Flat term-to-translation mapping shared by the remote, local and baseline states."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from .errors import ParseError

if TYPE_CHECKING:
    from pathlib import Path


class TranslationMap(Mapping[str, str]):
    """Immutable, insertion-ordered mapping from term key to translation.

    Equality follows ``Mapping`` semantics: two maps are equal when they hold the
    same keys with the same values, regardless of order.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        items = terms.items() if isinstance(terms, Mapping) else terms
        collected: dict[str, str] = {}
        for key, value in items:
            if not isinstance(key, str):
                raise ParseError(f"Term key must be a string, got {type(key).__name__}")
            if not isinstance(value, str):
                raise ParseError(
                    f"Translation for term {key!r} must be a string, got {type(value).__name__}"
                )
            collected[key] = value
        self._terms = collected

    @classmethod
    def from_json(cls, text: str, *, source: str | Path | None = None) -> TranslationMap:
        """Parse a JSON object whose values are all strings."""

        origin = f" in {source}" if source is not None else ""
        try:
            document = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Malformed JSON{origin}: {exc}") from exc
        except _DuplicateKeyError as exc:
            raise ParseError(f"Duplicate term {exc.key!r}{origin}") from None
        except (ValueError, RecursionError) as exc:
            # oversized integer literals and nesting beyond the recursion limit
            raise ParseError(f"Unreadable JSON{origin}: {exc}") from exc

        if not isinstance(document, dict):
            raise ParseError(f"Expected a JSON object of terms{origin}")
        try:
            return cls(document)
        except ParseError as exc:
            raise ParseError(f"{exc}{origin}") from None

    def __getitem__(self, key: str) -> str:
        return self._terms[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._terms!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._terms)


class _DuplicateKeyError(ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict[str, object]:
    result: dict[str, object] = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKeyError(key)
        result[key] = value
    return result
