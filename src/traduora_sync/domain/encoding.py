"""Text encoding resolution for translation files.

The encoding of a file is chosen in priority order:

1. an explicit hint from configuration,
2. a byte-order mark at the start of the data (the mark is consumed),
3. UTF-8.

The local file and the file read from a git revision are resolved
independently, since a file may be stored as UTF-8 in git but re-saved locally
as UTF-16 by an editor.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Final

from .errors import DecodeError
from .translations import TranslationMap

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_ENCODING: Final[str] = "utf-8"

# UTF-32 LE must be checked before UTF-16 LE: its mark starts with the UTF-16 LE mark.
_BOMS: Final[tuple[tuple[bytes, str], ...]] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def sniff_bom(raw: bytes) -> tuple[str, int] | None:
    """Return the encoding indicated by a byte-order mark and the mark's length."""

    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return encoding, len(bom)
    return None


def resolve_encoding(raw: bytes, hint: str | None = None) -> tuple[str, int]:
    """Decide which encoding to use for ``raw`` and how many leading bytes to skip."""

    if hint:
        try:
            return codecs.lookup(hint).name, 0
        except LookupError as exc:
            raise DecodeError(f"Unknown encoding {hint!r}") from exc
    sniffed = sniff_bom(raw)
    if sniffed is not None:
        return sniffed
    return DEFAULT_ENCODING, 0


def decode_text(
    raw: bytes,
    encoding: str | None = None,
    *,
    source: str | Path | None = None,
) -> str:
    """Decode ``raw`` using the resolved encoding."""

    resolved, offset = resolve_encoding(raw, encoding)
    try:
        text = raw[offset:].decode(resolved)
    except UnicodeDecodeError as exc:
        origin = f" {source}" if source is not None else ""
        raise DecodeError(f"Cannot decode{origin} as {resolved}: {exc.reason}") from exc
    except LookupError as exc:
        # codecs such as base64 resolve but are not text encodings
        raise DecodeError(f"Unsupported text encoding {resolved!r}: {exc}") from exc
    if encoding and text.startswith("\ufeff"):
        text = text[1:]
    return text


def decode_translation_map(
    raw: bytes,
    encoding: str | None = None,
    *,
    source: str | Path | None = None,
) -> TranslationMap:
    """Decode ``raw`` and parse it as a flat JSON translation map."""

    return TranslationMap.from_json(decode_text(raw, encoding, source=source), source=source)
