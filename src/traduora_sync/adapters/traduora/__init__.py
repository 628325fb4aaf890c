"""Public interface for the Traduora adapter."""

from __future__ import annotations

from .client import TraduoraClient, build_traduora_client
from .schema import TermPayload, TermsResponse, TokenResponse, TranslationPayload

__all__ = [
    "TermPayload",
    "TermsResponse",
    "TokenResponse",
    "TraduoraClient",
    "TranslationPayload",
    "build_traduora_client",
]
