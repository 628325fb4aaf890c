"""Three-way reconciliation of remote, local and baseline translation maps.

Flow:
1) diff the remote map against the local map (candidate change set)
2) classify every candidate against the baseline, when one is available
3) hand the classified changes back to the caller for selection
"""

from __future__ import annotations

from .contracts import (
    ClassifiedChange,
    Classification,
    ClassificationStatus,
    Conflict,
    ConflictReason,
    Safe,
    Unchecked,
)
from .engine import reconcile
from .policy import classify

__all__ = [
    "ClassifiedChange",
    "Classification",
    "ClassificationStatus",
    "Conflict",
    "ConflictReason",
    "Safe",
    "Unchecked",
    "classify",
    "reconcile",
]
