"""Selection and execution of approved term updates."""

from __future__ import annotations

from .apply import UpdateReport, UpdateResult, UpdateStatus, apply_approved
from .plan import ALL_KINDS, plan_updates

__all__ = [
    "ALL_KINDS",
    "UpdateReport",
    "UpdateResult",
    "UpdateStatus",
    "apply_approved",
    "plan_updates",
]
