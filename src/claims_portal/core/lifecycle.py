"""Claim lifecycle policy: which actions a claim's status permits.

Pure functions over the server-reported status string.  Comparison is exact
and case-sensitive.  The policy only drives UI affordances; the backend
remains the authority on what is actually allowed.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

EDITABLE_STATUSES: frozenset[str] = frozenset(
    {"Pending Verification", "Draft", "Rejected", "Pending Approval"}
)
CANCELLABLE_STATUSES: frozenset[str] = frozenset({"Pending Verification", "Pending Approval"})
TERMINAL_STATUSES: frozenset[str] = frozenset({"Approved", "Cancelled", "Processed"})


class ClaimAction(str, Enum):
    """Affordances a claim page can offer."""

    VIEW = "view"
    EDIT = "edit"
    CANCEL = "cancel"


def can_edit(status: Optional[str]) -> bool:
    """``True`` if *status* is editable and not terminal."""
    if not status:
        return False
    # Terminal always wins, even if a status is ever added to both sets.
    return status in EDITABLE_STATUSES and status not in TERMINAL_STATUSES


def can_cancel(status: Optional[str]) -> bool:
    """``True`` if *status* is cancellable and not terminal."""
    if not status:
        return False
    return status in CANCELLABLE_STATUSES and status not in TERMINAL_STATUSES


def permitted_actions(status: Optional[str]) -> frozenset[ClaimAction]:
    """All actions available for *status*; viewing is always allowed."""
    actions = {ClaimAction.VIEW}
    if can_edit(status):
        actions.add(ClaimAction.EDIT)
    if can_cancel(status):
        actions.add(ClaimAction.CANCEL)
    return frozenset(actions)
