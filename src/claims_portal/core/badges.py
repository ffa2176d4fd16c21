"""Status → badge styling.

Case-insensitive and deliberately separate from
:mod:`claims_portal.core.lifecycle`: both pending statuses share one visual
treatment here while the policy keeps them apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BadgeVariant(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"
    NEUTRAL = "neutral"


_ICONS = {
    BadgeVariant.APPROVED: "✅",
    BadgeVariant.REJECTED: "❌",
    BadgeVariant.PENDING: "🕒",
    BadgeVariant.NEUTRAL: "📄",
}

_VARIANTS = {
    "approved": BadgeVariant.APPROVED,
    "rejected": BadgeVariant.REJECTED,
    "pending verification": BadgeVariant.PENDING,
    "pending approval": BadgeVariant.PENDING,
}


@dataclass(frozen=True)
class StatusBadge:
    variant: BadgeVariant
    label: str
    icon: str

    @property
    def css_class(self) -> str:
        return f"badge-{self.variant.value}"


def status_badge(status: Optional[str]) -> StatusBadge:
    """Classify *status* into a badge; unknown statuses get the neutral style."""
    variant = _VARIANTS.get((status or "").lower(), BadgeVariant.NEUTRAL)
    return StatusBadge(variant=variant, label=status or "Unknown", icon=_ICONS[variant])
