"""In-memory filtering for the claims list page."""

from __future__ import annotations

from collections.abc import Iterable

from claims_portal.schemas.claim import ClaimSummary

ALL = "ALL"

STATUS_FILTER_OPTIONS: dict[str, str] = {
    ALL: "All Statuses",
    "Pending Verification": "Pending Verification",
    "Pending Approval": "Pending Approval",
    "Approved": "Approved",
    "Rejected": "Rejected",
    "Cancelled": "Cancelled",
    "Processed": "Processed",
}

TYPE_FILTER_OPTIONS: dict[str, str] = {
    ALL: "All Claim Types",
    "Travel": "Travel",
    "Accommodation": "Accommodation",
    "Other": "Other",
}


def matches_search(claim: ClaimSummary, search_term: str) -> bool:
    """Case-insensitive substring match on display id, requestor and purpose."""
    if not search_term:
        return True
    needle = search_term.lower()
    haystacks = (claim.display_id, claim.requestor or "", claim.purpose or "")
    return any(needle in text.lower() for text in haystacks)


def filter_claims(
    claims: Iterable[ClaimSummary],
    search_term: str = "",
    status: str = ALL,
    claim_type: str = ALL,
) -> list[ClaimSummary]:
    """Apply the search box, status and type filters.

    Status and type compare exactly.  A claim without a ``type`` never
    matches a specific type selection.
    """
    return [
        claim
        for claim in claims
        if matches_search(claim, search_term)
        and (status == ALL or claim.status == status)
        and (claim_type == ALL or claim.claim_type == claim_type)
    ]
