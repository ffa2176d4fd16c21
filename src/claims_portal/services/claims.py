"""Page-level state for the claims list and detail views.

Each loader performs one request, normalizes the body and converts every
failure into page state.  Nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loguru import logger

from claims_portal.client.api_client import APIError, ClaimsAPIClient
from claims_portal.core.lifecycle import can_cancel, can_edit
from claims_portal.core.normalizer import (
    normalize_cancel_response,
    normalize_claim_detail,
    normalize_claim_list,
)
from claims_portal.schemas.claim import ClaimDetail, ClaimSummary

DEFAULT_CANCEL_COMMENT = "Cancelled by user."
DEFAULT_CANCEL_ACTOR = "User"
CANCEL_FAILED_MESSAGE = "Failed to cancel claim."


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class DetailStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    NOT_FOUND = "not_found"
    LOADED = "loaded"


@dataclass
class ClaimsListState:
    claims: list[ClaimSummary] = field(default_factory=list)
    error: Optional[str] = None
    loading: bool = False


@dataclass
class ClaimDetailState:
    claim_id: str
    claim: Optional[ClaimDetail] = None
    error: Optional[str] = None
    loading: bool = False
    action_pending: bool = False

    @property
    def view_status(self) -> DetailStatus:
        if self.loading:
            return DetailStatus.LOADING
        if self.error:
            return DetailStatus.ERROR
        if self.claim is None:
            return DetailStatus.NOT_FOUND
        return DetailStatus.LOADED

    @property
    def can_edit(self) -> bool:
        return self.claim is not None and can_edit(self.claim.status)

    @property
    def can_cancel(self) -> bool:
        return self.claim is not None and can_cancel(self.claim.status)

    @property
    def cancel_enabled(self) -> bool:
        """The cancel control is shown and no request is outstanding."""
        return self.can_cancel and not self.action_pending


@dataclass(frozen=True)
class Notification:
    """A transient toast for the user."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


def _fetch_error_message(prefix: str, exc: APIError) -> str:
    if exc.status_code is not None:
        return f"{prefix}: {exc.reason or exc.status_code}"
    return str(exc)


def load_claims_list(client: ClaimsAPIClient) -> ClaimsListState:
    """Fetch and normalize the claims list."""
    logger.debug("Fetching claims list")
    try:
        payload = client.list_claims()
    except APIError as exc:
        logger.error("Failed to fetch claims: {err}", err=exc)
        return ClaimsListState(error=_fetch_error_message("Error fetching claims", exc))

    claims = normalize_claim_list(payload)
    logger.info("Loaded {n} claims", n=len(claims))
    return ClaimsListState(claims=claims)


def load_claim_detail(client: ClaimsAPIClient, claim_id: str) -> ClaimDetailState:
    """Fetch and normalize one claim.

    A body without a usable record leaves ``claim`` unset, which the page
    shows as "not found" rather than as an error.
    """
    logger.debug("Fetching claim details for {id}", id=claim_id)
    try:
        payload = client.get_claim(claim_id)
    except APIError as exc:
        logger.error("Failed to fetch claim {id}: {err}", id=claim_id, err=exc)
        return ClaimDetailState(
            claim_id=claim_id,
            error=_fetch_error_message("Error fetching claim", exc),
        )

    claim = normalize_claim_detail(payload)
    if claim is None:
        logger.warning("Claim {id} not found in response", id=claim_id)
    else:
        logger.debug(
            "Claim {id} status={status} can_edit={edit} can_cancel={cancel}",
            id=claim_id,
            status=claim.status,
            edit=can_edit(claim.status),
            cancel=can_cancel(claim.status),
        )
    return ClaimDetailState(claim_id=claim_id, claim=claim)


# ---------------------------------------------------------------------------
# Cancel action
# ---------------------------------------------------------------------------


def cancel_actor(claim: ClaimDetail, fallback: str = DEFAULT_CANCEL_ACTOR) -> str:
    """Display name recorded as the actor of a cancellation."""
    return claim.requestor_name or claim.requestor or fallback


def cancel_claim(
    client: ClaimsAPIClient,
    state: ClaimDetailState,
    *,
    comments: str = DEFAULT_CANCEL_COMMENT,
    fallback_actor: str = DEFAULT_CANCEL_ACTOR,
) -> Optional[Notification]:
    """Submit a cancellation for the claim held in *state*.

    On success the whole local record is replaced by the one the backend
    returns.  On failure *state* keeps its record and the returned
    notification carries the backend's message.  Returns ``None`` without
    issuing a request when no claim is loaded or a request is already
    outstanding.
    """
    if state.claim is None:
        return None
    if state.action_pending:
        logger.warning("Cancel for {id} already in flight; ignoring", id=state.claim_id)
        return None

    state.action_pending = True
    try:
        payload = client.cancel_claim(
            state.claim_id,
            comments=comments,
            cancelled_by=cancel_actor(state.claim, fallback_actor),
        )
    except APIError as exc:
        if exc.status_code is not None:
            message = exc.payload.get("error") or exc.payload.get("details") or CANCEL_FAILED_MESSAGE
        else:
            message = str(exc)
        logger.error("Error cancelling claim {id}: {err}", id=state.claim_id, err=message)
        return Notification(
            title="Error Cancelling Claim",
            description=str(message),
            variant="destructive",
        )
    finally:
        state.action_pending = False

    state.claim = normalize_cancel_response(payload)
    logger.info("Claim {id} cancelled", id=state.claim_id)
    return Notification(
        title="Claim Cancelled",
        description=f"Claim ID {state.claim_id} has been cancelled.",
    )
