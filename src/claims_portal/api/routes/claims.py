"""Claims API routes of the development backend.

Endpoints
---------
GET  /api/claims
    All claims, wrapped as ``{"claims": [...]}``.

GET  /api/claims/{claim_id}
    One claim, wrapped as ``{"claimData": {...}}``.

POST /api/claims/{claim_id}/cancel
    Cancel a claim; returns ``{"claim": {...}}``.

GET  /api/health
    Lightweight health-check.

Error bodies are ``{"error": ..., "details": ...}``.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from claims_portal.api.store import ClaimStore, ClaimStoreError
from claims_portal.schemas.claim import CancelRequest

router = APIRouter()


def _store(request: Request) -> ClaimStore:
    return request.app.state.store


def _error_response(exc: ClaimStoreError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc), "details": type(exc).__name__},
    )


# ---------------------------------------------------------------------------
# GET /claims
# ---------------------------------------------------------------------------

@router.get(
    "/claims",
    summary="List claims",
    description="Return every claim held by the development store.",
)
async def list_claims(request: Request) -> dict:
    claims = _store(request).records()
    logger.debug("API: listing {n} claims", n=len(claims))
    return {"claims": claims}


# ---------------------------------------------------------------------------
# GET /claims/{claim_id}
# ---------------------------------------------------------------------------

@router.get(
    "/claims/{claim_id}",
    summary="Get a claim",
    description="Return one claim with all of its detail groups.",
)
async def get_claim(claim_id: str, request: Request):
    try:
        record = _store(request).get(claim_id)
    except ClaimStoreError as exc:
        logger.warning("API: {err}", err=exc)
        return _error_response(exc)
    return {"claimData": record}


# ---------------------------------------------------------------------------
# POST /claims/{claim_id}/cancel
# ---------------------------------------------------------------------------

@router.post(
    "/claims/{claim_id}/cancel",
    summary="Cancel a claim",
    description="Cancel a claim that is still pending verification or approval.",
)
async def cancel_claim(claim_id: str, body: CancelRequest, request: Request):
    logger.info("API: cancel requested for {id} by {actor}", id=claim_id, actor=body.cancelled_by)
    try:
        record = _store(request).cancel(
            claim_id,
            comments=body.comments,
            cancelled_by=body.cancelled_by,
        )
    except ClaimStoreError as exc:
        logger.warning("API: cancel refused for {id}: {err}", id=claim_id, err=exc)
        return _error_response(exc)
    return {"claim": record}


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------

@router.get(
    "/health",
    summary="Health check",
    description="Returns service health status and the number of stored claims.",
)
async def health(request: Request) -> dict:
    return {"status": "healthy", "claims": len(_store(request))}
