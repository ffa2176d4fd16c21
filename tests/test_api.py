"""Integration tests for the development backend.

Uses ``httpx.AsyncClient`` (via ``pytest-asyncio``) against the ASGI app.
The store is injected directly because ``ASGITransport`` does not run the
lifespan.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from omegaconf import DictConfig

from claims_portal.api.app import create_app
from claims_portal.api.store import ClaimStore
from claims_portal.client.api_client import ClaimsAPIClient
from claims_portal.services.claims import load_claim_detail

CANCEL_BODY = {"comments": "Cancelled by user.", "cancelledBy": "Jane Tan"}

# ---------------------------------------------------------------------------
# App fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def store(sample_claims_file: str) -> ClaimStore:
    return ClaimStore.from_json(sample_claims_file)


@pytest.fixture()
def app(test_cfg: DictConfig, store: ClaimStore) -> FastAPI:
    return create_app(test_cfg, store=store)


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ═══════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════


class TestClaimStore:
    def test_missing_file_is_empty(self, tmp_path) -> None:
        assert len(ClaimStore.from_json(tmp_path / "absent.json")) == 0

    def test_records_are_copies(self, store: ClaimStore) -> None:
        store.get("C1")["status"] = "Approved"
        assert store.get("C1")["status"] == "Pending Verification"

    def test_records_without_id_skipped(self) -> None:
        assert len(ClaimStore([{"status": "Draft"}, {"id": 5}])) == 1

    def test_shipped_sample_data_loads(self) -> None:
        from claims_portal.config import PROJECT_ROOT

        store = ClaimStore.from_json(PROJECT_ROOT / "data" / "sample_claims.json")
        assert len(store) >= 1


# ═══════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health_returns_ok(self, client: AsyncClient) -> None:
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "claims": 3}


class TestListClaims:
    @pytest.mark.asyncio
    async def test_wrapped_list(self, client: AsyncClient) -> None:
        resp = await client.get("/api/claims")
        assert resp.status_code == 200
        ids = [c["id"] for c in resp.json()["claims"]]
        assert ids == ["C1", "C7", "C3"]


class TestGetClaim:
    @pytest.mark.asyncio
    async def test_wrapped_detail(self, client: AsyncClient) -> None:
        resp = await client.get("/api/claims/C7")
        assert resp.status_code == 200
        assert resp.json()["claimData"]["documentNumber"] == "TSR-007"

    @pytest.mark.asyncio
    async def test_unknown_claim_404(self, client: AsyncClient) -> None:
        resp = await client.get("/api/claims/nope")
        assert resp.status_code == 404
        body = resp.json()
        assert body["error"] == "Claim nope not found"
        assert body["details"] == "ClaimNotFoundError"


class TestCancelClaim:
    @pytest.mark.asyncio
    async def test_cancel_pending_claim(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/claims/C7/cancel",
            json={"comments": "Cancelled by user.", "cancelledBy": "Jane Tan"},
        )
        assert resp.status_code == 200
        claim = resp.json()["claim"]
        assert claim["status"] == "Cancelled"
        assert claim["cancellation"]["cancelledBy"] == "Jane Tan"

        again = await client.get("/api/claims/C7")
        assert again.json()["claimData"]["status"] == "Cancelled"

    @pytest.mark.asyncio
    async def test_cancel_approved_claim_conflict(self, client: AsyncClient) -> None:
        resp = await client.post("/api/claims/C3/cancel", json=CANCEL_BODY)
        assert resp.status_code == 409
        assert "cannot be cancelled" in resp.json()["error"]

    @pytest.mark.asyncio
    async def test_cancel_twice(self, client: AsyncClient) -> None:
        await client.post("/api/claims/C1/cancel", json=CANCEL_BODY)
        resp = await client.post("/api/claims/C1/cancel", json=CANCEL_BODY)
        assert resp.status_code == 409

    @pytest.mark.asyncio
    async def test_cancel_unknown_claim(self, client: AsyncClient) -> None:
        resp = await client.post("/api/claims/nope/cancel", json=CANCEL_BODY)
        assert resp.status_code == 404


class TestClientAgainstBackend:
    def test_detail_roundtrip_through_normalizer(self, store: ClaimStore) -> None:
        """The client-side loader accepts what the backend stores."""

        class _StoreClient(ClaimsAPIClient):
            def get_claim(self, claim_id: str):
                return {"claimData": store.get(claim_id)}

        state = load_claim_detail(_StoreClient(base_url="http://unused"), "C7")
        assert state.claim.header_details.staff_no == "10023"
        assert state.claim.expense_items[0].claim_or_travel_details.from_ == "KL"


class TestValidation:
    @pytest.mark.asyncio
    async def test_cancel_without_actor_returns_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/claims/C7/cancel", json={"comments": "x"})
        assert resp.status_code == 422
