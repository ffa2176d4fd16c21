"""Shared fixtures for the expense-claims test suite."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from omegaconf import OmegaConf

from claims_portal.client.api_client import ClaimsAPIClient

# ---------------------------------------------------------------------------
# Raw API payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def summary_payload() -> dict[str, Any]:
    """A camelCase list entry, as the claims list endpoint sends it."""
    return {
        "id": "C1",
        "documentNumber": "TSR-001",
        "requestor": "Jane",
        "purpose": "Travel",
        "amount": 120.5,
        "status": "Pending Verification",
        "submittedDate": "2024-01-05",
    }


@pytest.fixture()
def snake_summary_payload() -> dict[str, Any]:
    """The same claim shape in the older snake_case convention."""
    return {
        "id": 42,
        "document_number": "TSR-042",
        "requestor": "Ahmad",
        "purpose": "Medical check-up",
        "amount": "310.00",
        "status": "Pending Approval",
        "submitted_date": "2024-02-11",
    }


@pytest.fixture()
def detail_payload() -> dict[str, Any]:
    """A full claim with every detail group (camelCase)."""
    return {
        "id": "C7",
        "documentNumber": "TSR-007",
        "requestor": "Jane Tan",
        "requestorName": "Jane Tan",
        "purpose": "Client workshop",
        "amount": 1234.5,
        "status": "Pending Approval",
        "submittedDate": "2024-01-05",
        "headerDetails": {
            "documentType": "TSR",
            "documentNumber": "TSR-007",
            "claimForMonthOf": "2024-01-01",
            "staffName": "Jane Tan",
            "staffNo": 10023,
            "gred": "E12",
            "location": "",
        },
        "bankDetails": {
            "bankName": "Maybank",
            "accountNumber": "5140 1234",
            "purposeOfClaim": "Workshop travel",
        },
        "medicalClaimDetails": {
            "isMedicalClaim": True,
            "applicableMedicalType": "Outpatient",
            "isForFamily": True,
            "familyMemberSpouse": True,
            "familyMemberChildren": False,
        },
        "expenseItems": [
            {
                "date": "2024-01-03",
                "claimOrTravelDetails": {"from": "KL", "to": "Penang", "placeOfStay": "Hotel Jen"},
                "officialMileageKM": 355.4,
                "transport": 45.5,
                "hotelAccommodationAllowance": "1200",
                "outStationAllowanceMeal": None,
                "miscellaneousAllowance10Percent": 5,
                "otherExpenses": "",
            },
            {
                "date": "not a date",
                "claimOrTravelDetails": "Taxi to airport",
                "transport": "n/a",
            },
        ],
        "informationOnForeignExchangeRate": [
            {"date": "2024-01-03", "typeOfCurrency": "SGD", "sellingRateTTOD": 3.4821},
        ],
        "financialSummary": {
            "totalAdvanceClaimAmount": 1234.5,
            "lessAdvanceTaken": 200,
            "balanceClaimRepayment": 1034.5,
        },
        "declaration": {"iDeclare": True, "date": "2024-01-05"},
    }


# ---------------------------------------------------------------------------
# Config fixture (test overrides)
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_claims_file(tmp_path: Path, detail_payload: dict[str, Any], summary_payload: dict[str, Any]) -> str:
    """Write a small sample-claims JSON file and return its path."""
    approved = {**summary_payload, "id": "C3", "documentNumber": "TSR-003", "status": "Approved"}
    path = tmp_path / "sample_claims.json"
    path.write_text(json.dumps({"claims": [summary_payload, detail_payload, approved]}))
    return str(path)


@pytest.fixture()
def test_cfg(sample_claims_file: str) -> Any:
    """Return a minimal OmegaConf DictConfig with test overrides."""
    cfg_dict = {
        "api": {"base_url": "http://claims.test", "timeout": None},
        "logging": {"level": "WARNING", "colored": False, "format": "pretty"},
        "server": {
            "host": "127.0.0.1",
            "port": 8000,
            "debug": False,
            "cors_origins": ["http://localhost:8501"],
        },
        "data": {"sample_claims": sample_claims_file},
        "ui": {
            "currency": "USD",
            "cancel_comment": "Cancelled by user.",
            "cancel_actor_fallback": "User",
            "logout_redirect": "/login",
            "identity": {
                "display_name": "Admin User",
                "email": "admin@example.com",
                "role": "Admin Focal",
            },
        },
    }
    return OmegaConf.create(cfg_dict)


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_client(summary_payload: dict[str, Any], detail_payload: dict[str, Any]) -> MagicMock:
    """A ``ClaimsAPIClient`` double returning the payload fixtures."""
    client = MagicMock(spec=ClaimsAPIClient)
    client.list_claims.return_value = {"claims": [summary_payload]}
    client.get_claim.return_value = {"claimData": copy.deepcopy(detail_payload)}
    client.cancel_claim.return_value = {"claim": {**detail_payload, "status": "Cancelled"}}
    return client
