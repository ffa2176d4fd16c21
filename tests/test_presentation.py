"""Tests for list-row and detail-page view models."""

from __future__ import annotations

from typing import Any

from claims_portal.core.badges import BadgeVariant
from claims_portal.core.lifecycle import ClaimAction
from claims_portal.core.normalizer import normalize_claim_detail, normalize_claim_list
from claims_portal.core.presentation import build_claim_rows, build_detail_view


def _labels(section) -> dict[str, str]:
    return {item.label: item.value for item in section.items}


class TestClaimRows:
    def test_pending_verification_row(self) -> None:
        """List fetch → row with document number, money, badge, date and both actions."""
        payload = {
            "claims": [
                {
                    "id": "C1",
                    "documentNumber": "TSR-001",
                    "requestor": "Jane",
                    "purpose": "Travel",
                    "amount": 120.5,
                    "status": "Pending Verification",
                    "submittedDate": "2024-01-05",
                }
            ]
        }
        (row,) = build_claim_rows(normalize_claim_list(payload))
        assert row.display_id == "TSR-001"
        assert row.amount == "USD 120.50"
        assert row.badge.variant is BadgeVariant.PENDING
        assert row.submitted == "05 Jan 2024"
        assert ClaimAction.EDIT in row.actions
        assert ClaimAction.CANCEL in row.actions

    def test_missing_fields(self) -> None:
        (row,) = build_claim_rows(normalize_claim_list([{"id": "C9"}]))
        assert row.display_id == "C9"
        assert row.amount == "USD 0.00"
        assert row.submitted == "-"
        assert row.badge.label == "Unknown"
        assert row.actions == frozenset({ClaimAction.VIEW})

    def test_unparseable_submitted_date(self) -> None:
        (row,) = build_claim_rows(normalize_claim_list([{"id": "C9", "submittedDate": "soon"}]))
        assert row.submitted == "Invalid Date"

    def test_row_keys_unique_without_ids(self) -> None:
        claims = normalize_claim_list({"claims": [{"documentNumber": "A"}, {"documentNumber": "B"}]})
        rows = build_claim_rows(claims)
        assert {row.claim_id for row in rows} == {""}
        assert len({row.row_key for row in rows}) == 2

    def test_row_keys_unique_with_repeated_ids(self) -> None:
        rows = build_claim_rows(normalize_claim_list([{"id": "C1"}, {"id": "C1"}]))
        assert [row.row_key for row in rows] == ["0_C1", "1_C1"]


class TestDetailView:
    def test_approved_claim_has_no_edit_or_cancel(self, detail_payload: dict[str, Any]) -> None:
        view = build_detail_view(normalize_claim_detail({**detail_payload, "status": "Approved"}))
        assert view.actions == frozenset({ClaimAction.VIEW})
        assert view.badge.variant is BadgeVariant.APPROVED

    def test_subtitle(self, detail_payload: dict[str, Any]) -> None:
        view = build_detail_view(normalize_claim_detail(detail_payload))
        assert view.subtitle == "Viewing Claim ID: TSR-007 - Status: Pending Approval"

    def test_header_omits_blank_values(self, detail_payload: dict[str, Any]) -> None:
        header = _labels(build_detail_view(normalize_claim_detail(detail_payload)).header)
        assert header["Staff Number"] == "10023"
        assert header["Claim For Month Of"] == "January 2024"
        assert "Location" not in header
        assert "Staff Type" not in header

    def test_medical_section_with_family_rows(self, detail_payload: dict[str, Any]) -> None:
        medical = build_detail_view(normalize_claim_detail(detail_payload)).medical
        values = _labels(medical)
        assert values["Is For Family"] == "Yes"
        assert values["For Spouse"] == "Yes"
        assert values["For Children"] == "No"
        assert values["For Other Family Member"] == "No"

    def test_medical_family_rows_hidden(self, detail_payload: dict[str, Any]) -> None:
        detail_payload["medicalClaimDetails"]["isForFamily"] = False
        values = _labels(build_detail_view(normalize_claim_detail(detail_payload)).medical)
        assert values["Is For Family"] == "No"
        assert "For Spouse" not in values

    def test_medical_section_hidden(self, detail_payload: dict[str, Any]) -> None:
        detail_payload["medicalClaimDetails"] = {"isMedicalClaim": False, "isForFamily": True}
        assert build_detail_view(normalize_claim_detail(detail_payload)).medical is None

    def test_expense_rows(self, detail_payload: dict[str, Any]) -> None:
        first, second = build_detail_view(normalize_claim_detail(detail_payload)).expense_rows
        assert first.date == "03 Jan 2024"
        assert first.details == "KL - Penang - Hotel Jen"
        assert first.mileage_km == "355"
        assert first.transport == "45.50"
        assert first.accommodation == "1,200.00"
        assert first.meals == "0.00"
        assert first.miscellaneous == "5.00"
        assert first.other_expenses == "0.00"
        assert second.date == "Invalid Date"
        assert second.details == "Taxi to airport"
        assert second.transport == "n/a"

    def test_exchange_rate_rows(self, detail_payload: dict[str, Any]) -> None:
        (rate,) = build_detail_view(normalize_claim_detail(detail_payload)).exchange_rate_rows
        assert rate.currency == "SGD"
        assert rate.selling_rate == "3.4821"

    def test_optional_sequences_empty(self) -> None:
        view = build_detail_view(normalize_claim_detail({"id": "C1"}))
        assert view.expense_rows == ()
        assert view.exchange_rate_rows == ()
        assert view.medical is None

    def test_financial_summary(self, detail_payload: dict[str, Any]) -> None:
        values = _labels(build_detail_view(normalize_claim_detail(detail_payload)).financial_summary)
        assert values["Total Advance Claim Amount"] == "USD 1,234.50"
        assert values["Less Corporate Credit Card Payment"] == "USD 0.00"
        assert values["Cheque/Receipt No."] == ""

    def test_declaration(self, detail_payload: dict[str, Any]) -> None:
        values = _labels(build_detail_view(normalize_claim_detail(detail_payload)).declaration)
        assert values["Declaration Status"] == "Declared"
        assert values["Declaration Date"] == "05 January 2024"

    def test_declaration_absent(self) -> None:
        values = _labels(build_detail_view(normalize_claim_detail({"id": "C1"})).declaration)
        assert values["Declaration Status"] == "Not Declared"
        assert values["Declaration Date"] == "N/A"
