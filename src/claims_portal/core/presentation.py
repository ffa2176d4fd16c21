"""View models for the claims pages.

Turns normalized records into display-ready strings so the Streamlit layer
only lays them out.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from claims_portal.core.badges import StatusBadge, status_badge
from claims_portal.core.formatting import (
    DEFAULT_CURRENCY,
    LONG_DATE,
    MONTH_YEAR,
    SHORT_DATE,
    format_currency,
    format_date,
    format_number,
    travel_details_text,
)
from claims_portal.core.lifecycle import ClaimAction, permitted_actions
from claims_portal.schemas.claim import ClaimDetail, ClaimSummary, MedicalClaimDetails

DECLARATION_STATEMENT = (
    "I hereby declare that all of the information provided in the Claim Form, as well as "
    "all of the information contained in the supporting documents and materials are true "
    "and complete. I understand that any false, fraudulent, or incomplete information on "
    "this Claim Form and the related supporting documents may serve as grounds for "
    "disciplinary action."
)


# ---------------------------------------------------------------------------
# List rows
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClaimRow:
    row_key: str
    claim_id: str
    display_id: str
    requestor: str
    purpose: str
    amount: str
    badge: StatusBadge
    submitted: str
    actions: frozenset[ClaimAction]


def build_claim_row(claim: ClaimSummary, currency: str = DEFAULT_CURRENCY, index: int = 0) -> ClaimRow:
    return ClaimRow(
        row_key=f"{index}_{claim.id or ''}",
        claim_id=claim.id or "",
        display_id=claim.display_id,
        requestor=claim.requestor or "",
        purpose=claim.purpose or "",
        amount=format_currency(claim.amount, currency),
        badge=status_badge(claim.status),
        submitted=format_date(claim.submitted_date, SHORT_DATE) if claim.submitted_date else "-",
        actions=permitted_actions(claim.status),
    )


def build_claim_rows(
    claims: Iterable[ClaimSummary], currency: str = DEFAULT_CURRENCY
) -> list[ClaimRow]:
    """Rows in list order; ``row_key`` stays unique when ids are missing or repeated."""
    return [build_claim_row(claim, currency, index) for index, claim in enumerate(claims)]


# ---------------------------------------------------------------------------
# Detail page
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetailItem:
    label: str
    value: str
    full_width: bool = False


@dataclass(frozen=True)
class DetailSection:
    title: str
    icon: str
    items: tuple[DetailItem, ...]


@dataclass(frozen=True)
class ExpenseRow:
    date: str
    details: str
    mileage_km: str
    transport: str
    accommodation: str
    meals: str
    miscellaneous: str
    other_expenses: str


@dataclass(frozen=True)
class ExchangeRateRow:
    date: str
    currency: str
    selling_rate: str


@dataclass(frozen=True)
class ClaimDetailView:
    claim_id: str
    display_id: str
    status: str
    badge: StatusBadge
    actions: frozenset[ClaimAction]
    header: DetailSection
    bank: DetailSection
    medical: Optional[DetailSection]
    expense_rows: tuple[ExpenseRow, ...]
    exchange_rate_rows: tuple[ExchangeRateRow, ...]
    financial_summary: DetailSection
    declaration: DetailSection
    declaration_statement: str = field(default=DECLARATION_STATEMENT)

    @property
    def subtitle(self) -> str:
        return f"Viewing Claim ID: {self.display_id} - Status: {self.status}"


def _items(*pairs: tuple[str, Any], full_width: tuple[str, ...] = ()) -> tuple[DetailItem, ...]:
    """Build detail items, omitting absent or blank values."""
    items = []
    for label, value in pairs:
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        items.append(DetailItem(label=label, value=str(value), full_width=label in full_width))
    return tuple(items)


def _yes_no(flag: Any) -> str:
    return "Yes" if flag else "No"


def _medical_section(medical: MedicalClaimDetails) -> Optional[DetailSection]:
    if not medical.is_medical_claim:
        return None
    pairs: list[tuple[str, Any]] = [
        ("Medical Claim Type", medical.applicable_medical_type),
        ("Is For Family", _yes_no(medical.is_for_family)),
    ]
    if medical.is_for_family:
        other = medical.family_member_other
        pairs += [
            ("For Spouse", _yes_no(medical.family_member_spouse)),
            ("For Children", _yes_no(medical.family_member_children)),
            ("For Other Family Member", _yes_no(other) if isinstance(other, bool) else other or "No"),
        ]
    return DetailSection("Medical Claim Details", "🩺", _items(*pairs))


def build_detail_view(claim: ClaimDetail, currency: str = DEFAULT_CURRENCY) -> ClaimDetailView:
    """Assemble every section of the detail page for *claim*."""
    header = claim.header_details
    bank = claim.bank_details
    summary = claim.financial_summary

    header_section = DetailSection(
        "Claim Header Information",
        "📄",
        _items(
            ("Document Type", header.document_type),
            ("Document Number", header.document_number),
            ("Claim For Month Of", format_date(header.claim_for_month_of, MONTH_YEAR)),
            ("Staff Name", header.staff_name),
            ("Staff Number", header.staff_no),
            ("Grade", header.gred),
            ("Staff Type", header.staff_type),
            ("Executive Status", header.executive_status),
            ("Department Code", header.department_code),
            ("Department Cost Center", header.dept_cost_center_code),
            ("Location", header.location),
            ("Telephone Extension", header.tel_ext),
            ("Start Time From Home", header.start_time_from_home),
            ("Time of Arrival at Home", header.time_of_arrival_at_home),
        ),
    )

    bank_section = DetailSection(
        "Bank Details",
        "💳",
        _items(
            ("Bank Name", bank.bank_name),
            ("Account Number", bank.account_number),
            ("Purpose of Claim", bank.purpose_of_claim),
            full_width=("Purpose of Claim",),
        ),
    )

    expense_rows = tuple(
        ExpenseRow(
            date=format_date(item.date, SHORT_DATE),
            details=travel_details_text(item.claim_or_travel_details),
            mileage_km=format_number(item.official_mileage_km, 0),
            transport=format_number(item.transport),
            accommodation=format_number(item.hotel_accommodation_allowance),
            meals=format_number(item.out_station_allowance_meal),
            miscellaneous=format_number(item.miscellaneous_allowance_10_percent),
            other_expenses=format_number(item.other_expenses),
        )
        for item in claim.expense_items
    )

    exchange_rate_rows = tuple(
        ExchangeRateRow(
            date=format_date(rate.date, SHORT_DATE),
            currency=rate.type_of_currency or "",
            selling_rate=format_number(rate.selling_rate_ttod, 4),
        )
        for rate in claim.information_on_foreign_exchange_rate
    )

    financial_section = DetailSection(
        "Financial Summary",
        "🏦",
        _items(
            ("Total Advance Claim Amount", format_currency(summary.total_advance_claim_amount, currency)),
            ("Less Advance Taken", format_currency(summary.less_advance_taken, currency)),
            (
                "Less Corporate Credit Card Payment",
                format_currency(summary.less_corporate_credit_card_payment, currency),
            ),
            ("Balance Claim/Repayment", format_currency(summary.balance_claim_repayment, currency)),
        )
        # Receipt number is always listed, even when blank.
        + (DetailItem("Cheque/Receipt No.", summary.cheque_receipt_no or "", full_width=True),),
    )

    declaration_section = DetailSection(
        "Declaration",
        "ℹ️",
        _items(
            ("Declaration Status", "Declared" if claim.declaration.i_declare else "Not Declared"),
            ("Declaration Date", format_date(claim.declaration.date, LONG_DATE)),
        ),
    )

    return ClaimDetailView(
        claim_id=claim.id or "",
        display_id=claim.display_id,
        status=claim.status or "",
        badge=status_badge(claim.status),
        actions=permitted_actions(claim.status),
        header=header_section,
        bank=bank_section,
        medical=_medical_section(claim.medical_claim_details),
        expense_rows=expense_rows,
        exchange_rate_rows=exchange_rate_rows,
        financial_summary=financial_section,
        declaration=declaration_section,
    )
