"""Pydantic models for expense claims.

Attribute names are snake_case; every field's camelCase spelling is its alias.
Records are only ever built by :mod:`claims_portal.core.normalizer` from a
backend payload.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Monetary / numeric inputs: a number, or the raw string the backend sent.
Numeric = Optional[Union[float, str]]


class ClaimModel(BaseModel):
    """Base for every claim record and nested group."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Nested groups
# ---------------------------------------------------------------------------


class HeaderDetails(ClaimModel):
    """Staff / department identifying fields."""

    document_type: Optional[str] = None
    document_number: Optional[str] = None
    claim_for_month_of: Optional[str] = None
    staff_name: Optional[str] = None
    staff_no: Optional[str] = None
    gred: Optional[str] = Field(default=None, description="Staff grade")
    staff_type: Optional[str] = None
    executive_status: Optional[str] = None
    department_code: Optional[str] = None
    dept_cost_center_code: Optional[str] = None
    location: Optional[str] = None
    tel_ext: Optional[str] = None
    start_time_from_home: Optional[str] = None
    time_of_arrival_at_home: Optional[str] = None


class BankDetails(ClaimModel):
    """Payout account and purpose of claim."""

    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    purpose_of_claim: Optional[str] = None


class MedicalClaimDetails(ClaimModel):
    """Present only on medical-type claims."""

    is_medical_claim: bool = False
    applicable_medical_type: Optional[str] = None
    is_for_family: bool = False
    family_member_spouse: bool = False
    family_member_children: bool = False
    family_member_other: Optional[Union[str, bool]] = None


class TravelDetails(ClaimModel):
    """Structured travel / stay descriptor of an expense line."""

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    place_of_stay: Optional[str] = None


class ExpenseItem(ClaimModel):
    """One dated line of the expense table."""

    date: Optional[str] = None
    claim_or_travel_details: Optional[Union[TravelDetails, str]] = None
    official_mileage_km: Numeric = Field(default=None, alias="officialMileageKM")
    transport: Numeric = None
    hotel_accommodation_allowance: Numeric = None
    out_station_allowance_meal: Numeric = None
    miscellaneous_allowance_10_percent: Numeric = Field(
        default=None, alias="miscellaneousAllowance10Percent"
    )
    other_expenses: Numeric = None


class ForeignExchangeRate(ClaimModel):
    """Exchange rate used for a foreign-currency expense."""

    date: Optional[str] = None
    type_of_currency: Optional[str] = None
    selling_rate_ttod: Numeric = Field(default=None, alias="sellingRateTTOD")


class FinancialSummary(ClaimModel):
    """Aggregate totals of the claim."""

    total_advance_claim_amount: Numeric = None
    less_advance_taken: Numeric = None
    less_corporate_credit_card_payment: Numeric = None
    balance_claim_repayment: Numeric = None
    cheque_receipt_no: Optional[str] = None


class Declaration(ClaimModel):
    """Claimant attestation."""

    i_declare: bool = False
    date: Optional[str] = None


# ---------------------------------------------------------------------------
# Claim records
# ---------------------------------------------------------------------------


class ClaimSummary(ClaimModel):
    """List-view projection of a claim."""

    id: Optional[str] = Field(default=None, description="Opaque backend identifier")
    document_number: Optional[str] = Field(
        default=None, description="Human-facing claim number (e.g. TSR-001)"
    )
    requestor: Optional[str] = None
    purpose: Optional[str] = None
    amount: Numeric = Field(default=None, description="Claim total in USD")
    status: Optional[str] = Field(default=None, description="Server-reported status")
    submitted_date: Optional[str] = None
    claim_type: Optional[str] = Field(default=None, alias="type")

    @property
    def display_id(self) -> str:
        """Document number if the backend sent one, otherwise the raw id."""
        return self.document_number or self.id or ""


class ClaimDetail(ClaimSummary):
    """Full claim as shown on the detail page."""

    requestor_name: Optional[str] = None
    header_details: HeaderDetails = Field(default_factory=HeaderDetails)
    bank_details: BankDetails = Field(default_factory=BankDetails)
    medical_claim_details: MedicalClaimDetails = Field(default_factory=MedicalClaimDetails)
    expense_items: list[ExpenseItem] = Field(default_factory=list)
    information_on_foreign_exchange_rate: list[ForeignExchangeRate] = Field(
        default_factory=list
    )
    financial_summary: FinancialSummary = Field(default_factory=FinancialSummary)
    declaration: Declaration = Field(default_factory=Declaration)


class CancelRequest(BaseModel):
    """Body of ``POST /api/claims/{id}/cancel``."""

    comments: str = Field(..., description="Reason recorded with the cancellation")
    cancelled_by: str = Field(..., alias="cancelledBy", description="Display name of the actor")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [{"comments": "Cancelled by user.", "cancelledBy": "Jane Doe"}]
        },
    )
