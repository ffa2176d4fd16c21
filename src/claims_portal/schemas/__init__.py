"""Pydantic schemas for expense claim records."""

from claims_portal.schemas.claim import (
    BankDetails,
    CancelRequest,
    ClaimDetail,
    ClaimSummary,
    Declaration,
    ExpenseItem,
    FinancialSummary,
    ForeignExchangeRate,
    HeaderDetails,
    MedicalClaimDetails,
    TravelDetails,
)

__all__ = [
    "ClaimSummary",
    "ClaimDetail",
    "CancelRequest",
    "HeaderDetails",
    "BankDetails",
    "MedicalClaimDetails",
    "TravelDetails",
    "ExpenseItem",
    "ForeignExchangeRate",
    "FinancialSummary",
    "Declaration",
]
