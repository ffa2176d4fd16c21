"""Safe display formatting for numbers, money, dates and names.

None of these functions raise: bad input degrades to a placeholder string.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional

import pandas as pd

from claims_portal.schemas.claim import TravelDetails

# strftime patterns
SHORT_DATE = "%d %b %Y"  # 05 Jan 2024
MONTH_YEAR = "%B %Y"  # January 2024
LONG_DATE = "%d %B %Y"  # 05 January 2024

DEFAULT_CURRENCY = "USD"


def format_number(value: Any, digits: int = 2) -> str:
    """Format *value* with thousands separators and exactly *digits* decimals.

    ``None`` or a blank string formats as zero; a non-numeric string is
    returned unchanged.
    """
    if value is None or str(value).strip() == "":
        return f"{0:.{digits}f}"
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isnan(number) or math.isinf(number):
        return str(value)
    return f"{number:,.{digits}f}"


def format_currency(value: Any, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency} {format_number(value)}"


def format_date(value: Any, fmt: str = LONG_DATE) -> str:
    """Format a date-like *value*.

    Returns ``"N/A"`` when the value is absent and ``"Invalid Date"`` when it
    cannot be parsed.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return "N/A"
    if not isinstance(value, (str, date, datetime, int, float)):
        return "Invalid Date"
    try:
        parsed = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return "Invalid Date"
    if pd.isna(parsed):
        return "Invalid Date"
    return parsed.strftime(fmt)


def travel_details_text(details: Any) -> str:
    """Render an expense line's travel descriptor.

    Structured details join their non-empty parts with ``" - "``.
    """
    if isinstance(details, TravelDetails):
        parts = [details.from_, details.to, details.place_of_stay]
        return " - ".join(part for part in parts if part)
    if isinstance(details, str):
        return details
    return ""


def initials(name: Optional[str]) -> str:
    """Avatar initials, e.g. ``"Admin User"`` → ``"AU"``."""
    if not name:
        return "U"
    return "".join(part[0] for part in name.split(" ") if part).upper()
