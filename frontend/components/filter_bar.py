"""Search / status / type filter controls for the claims list."""

from __future__ import annotations

import streamlit as st

from claims_portal.core.filters import STATUS_FILTER_OPTIONS, TYPE_FILTER_OPTIONS


def render_filter_bar() -> tuple[str, str, str]:
    """Render the filter bar and return ``(search_term, status, claim_type)``."""
    col_search, col_status, col_type = st.columns([3, 1, 1])

    with col_search:
        search_term = st.text_input(
            "Search",
            placeholder="Search by Claimant, TSR ID, Purpose...",
            key="filter_search",
            label_visibility="collapsed",
        )
    with col_status:
        status = st.selectbox(
            "Status",
            options=list(STATUS_FILTER_OPTIONS),
            format_func=STATUS_FILTER_OPTIONS.get,
            key="filter_status",
            label_visibility="collapsed",
        )
    with col_type:
        claim_type = st.selectbox(
            "Claim type",
            options=list(TYPE_FILTER_OPTIONS),
            format_func=TYPE_FILTER_OPTIONS.get,
            key="filter_type",
            label_visibility="collapsed",
        )

    return search_term.strip(), status, claim_type
