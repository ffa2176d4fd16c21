"""Claims list page: filter bar, claims table and per-row actions."""

from __future__ import annotations

from typing import Any

import streamlit as st
from components.filter_bar import render_filter_bar
from navigation import open_claim
from styles import badge_html

from claims_portal.client.api_client import ClaimsAPIClient
from claims_portal.core.filters import filter_claims
from claims_portal.core.lifecycle import ClaimAction
from claims_portal.core.presentation import ClaimRow, build_claim_rows
from claims_portal.services.claims import ClaimsListState, load_claims_list

_COLUMNS = [1.2, 2.4, 1.2, 1.6, 1.2, 2.4]
_HEADERS = ["Claim ID", "Purpose", "Amount", "Status", "Submitted Date", "Actions"]


def render_claims_page(client: ClaimsAPIClient, ui_cfg: Any) -> None:
    """Render the list view.

    The list is fetched once per visit and kept in session state; filtering
    happens over that in-memory copy.
    """
    head_left, head_right = st.columns([4, 1])
    with head_left:
        st.markdown("## 🧾 Expense Claims")
    with head_right:
        st.link_button("➕ Submit New Claim", ui_cfg.new_claim_url, use_container_width=True)

    search_term, status, claim_type = render_filter_bar()

    if "list_state" not in st.session_state:
        with st.spinner("Loading claims…"):
            st.session_state.list_state = load_claims_list(client)
    state: ClaimsListState = st.session_state.list_state

    st.markdown("### My Claims")
    st.caption("List of your submitted expense claims and their current status.")

    if st.button("🔄 Refresh", key="btn_refresh"):
        st.session_state.pop("list_state", None)
        st.rerun()

    if state.error:
        st.error(f"Error: {state.error}")
        return

    visible = filter_claims(state.claims, search_term, status, claim_type)
    if not visible:
        st.markdown(
            """
            <div class="empty-state">
                <h3>No claims found.</h3>
                <p>Click "Submit New Claim" to get started.</p>
            </div>
            """,
            unsafe_allow_html=True,
        )
        return

    _render_table(build_claim_rows(visible, ui_cfg.currency), ui_cfg)


def _render_table(rows: list[ClaimRow], ui_cfg: Any) -> None:
    header = st.columns(_COLUMNS)
    for col, title in zip(header, _HEADERS):
        col.markdown(f"**{title}**")
    st.divider()

    for row in rows:
        cols = st.columns(_COLUMNS)
        cols[0].markdown(f"**{row.display_id}**")
        cols[1].write(row.purpose)
        cols[2].write(row.amount)
        cols[3].markdown(badge_html(row.badge), unsafe_allow_html=True)
        cols[4].write(row.submitted)
        with cols[5]:
            _render_row_actions(row, ui_cfg)


def _render_row_actions(row: ClaimRow, ui_cfg: Any) -> None:
    view, edit, cancel = st.columns(3)
    if view.button("📄 View", key=f"view_{row.row_key}"):
        open_claim(row.claim_id)
    if ClaimAction.EDIT in row.actions:
        edit.link_button("✏️ Edit", ui_cfg.edit_url_template.format(claim_id=row.claim_id))
    if ClaimAction.CANCEL in row.actions:
        if cancel.button("🚫 Cancel", key=f"cancel_{row.row_key}"):
            open_claim(row.claim_id, confirm_cancel=True)
