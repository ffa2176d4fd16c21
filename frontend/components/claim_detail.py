"""Claim detail page: every claim section plus edit / cancel / print actions."""

from __future__ import annotations

import html
from typing import Any

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components
from navigation import back_to_list, pop_cancel_confirmation
from styles import badge_html

from claims_portal.client.api_client import ClaimsAPIClient
from claims_portal.core.presentation import ClaimDetailView, DetailSection, build_detail_view
from claims_portal.services.claims import (
    ClaimDetailState,
    DetailStatus,
    cancel_claim,
    load_claim_detail,
)


def render_claim_detail_page(client: ClaimsAPIClient, ui_cfg: Any, claim_id: str) -> None:
    """Render the detail view for *claim_id*.

    The loaded state lives in ``st.session_state.detail_state`` so a
    cancellation's returned record survives the rerun.
    """
    state: ClaimDetailState | None = st.session_state.get("detail_state")
    if state is None or state.claim_id != claim_id:
        with st.spinner("Loading Claim Details…"):
            state = load_claim_detail(client, claim_id)
        st.session_state.detail_state = state

    _show_pending_toast()

    if state.view_status is DetailStatus.ERROR:
        _render_message_card("❌ Error Loading Claim", state.error or "")
        return
    if state.view_status is DetailStatus.NOT_FOUND:
        _render_message_card(
            "Claim Not Found",
            f"The requested Claim (ID: {claim_id}) could not be found or loaded.",
        )
        return

    view = build_detail_view(state.claim, ui_cfg.currency)
    _render_title(view)
    _render_actions(client, ui_cfg, state)

    _render_section(view.header)
    _render_section(view.bank)
    if view.medical is not None:
        _render_section(view.medical)
    if view.expense_rows:
        _render_expense_items(view)
    if view.exchange_rate_rows:
        _render_exchange_rates(view)
    _render_section(view.financial_summary)
    _render_section(view.declaration)
    st.caption("**Declaration Statement:** " + view.declaration_statement)


# ---------------------------------------------------------------------------
# Header / actions
# ---------------------------------------------------------------------------


def _render_title(view: ClaimDetailView) -> None:
    st.markdown("## 🧾 Expense Claim Details")
    st.markdown(
        f"Viewing Claim ID: **{html.escape(view.display_id)}** &nbsp; {badge_html(view.badge)}",
        unsafe_allow_html=True,
    )


def _render_actions(client: ClaimsAPIClient, ui_cfg: Any, state: ClaimDetailState) -> None:
    back, edit, cancel, print_ = st.columns(4)

    if back.button("⬅️ Back", use_container_width=True):
        back_to_list()

    if state.can_edit:
        edit.link_button(
            "✏️ Edit Claim",
            ui_cfg.edit_url_template.format(claim_id=state.claim_id),
            use_container_width=True,
        )

    if state.can_cancel:
        if cancel.button(
            "🚫 Cancel Claim",
            type="primary",
            disabled=not state.cancel_enabled,
            use_container_width=True,
        ):
            _confirm_cancel_dialog(client, ui_cfg, state)
        elif pop_cancel_confirmation():
            _confirm_cancel_dialog(client, ui_cfg, state)

    if print_.button("🖨️ Print / Save as PDF", use_container_width=True):
        components.html("<script>window.parent.print();</script>", height=0)


@st.dialog("Confirm Cancellation")
def _confirm_cancel_dialog(client: ClaimsAPIClient, ui_cfg: Any, state: ClaimDetailState) -> None:
    st.write(
        f"Are you sure you want to cancel Claim {state.claim_id}? This action cannot be undone."
    )
    go_back, confirm = st.columns(2)
    if go_back.button("Back", disabled=state.action_pending, use_container_width=True):
        st.rerun()
    if confirm.button(
        "Confirm Cancel",
        type="primary",
        disabled=state.action_pending,
        use_container_width=True,
    ):
        with st.spinner("Cancelling…"):
            notification = cancel_claim(
                client,
                state,
                comments=ui_cfg.cancel_comment,
                fallback_actor=ui_cfg.cancel_actor_fallback,
            )
        st.session_state.pending_toast = notification
        st.rerun()


def _show_pending_toast() -> None:
    notification = st.session_state.pop("pending_toast", None)
    if notification is None:
        return
    icon = "🚫" if notification.is_error else "✅"
    st.toast(f"**{notification.title}**  \n{notification.description}", icon=icon)
    if notification.is_error:
        st.error(f"{notification.title}: {notification.description}")


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _render_message_card(title: str, message: str) -> None:
    st.markdown(
        f"""
        <div class="card" style="text-align:center;">
            <h3>{html.escape(title)}</h3>
            <p>{html.escape(message)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if st.button("⬅️ Go Back"):
        back_to_list()


def _render_section(section: DetailSection) -> None:
    st.markdown(f"#### {section.icon} {section.title}")
    columns = st.columns(2)
    slot = 0
    for item in section.items:
        target = st.container() if item.full_width else columns[slot % 2]
        target.markdown(
            f'<div class="detail-label">{html.escape(item.label)}</div>'
            f'<div class="detail-value">{html.escape(item.value) or "&nbsp;"}</div>',
            unsafe_allow_html=True,
        )
        if not item.full_width:
            slot += 1
    st.divider()


def _render_expense_items(view: ClaimDetailView) -> None:
    st.markdown("#### 💵 Expense Items")
    frame = pd.DataFrame(
        [
            {
                "Date": row.date,
                "Details": row.details,
                "Mileage (KM)": row.mileage_km,
                "Transport": row.transport,
                "Hotel/Accommodation": row.accommodation,
                "Meals": row.meals,
                "Misc. (10%)": row.miscellaneous,
                "Other Expenses": row.other_expenses,
            }
            for row in view.expense_rows
        ]
    )
    st.dataframe(frame, hide_index=True, use_container_width=True)
    st.divider()


def _render_exchange_rates(view: ClaimDetailView) -> None:
    st.markdown("#### 📅 Foreign Exchange Rates")
    frame = pd.DataFrame(
        [
            {"Date": row.date, "Currency": row.currency, "Selling Rate (TT/OD)": row.selling_rate}
            for row in view.exchange_rate_rows
        ]
    )
    st.dataframe(frame, hide_index=True, use_container_width=True)
    st.divider()
