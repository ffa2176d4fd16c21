"""Query-parameter routing between the list and detail views.

``?claim=<id>`` shows the detail view; no parameter shows the list.
"""

from __future__ import annotations

import streamlit as st

CLAIM_PARAM = "claim"
CONFIRM_PARAM = "confirm"


def current_claim_id() -> str | None:
    return st.query_params.get(CLAIM_PARAM) or None


def open_claim(claim_id: str, *, confirm_cancel: bool = False) -> None:
    st.query_params.clear()
    st.query_params[CLAIM_PARAM] = claim_id
    if confirm_cancel:
        st.query_params[CONFIRM_PARAM] = "cancel"
    # The list is fetched again when the user comes back.
    st.session_state.pop("list_state", None)
    st.rerun()


def back_to_list() -> None:
    st.query_params.clear()
    st.session_state.pop("detail_state", None)
    st.rerun()


def pop_cancel_confirmation() -> bool:
    """``True`` once if the list view asked for the cancel dialog."""
    if st.query_params.get(CONFIRM_PARAM) == "cancel":
        del st.query_params[CONFIRM_PARAM]
        return True
    return False
