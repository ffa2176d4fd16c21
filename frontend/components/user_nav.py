"""User menu: avatar, identity details, profile links and log-out."""

from __future__ import annotations

import html
from typing import Any

import streamlit as st

from claims_portal.services.identity import IdentityProvider


def render_user_nav(provider: IdentityProvider, ui_cfg: Any) -> None:
    """Render the signed-in user's menu in the sidebar."""
    user = provider.current_user()

    avatar, details = st.columns([1, 3])
    avatar.markdown(f'<div class="avatar">{html.escape(user.initials)}</div>', unsafe_allow_html=True)
    with details:
        st.markdown(f"**{user.display_name or 'User'}**")
        if user.email:
            st.caption(user.email)
        if user.role:
            st.caption(f"Role: {user.role}")

    with st.expander("Account", expanded=False):
        st.markdown(f"👤 [Profile]({ui_cfg.profile_url})")
        st.markdown(f"⚙️ [Settings]({ui_cfg.settings_url})")
        if st.button("🚪 Log out", key="btn_logout", use_container_width=True):
            target = provider.sign_out(ui_cfg.logout_redirect)
            st.session_state.clear()
            st.query_params.clear()
            st.markdown(
                f'<meta http-equiv="refresh" content="0; url={html.escape(target)}">',
                unsafe_allow_html=True,
            )
            st.info(f"Signed out. Redirecting to {target}…")
            st.stop()
