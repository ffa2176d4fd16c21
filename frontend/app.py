"""Streamlit frontend: Expense Claims.

Run with::

    streamlit run frontend/app.py --server.port 8501

The claims backend is configured by ``api.base_url`` in ``conf/config.yaml``
(or the ``CLAIMS_API_BASE_URL`` env-var).  ``python -m claims_portal.main``
starts a development backend with sample data.
"""

from __future__ import annotations

import streamlit as st
from components import render_claim_detail_page, render_claims_page, render_user_nav
from navigation import current_claim_id
from omegaconf import DictConfig
from styles import inject_global_styles

from claims_portal.client.api_client import ClaimsAPIClient
from claims_portal.config import load_config
from claims_portal.logging.setup import setup_logging
from claims_portal.services.identity import PlaceholderIdentityProvider

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Expense Claims",
    page_icon="🧾",
    layout="wide",
    initial_sidebar_state="expanded",
)

inject_global_styles()

# ---------------------------------------------------------------------------
# Config, logging, collaborators (built once per server process)
# ---------------------------------------------------------------------------


@st.cache_resource
def _config() -> DictConfig:
    cfg = load_config()
    setup_logging(cfg.logging, component="frontend")
    return cfg


@st.cache_resource
def _client(base_url: str, timeout: float | None) -> ClaimsAPIClient:
    return ClaimsAPIClient(base_url=base_url, timeout=timeout)


cfg = _config()
client = _client(cfg.api.base_url, cfg.api.timeout)
identity = PlaceholderIdentityProvider.from_config(cfg.ui.identity)

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    render_user_nav(identity, cfg.ui)
    st.divider()
    st.caption(f"Backend: `{client.base_url}`")

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

claim_id = current_claim_id()
if claim_id:
    render_claim_detail_page(client, cfg.ui, claim_id)
else:
    render_claims_page(client, cfg.ui)
