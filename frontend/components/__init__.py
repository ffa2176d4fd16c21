"""Streamlit frontend components."""

from components.claim_detail import render_claim_detail_page
from components.claims_table import render_claims_page
from components.user_nav import render_user_nav

__all__ = ["render_claims_page", "render_claim_detail_page", "render_user_nav"]
