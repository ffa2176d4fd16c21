"""Custom CSS for the expense-claims Streamlit UI."""

from __future__ import annotations

import html

import streamlit as st

from claims_portal.core.badges import StatusBadge

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------
_PRIMARY = "#1e3a5f"
_ACCENT = "#2980b9"
_GREEN = "#27ae60"
_GREEN_BG = "#eafaf1"
_RED = "#c0392b"
_RED_BG = "#fdedec"
_AMBER = "#b7950b"
_AMBER_BG = "#fef9e7"
_GRAY_LIGHT = "#f5f6fa"
_GRAY_BORDER = "#dcdde1"
_TEXT_DARK = "#2c3e50"
_TEXT_MUTED = "#7f8c8d"


def _badge_rule(name: str, colour: str, background: str) -> str:
    return f"""
.badge-{name} {{
    display: inline-block;
    background: {background};
    color: {colour};
    font-weight: 600;
    padding: 0.15rem 0.7rem;
    border-radius: 20px;
    border: 1px solid {colour};
    font-size: 0.85rem;
    white-space: nowrap;
}}"""


def _build_css() -> str:
    badges = "".join(
        [
            _badge_rule("approved", _GREEN, _GREEN_BG),
            _badge_rule("rejected", _RED, _RED_BG),
            _badge_rule("pending", _AMBER, _AMBER_BG),
            _badge_rule("neutral", _TEXT_MUTED, _GRAY_LIGHT),
        ]
    )
    return f"""
<style>
html, body, [class*="css"] {{
    font-family: 'Segoe UI', 'Roboto', 'Helvetica Neue', sans-serif;
}}

/* ── Page header ─────────────────────────────────────────────────── */
.app-header {{
    background: linear-gradient(135deg, {_PRIMARY} 0%, {_ACCENT} 100%);
    padding: 1.2rem 2rem;
    border-radius: 10px;
    margin-bottom: 1.2rem;
    color: white;
}}
.app-header h1 {{ margin: 0; font-size: 1.7rem; font-weight: 700; }}
.app-header p {{ margin: 0.3rem 0 0 0; opacity: 0.85; font-size: 0.95rem; }}

/* ── Cards ───────────────────────────────────────────────────────── */
.card {{
    background: white;
    border: 1px solid {_GRAY_BORDER};
    border-radius: 10px;
    padding: 1.5rem;
    margin: 1rem 0;
    box-shadow: 0 2px 8px rgba(0, 0, 0, 0.06);
}}
.empty-state {{
    border: 2px dashed {_GRAY_BORDER};
    border-radius: 10px;
    padding: 3rem;
    text-align: center;
    color: {_TEXT_MUTED};
}}

/* ── Detail items ────────────────────────────────────────────────── */
.detail-label {{
    font-size: 0.72rem;
    color: {_TEXT_MUTED};
    text-transform: uppercase;
    letter-spacing: 0.05em;
}}
.detail-value {{ font-size: 0.95rem; color: {_TEXT_DARK}; margin-bottom: 0.6rem; }}

/* ── User menu ───────────────────────────────────────────────────── */
.avatar {{
    width: 2.6rem; height: 2.6rem; border-radius: 50%;
    background: {_PRIMARY}; color: white;
    display: flex; align-items: center; justify-content: center;
    font-weight: 700;
}}

section[data-testid="stSidebar"] {{ background: {_GRAY_LIGHT}; }}

@media print {{
    section[data-testid="stSidebar"], .stButton, .stLinkButton {{ display: none !important; }}
}}
{badges}
</style>
"""


_GLOBAL_CSS = _build_css()


def inject_global_styles() -> None:
    """Inject the global CSS into the Streamlit page."""
    st.markdown(_GLOBAL_CSS, unsafe_allow_html=True)


def render_header(title: str, subtitle: str) -> None:
    st.markdown(
        f"""
        <div class="app-header">
            <h1>{html.escape(title)}</h1>
            <p>{html.escape(subtitle)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def badge_html(badge: StatusBadge) -> str:
    return f'<span class="{badge.css_class}">{badge.icon} {html.escape(badge.label)}</span>'
