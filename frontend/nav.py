# frontend/nav.py
from __future__ import annotations

import streamlit as st

# (id, label, icon) in sidebar order
TABS = [
    ("dashboard", "Dashboard", "🏠"),
    ("upload",    "Upload",    "📤"),
    ("documents", "Documents", "📄"),
    ("compare",   "Compare",   "⚖️"),
    ("chat",      "Chat",      "💬"),
    ("analytics", "Analytics", "📊"),
]
TAB_IDS = [t[0] for t in TABS]
DEFAULT_TAB = TAB_IDS[0]
TAB_KEY = "tab"


def _norm(x) -> str:
    return x if x in TAB_IDS else DEFAULT_TAB


def current_tab() -> str:
    # Source of truth = ?tab=..., falling back to session state
    qp = st.query_params.get(TAB_KEY)
    active = _norm(qp or st.session_state.get(TAB_KEY, DEFAULT_TAB))
    st.session_state[TAB_KEY] = active
    return active


def set_tab(name: str) -> None:
    # keep tab without triggering a rerun (safe inside on_click callbacks)
    name = _norm(name)
    st.session_state[TAB_KEY] = name
    st.query_params[TAB_KEY] = name


def jump_tab(name: str) -> None:
    set_tab(name)
    st.rerun()
