# frontend/prefs.py
from __future__ import annotations

import os
import json
import logging

import streamlit as st

from frontend import config

logger = logging.getLogger("jurisight.prefs")

PREFS_KEY = "prefs"


# =============================================================================
# Prefs (local JSON)
# =============================================================================
def _load_prefs() -> dict:
    try:
        if os.path.exists(config.PREFS_PATH):
            with open(config.PREFS_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable prefs file %s: %s", config.PREFS_PATH, e)
    return {}


def _save_prefs(prefs: dict) -> None:
    try:
        with open(config.PREFS_PATH, "w", encoding="utf-8") as f:
            json.dump(prefs, f, indent=2)
    except OSError as e:
        logger.warning("Could not save prefs to %s: %s", config.PREFS_PATH, e)


def _prefs() -> dict:
    if PREFS_KEY not in st.session_state:
        st.session_state[PREFS_KEY] = {"theme_dark": True, **_load_prefs()}
    return st.session_state[PREFS_KEY]


def is_dark() -> bool:
    return bool(_prefs().get("theme_dark", True))


def set_dark(dark: bool) -> None:
    prefs = _prefs()
    prefs["theme_dark"] = bool(dark)
    _save_prefs(prefs)


# =============================================================================
# Theme CSS
# =============================================================================
_PALETTE = {
    True:  {"bg": "#020617", "panel": "#0f172a", "border": "#1e293b", "text": "#f1f5f9", "muted": "#94a3b8"},
    False: {"bg": "#f8fafc", "panel": "#ffffff", "border": "#e2e8f0", "text": "#0f172a", "muted": "#64748b"},
}


def apply_theme() -> None:
    c = _PALETTE[is_dark()]
    st.markdown(f"""
<style>
[data-testid="stAppViewContainer"], [data-testid="stHeader"] {{ background: {c['bg']}; color: {c['text']}; }}
[data-testid="stSidebar"] {{ background: {c['panel']}; border-right: 1px solid {c['border']}; }}
[data-testid="stAppViewContainer"] p, [data-testid="stAppViewContainer"] label,
[data-testid="stAppViewContainer"] h1, [data-testid="stAppViewContainer"] h2,
[data-testid="stAppViewContainer"] h3 {{ color: {c['text']}; }}
.js-hero {{ text-align: center; margin: 6px 0 14px 0; }}
.js-hero h1 {{ margin: 0; font-size: 2.1rem; }}
.js-hero .sub {{ color: {c['muted']}; margin-top: 4px; }}
.js-card {{ padding: 12px 14px; border-radius: 12px; background: {c['panel']}; border: 1px solid {c['border']}; }}
.js-muted {{ color: {c['muted']}; font-size: 0.8rem; }}
.js-added {{ background: #dcfce7; color: #166534; padding: 0 4px; border-radius: 4px; margin-right: 4px; }}
.js-removed {{ background: #fee2e2; color: #991b1b; padding: 0 4px; border-radius: 4px; margin-right: 4px; text-decoration: line-through; }}
.js-note {{ background: #fffbeb; color: #b45309; padding: 0 4px; border-radius: 4px; display: inline-block; margin-top: 8px; }}
</style>
""", unsafe_allow_html=True)
