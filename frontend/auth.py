# frontend/auth.py
from __future__ import annotations

import os
import json
import logging
from typing import Optional, Dict, Any

import streamlit as st

from frontend import api, config

logger = logging.getLogger("jurisight.auth")

# ---------------- Session keys ----------------
TOKEN_KEY = "js_token"          # bearer token for the API
USER_KEY  = "js_user"           # user dict as returned by login/register
MODE_KEY  = "auth_mode"         # "Sign in" | "Create account"

MODES = ["Sign in", "Create account"]


# ---------------- Local token store ----------------
# Plays the role localStorage had in the browser build.
def _persist_auth(token: str, user: Optional[Dict[str, Any]]) -> None:
    data = {"token": token, "user": user}
    try:
        with open(config.AUTH_PATH, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as e:
        logger.warning("Could not persist auth to %s: %s", config.AUTH_PATH, e)


def _load_persisted_auth() -> Optional[Dict[str, Any]]:
    try:
        if os.path.exists(config.AUTH_PATH):
            with open(config.AUTH_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict) and data.get("token"):
                return data
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable auth file %s: %s", config.AUTH_PATH, e)
    return None


def _clear_persisted_auth() -> None:
    try:
        if os.path.exists(config.AUTH_PATH):
            os.remove(config.AUTH_PATH)
    except OSError as e:
        logger.warning("Could not remove auth file %s: %s", config.AUTH_PATH, e)


# ---------------- Session helpers ----------------
def bootstrap_session() -> None:
    """Restore token + user from disk once per browser session."""
    if TOKEN_KEY in st.session_state:
        return
    saved = _load_persisted_auth() or {}
    st.session_state[TOKEN_KEY] = saved.get("token") or ""
    st.session_state[USER_KEY] = saved.get("user")


def save_auth(token: str, user: Optional[Dict[str, Any]]) -> None:
    st.session_state[TOKEN_KEY] = token
    st.session_state[USER_KEY] = user
    _persist_auth(token, user)


def logout() -> None:
    st.session_state[TOKEN_KEY] = ""
    st.session_state[USER_KEY] = None
    _clear_persisted_auth()


def get_token() -> str:
    return st.session_state.get(TOKEN_KEY) or ""


def get_user() -> Optional[Dict[str, Any]]:
    return st.session_state.get(USER_KEY)


# ---------------- Auth view ----------------
def render_auth_view() -> None:
    """
    Sign-in / create-account screen. On success the auth store is filled
    and the script reruns into the dashboard.
    """
    st.markdown(
        """
        <div class="js-hero">
          <h1>🛡️ JuriSight</h1>
          <div class="sub">AI legal analysis, simplified</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    mode = st.radio("Mode", MODES, key=MODE_KEY, horizontal=True, label_visibility="collapsed")
    is_login = mode == MODES[0]

    name = ""
    if not is_login:
        name = st.text_input("Full Name", key="auth_name")
    email = st.text_input("Email", key="auth_email")
    password = st.text_input("Password", key="auth_password", type="password")

    ready = bool(email and password and (is_login or name))
    if st.button(mode, key="auth_submit", type="primary", use_container_width=True, disabled=not ready):
        try:
            with st.spinner("Signing in…" if is_login else "Creating account…"):
                data = api.login(email, password) if is_login else api.register(name, email, password)
        except api.ApiError as e:
            st.error(f"⚠️ {e}")
            return
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            st.error("⚠️ The server did not return an access token.")
            return
        save_auth(token, data.get("user"))
        logger.info("Signed in as %s", (data.get("user") or {}).get("email", email))
        st.rerun()
