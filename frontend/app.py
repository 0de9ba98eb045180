# =============================================================================
# JuriSight — Streamlit Frontend
# =============================================================================
from __future__ import annotations

# ---- MUST be the first Streamlit call ----
import streamlit as st
st.set_page_config(page_title="JuriSight", page_icon="🛡️", layout="wide")

# ---- Imports ----------------------------------------------------------------
from frontend import api, auth, config, nav, prefs, toasts
from frontend.chat import render_chat_panel
from frontend.compare import render_compare_panel
from frontend.dashboard import render_overview
from frontend.documents import ensure_documents, get_documents, render_documents_panel
from frontend.palette import command_palette
from frontend.upload import render_upload_panel

config.configure_logging()
prefs.apply_theme()

# =============================================================================
# Auth Bootstrap & Gate
# =============================================================================
auth.bootstrap_session()
token = auth.get_token()

if not token:
    auth.render_auth_view()
    st.stop()

ensure_documents(token)
toasts.render_toasts()

WORKSPACES = ["Default Workspace", "Compliance", "M&A", "Litigation", "New Workspace"]


@st.cache_data(ttl=30)  # ping at most once every 30s
def _api_health(base: str) -> bool:
    return api.health()


def _toggle_theme() -> None:
    prefs.set_dark(st.session_state["theme_dark_toggle"])


# =============================================================================
# Sidebar
# =============================================================================
active = nav.current_tab()

with st.sidebar:
    st.markdown("### 🛡️ JuriSight")
    for tab_id, label, icon in nav.TABS:
        st.button(
            f"{icon}  {label}",
            key=f"nav_{tab_id}",
            type="primary" if tab_id == active else "secondary",
            use_container_width=True,
            on_click=nav.set_tab,
            args=(tab_id,),
        )
    st.divider()
    st.caption("🟢 API online" if _api_health(config.API_BASE) else "🔴 API offline")

# =============================================================================
# Header
# =============================================================================
user = auth.get_user() or {}
h_ws, h_search, h_theme, h_account = st.columns([2, 3, 1, 1], vertical_alignment="center")

with h_ws:
    st.selectbox("Workspace", WORKSPACES, key="workspace", label_visibility="collapsed")

with h_search:
    if st.button("🔍  Ask or search…", key="open_palette", use_container_width=True):
        command_palette()

with h_theme:
    st.toggle("Dark", value=prefs.is_dark(), key="theme_dark_toggle", on_change=_toggle_theme)

with h_account:
    with st.popover(f"👤 {user.get('name') or 'Partner'}", use_container_width=True):
        st.markdown("**Profile**")
        st.caption(f"{user.get('name', '')}  \n{user.get('email', '')}")
        st.markdown("**Settings**")
        st.caption(f"API: {config.API_BASE}")
        st.divider()
        if st.button("Logout", key="logout_btn", use_container_width=True):
            auth.logout()
            # drop per-user panel state (docs, chat, compare, uploads)
            keep = {auth.TOKEN_KEY, auth.USER_KEY, prefs.PREFS_KEY}
            for k in [k for k in st.session_state if k not in keep]:
                del st.session_state[k]
            st.rerun()

# =============================================================================
# Router
# =============================================================================
if active in ("dashboard", "analytics"):
    render_overview(get_documents())
else:
    with st.container(border=True):
        if active == "upload":
            render_upload_panel(token)
        elif active == "documents":
            render_documents_panel(token)
        elif active == "compare":
            render_compare_panel(token)
        elif active == "chat":
            render_chat_panel(token)
