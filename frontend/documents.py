# frontend/documents.py
from __future__ import annotations

import logging

import streamlit as st

from frontend import api

logger = logging.getLogger("jurisight.documents")

DOCS_KEY = "docs"
LOADING_KEY = "docs_loading"
LOADED_FOR_KEY = "docs_loaded_for"
SUMMARY_KEY = "doc_summary"


def size_kb(n) -> int:
    return int((n or 0) / 1024 + 0.5)


# =============================================================================
# Shared document list (dashboard, documents, compare)
# =============================================================================
def get_documents() -> list[dict]:
    return st.session_state.get(DOCS_KEY) or []


def refresh_documents(token: str) -> None:
    """Reload the list; on failure the previous list stays in place."""
    if not token:
        return
    st.session_state[LOADING_KEY] = True
    try:
        st.session_state[DOCS_KEY] = api.list_documents(token)
    except api.ApiError as e:
        logger.warning("Could not refresh documents: %s", e)
    finally:
        st.session_state[LOADING_KEY] = False
        st.session_state[LOADED_FOR_KEY] = token


def ensure_documents(token: str) -> None:
    # refresh once per token (i.e. right after sign-in)
    if st.session_state.get(LOADED_FOR_KEY) != token:
        with st.spinner("Loading documents…"):
            refresh_documents(token)


def summarize(token: str, document_id: str) -> str:
    st.session_state[SUMMARY_KEY] = ""
    try:
        summary = api.summarize_document(token, document_id)
    except api.ApiError as e:
        summary = f"Error: {e}"
    st.session_state[SUMMARY_KEY] = summary
    return summary


# =============================================================================
# Panel
# =============================================================================
def _mark_loading() -> None:
    st.session_state[LOADING_KEY] = True


def render_documents_panel(token: str) -> None:
    head, action = st.columns([5, 1])
    head.markdown("#### Your documents")
    action.button("Refresh", key="docs_refresh", on_click=_mark_loading, use_container_width=True)

    # set by Refresh (or a refresh cut short by a rerun); cleared by refresh_documents
    if st.session_state.get(LOADING_KEY):
        with st.spinner("Loading documents…"):
            refresh_documents(token)

    docs = get_documents()
    if not docs:
        st.caption("No documents yet.")
    else:
        cols = st.columns(2)
        for i, d in enumerate(docs):
            with cols[i % 2]:
                with st.container(border=True):
                    st.markdown(f"**{d.get('filename', '(untitled)')}**")
                    st.caption(f"{size_kb(d.get('size'))} KB • {d.get('status', '')}")
                    if st.button("Summarize", key=f"summarize_{d.get('id')}"):
                        with st.spinner("Summarizing…"):
                            summarize(token, d.get("id"))

    summary = st.session_state.get(SUMMARY_KEY)
    if summary:
        with st.container(border=True):
            st.markdown("**AI Summary**")
            st.text(summary)
