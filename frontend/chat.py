# frontend/chat.py
from __future__ import annotations

import streamlit as st

from frontend import api

MESSAGES_KEY = "chat_messages"
EMPTY_HINT = "Try /summarize, /compare, /find, /risk"


def send_message(token: str, text: str) -> dict | None:
    """Ask the API and append one turn; blank input is ignored."""
    if not text or not text.strip():
        return None
    try:
        res = api.send_chat(token, text)
        if not isinstance(res, dict):
            res = {"answer": str(res)}
        turn = {"q": text, "a": res.get("answer", ""), "sources": res.get("sources") or []}
    except api.ApiError as e:
        turn = {"q": text, "a": f"Error: {e}", "sources": []}
    st.session_state.setdefault(MESSAGES_KEY, []).append(turn)
    return turn


def source_label(source: dict) -> str:
    try:
        score = float(source.get("score") or 0)
    except (TypeError, ValueError):
        score = 0.0
    return f"{source.get('filename', 'Source')} • Confidence {score:.2f}"


def render_chat_panel(token: str) -> None:
    prompt = st.chat_input("Type a message or /command…", key="chat_input")
    if prompt:
        with st.spinner("Thinking…"):
            send_message(token, prompt)

    messages = st.session_state.get(MESSAGES_KEY) or []
    if not messages:
        st.caption(EMPTY_HINT)

    for m in messages:
        with st.chat_message("user"):
            st.markdown(m["q"])
        with st.chat_message("assistant"):
            st.markdown(m["a"])
            for s in m.get("sources") or []:
                with st.expander(source_label(s)):
                    st.caption(s.get("snippet") or "Relevant clause snippet…")
