# frontend/toasts.py
from __future__ import annotations

import uuid
from typing import Optional

import streamlit as st

TOASTS_KEY = "toasts"


def _queue() -> list[dict]:
    return st.session_state.setdefault(TOASTS_KEY, [])


def push_toast(title: str, description: Optional[str] = None) -> str:
    """Queue a toast; it survives st.rerun() and shows on the next render."""
    tid = uuid.uuid4().hex[:10]
    _queue().append({"id": tid, "title": title, "description": description})
    return tid


def dismiss(tid: str) -> None:
    st.session_state[TOASTS_KEY] = [t for t in _queue() if t["id"] != tid]


def render_toasts() -> None:
    for t in list(_queue()):
        body = f"**{t['title']}**"
        if t.get("description"):
            body += f"  \n{t['description']}"
        st.toast(body)
        dismiss(t["id"])
