# frontend/compare.py
from __future__ import annotations

import html

import streamlit as st

from frontend import api
from frontend.documents import get_documents

MODES = ["side", "overlay", "summary"]
MODE_KEY = "compare_mode"
RESULT_KEY = "compare_result"


def run_compare(token: str, left_id: str, right_id: str) -> dict:
    st.session_state[RESULT_KEY] = None
    try:
        res = api.compare_documents(token, left_id, right_id)
        if not isinstance(res, dict):
            res = {"error": "Unexpected response from server."}
    except api.ApiError as e:
        res = {"error": str(e)}
    st.session_state[RESULT_KEY] = res
    return res


def confidence_pct(result: dict) -> int:
    try:
        pct = int(float(result.get("confidence") or 0) * 100 + 0.5)
    except (TypeError, ValueError):
        pct = 0
    return max(0, min(100, pct))


def _render_side(result: dict) -> None:
    left, right = st.columns(2)
    with left:
        with st.container(border=True, height=260):
            st.write(result.get("left_text") or "Left text…")
    with right:
        with st.container(border=True, height=260):
            st.write(result.get("right_text") or "Right text…")


def _render_overlay(result: dict) -> None:
    added = "".join(f"<span class='js-added'>{html.escape(str(t))}</span>" for t in result.get("added") or [])
    removed = "".join(f"<span class='js-removed'>{html.escape(str(t))}</span>" for t in result.get("removed") or [])
    with st.container(border=True, height=260):
        st.markdown(
            f"<div>{added}{removed}</div><div class='js-note'>Modified segments highlighted</div>",
            unsafe_allow_html=True,
        )


def _render_summary(result: dict) -> None:
    c1, c2, c3 = st.columns(3)
    for col, title, key in ((c1, "ADDED", "added"), (c2, "REMOVED", "removed")):
        with col:
            with st.container(border=True):
                st.caption(title)
                items = result.get(key) or []
                if items:
                    st.markdown("\n".join(f"- {t}" for t in items))
    with c3:
        with st.container(border=True):
            st.caption("CONFIDENCE")
            pct = confidence_pct(result)
            st.progress(pct, text=f"{pct}%")


def render_compare_panel(token: str) -> None:
    docs = get_documents()
    names = {d.get("id"): d.get("filename", "(untitled)") for d in docs}
    options = [""] + list(names)

    def _label(doc_id):
        return names.get(doc_id, "Select…") if doc_id else "Select…"

    c_left, c_right, c_go = st.columns([2, 2, 1], vertical_alignment="bottom")
    left = c_left.selectbox("Left", options, format_func=_label, key="compare_left")
    right = c_right.selectbox("Right", options, format_func=_label, key="compare_right")
    clicked = c_go.button("Compare", key="compare_go", type="primary", disabled=not (left and right),
                          use_container_width=True)

    mode = st.radio("View", MODES, key=MODE_KEY, horizontal=True, label_visibility="collapsed")

    if clicked:
        with st.spinner("Comparing…"):
            run_compare(token, left, right)

    result = st.session_state.get(RESULT_KEY)
    if not result:
        return
    if result.get("error"):
        st.error(f"⚠️ {result['error']}")
        return
    {"side": _render_side, "overlay": _render_overlay, "summary": _render_summary}[mode](result)
