# frontend/palette.py
from __future__ import annotations

import streamlit as st

from frontend import nav

# k: command, d: description, tab: where choosing it takes you
COMMANDS = [
    {"k": "/summarize", "d": "Summarize selected document", "tab": "documents"},
    {"k": "/compare",   "d": "Compare two documents",       "tab": "compare"},
    {"k": "/find",      "d": "Find clauses and terms",      "tab": "chat"},
    {"k": "/risk",      "d": "Assess risk in agreement",    "tab": "chat"},
]


def filter_commands(query: str) -> list[dict]:
    # key match is case-sensitive, description match is not
    q = query or ""
    return [c for c in COMMANDS if q in c["k"] or q.lower() in c["d"].lower()]


def render_palette() -> None:
    query = st.text_input("Ask AI or type a /command", key="palette_query", placeholder="Ask AI or type a /command")
    matches = filter_commands(query)
    if not matches:
        st.caption("No matches")
    for c in matches:
        if st.button(f"`{c['k']}` {c['d']}", key=f"palette_{c['k']}", use_container_width=True):
            nav.jump_tab(c["tab"])


@st.dialog("Command palette")
def command_palette() -> None:
    render_palette()
