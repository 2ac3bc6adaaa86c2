"""
apps/reports/review_reports.py

Review reports: status split, stage completion per cycle, department
completion, reviewer workload and stage turnaround against target.
Admin and HR see every department and reviewer; managers see only
their own reviewer workload.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, completion_rate

ZONE_COLORS = {"GREEN": "#34A853", "YELLOW": "#FBC02D", "RED": "#EA4335"}
STAGES = {"self_assessment": "Self Assessment", "r1_review": "R1 Review", "r2_review": "R2 Review", "final": "Final"}
LATE_AFTER_DAYS = 0.5


def department_frame(departments: list) -> pd.DataFrame:
    df = pd.DataFrame(departments)
    df["total"] = df["completed"] + df["pending"] + df["overdue"]
    df["completion_rate"] = [completion_rate(c, t) for c, t in zip(df["completed"], df["total"])]
    return df


def stage_delays(timeline: list) -> pd.DataFrame:
    """Average days per stage against target; `late` when more than half a day over."""
    df = pd.DataFrame(timeline)
    df["over_by"] = (df["avg_days"] - df["target_days"]).round(1)
    df["late"] = df["over_by"] > LATE_AFTER_DAYS
    return df


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")
        self.meta = {
            "title_override": "Review Reports",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo review analytics",
        }
        self.report = data_access.get_review_report()

    def _render_kpis(self):
        k = self.report["kpis"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Completion Rate", f"{k['completion_rate']}%", delta=f"{k['completion_delta']:+}%")
        c2.metric("Avg Cycle Time", f"{k['avg_cycle_days']} days")
        c3.metric("Overdue Reviews", k["overdue"], delta=f"{k['overdue_pct']}%", delta_color="inverse")
        c4.metric("Avg Rating", f"{k['avg_rating']} / 5")

    def _render_overview_tab(self):
        c1, c2 = st.columns(2)
        with c1:
            fig = px.pie(pd.DataFrame(self.report["status"]), names="status", values="count", hole=0.4,
                         title="Review Status")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            zones = pd.DataFrame(self.report["zones"])
            fig = px.bar(zones, x="zone", y="count", color="zone", color_discrete_map=ZONE_COLORS,
                         title="Performance Zones")
            fig.update_layout(showlegend=False)
            st.plotly_chart(fig, use_container_width=True)

    def _render_cycles_tab(self):
        cycles = pd.DataFrame(self.report["cycles"])
        cycle = st.selectbox("Cycle", [ALL] + list(cycles["cycle"]), key="review_reports_cycle")
        if cycle != ALL:
            cycles = cycles[cycles["cycle"] == cycle]
        long = cycles.melt(id_vars="cycle", value_vars=list(STAGES), var_name="stage", value_name="pct")
        long["stage"] = long["stage"].map(STAGES)
        chart = alt.Chart(long).mark_bar().encode(
            x=alt.X("cycle", sort=None, title=None),
            xOffset=alt.XOffset("stage", sort=list(STAGES.values())),
            y=alt.Y("pct", title="% complete", scale=alt.Scale(domain=[0, 100])),
            color=alt.Color("stage", sort=list(STAGES.values())),
            tooltip=["cycle", "stage", "pct"],
        ).properties(title="Stage Completion by Cycle")
        st.altair_chart(chart, use_container_width=True)
        st.dataframe(cycles, use_container_width=True, hide_index=True)

    def _render_departments_tab(self):
        if self.role not in ("ADMIN", "HR"):
            st.info("Department comparisons are available to Admin and HR.")
            return
        df = department_frame(self.report["departments"])
        fig = px.bar(df, x="department", y=["completed", "pending", "overdue"], title="Reviews by Department",
                     color_discrete_sequence=["#34A853", "#FBC02D", "#EA4335"])
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(df, use_container_width=True, hide_index=True)

    def _render_reviewers_tab(self):
        df = pd.DataFrame(self.report["reviewers"])
        if self.role == "MANAGER":
            df = df[df["reviewer"] == self.user.get("name")].copy()
            if df.empty:
                st.info("No reviewer workload recorded for you in this cycle.")
                return
        df["completion_rate"] = [completion_rate(c, t) for c, t in zip(df["completed"], df["direct_reports"])]
        st.dataframe(df.sort_values("pending", ascending=False), use_container_width=True, hide_index=True)
        fig = px.scatter(df, x="completion_rate", y="avg_rating", size="direct_reports", text="reviewer",
                         title="Completion vs Average Rating Given")
        fig.update_traces(textposition="top center")
        st.plotly_chart(fig, use_container_width=True)

    def _render_timeline_tab(self):
        df = stage_delays(self.report["timeline"])
        for row in df.itertuples():
            if row.late:
                st.warning(f"{row.stage}: {row.avg_days} days on average, target {row.target_days}.")
        fig = px.bar(df, x="stage", y=["avg_days", "target_days"], barmode="group", title="Days per Stage")
        st.plotly_chart(fig, use_container_width=True)

    def render_body(self, user: dict) -> None:
        self._render_kpis()
        tabs = st.tabs(["📊 Overview", "🔁 Review Cycles", "🏢 Departments", "🧑‍⚖️ Reviewers", "⏱️ Timeline"])
        renderers = [self._render_overview_tab, self._render_cycles_tab, self._render_departments_tab,
                     self._render_reviewers_tab, self._render_timeline_tab]
        for tab, render in zip(tabs, renderers):
            with tab:
                render()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
