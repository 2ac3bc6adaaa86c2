"""
apps/goals/goal_management.py

Goal management hub for Admin, HR and managers: progress across the
team's goals, how well goals line up with KRAs, evidence and approval
backlog, and links into each goal page.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import evidence_summary, goal_summary, kra_alignment
from common.page_state import local_rows

SUB_PAGES = [
    {"id": "goal-operations", "label": "⚙️ Goal Operations"},
    {"id": "goal-analytics", "label": "📊 Goal Analytics"},
    {"id": "goal-evidence", "label": "📎 Evidence"},
    {"id": "goal-templates", "label": "🗂️ Templates"},
]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Goal Management",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo goals",
        }
        self.team_goals = local_rows("team_goals", data_access.get_team_goals)
        self.my_goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))
        self.evidence = local_rows("goal_evidence", data_access.get_evidence)

    def _render_overview_tab(self):
        s = goal_summary(self.team_goals)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Team Goals", s["total"])
        c2.metric("Active", s["active"])
        c3.metric("Completed", s["completed"])
        c4.metric("Average Progress", f"{s['overall_progress']}%")

        df = pd.DataFrame(self.team_goals)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.pie(df, names="status", title="Goals by Status", hole=0.4)
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            fig = px.box(df, x="category", y="progress", points="all", title="Progress by Category")
            st.plotly_chart(fig, use_container_width=True)

        st.markdown("##### Recent Activity")
        for item in data_access.get_goal_activity():
            st.markdown(f"- **{item['user']}** {item['action']} *{item['goal']}* · {item['time']}")

    def _render_alignment_tab(self):
        a = kra_alignment(self.my_goals)
        c1, c2, c3 = st.columns(3)
        c1.metric("Linked to a KRA", a["linked"])
        c2.metric("Not Linked", a["unlinked"])
        c3.metric("Alignment", f"{a['alignment_pct']}%")
        if a["by_kra"]:
            df = pd.DataFrame({"kra": list(a["by_kra"]), "goals": list(a["by_kra"].values())})
            fig = px.bar(df, x="goals", y="kra", orientation="h", title="Goals per KRA")
            st.plotly_chart(fig, use_container_width=True)
        if a["unlinked"]:
            st.info("Goals without a KRA do not count towards the KRA section of a review.")

    def _render_evidence_tab(self):
        e = evidence_summary(self.evidence)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Evidence Items", e["total"])
        c2.metric("Approved", e["approved"])
        c3.metric("Pending", e["pending"])
        c4.metric("Needs Revision", e["needs_revision"])

    def _render_workflow_tab(self):
        pending = [g for g in self.team_goals if not g.get("manager_approved")]
        st.metric("Waiting for Approval", len(pending))
        if pending:
            st.dataframe(pd.DataFrame(pending)[["title", "owner", "priority", "target_date"]],
                         use_container_width=True, hide_index=True)
        on_hold = [g for g in self.team_goals if g["status"] == "ON_HOLD"]
        if on_hold:
            st.warning(f"{len(on_hold)} goal(s) on hold: " + ", ".join(g["title"] for g in on_hold))

    def render_body(self, user: dict) -> None:
        render_jump_links(SUB_PAGES, key_prefix="goal_mgmt")
        tabs = st.tabs(["📊 Overview", "🎯 KRA Alignment", "📎 Evidence", "🔀 Workflow"])
        renderers = [self._render_overview_tab, self._render_alignment_tab, self._render_evidence_tab,
                     self._render_workflow_tab]
        for tab, render in zip(tabs, renderers):
            with tab:
                render()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
