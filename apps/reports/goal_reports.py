"""
apps/reports/goal_reports.py

Goal report. Leadership sees the organisation's goal categories;
everyone also sees a breakdown of their own goals.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import category_breakdown, completion_rate, days_remaining, goal_summary
from common.page_state import local_rows
from config import LEADERSHIP_ROLES


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.is_leader = user.get("role") in LEADERSHIP_ROLES
        self.meta = {
            "title_override": "Goal Reports",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo goals",
        }
        self.my_goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))

    def _render_personal(self):
        st.markdown("##### My Goals")
        s = goal_summary(self.my_goals)
        c1, c2, c3 = st.columns(3)
        c1.metric("Goals", s["total"])
        c2.metric("Completion Rate", f"{completion_rate(s['completed'], s['total'])}%")
        c3.metric("Average Progress", f"{s['overall_progress']}%")

        by_category = category_breakdown(self.my_goals)
        fig = px.pie(names=list(by_category), values=list(by_category.values()), title="My Goals by Category")
        st.plotly_chart(fig, use_container_width=True)

        overdue = [g for g in self.my_goals
                   if g["status"] == "ACTIVE" and (days_remaining(g.get("target_date")) or 0) < 0]
        if overdue:
            st.warning(f"{len(overdue)} active goal(s) are past their target date.")
            st.dataframe(pd.DataFrame(overdue)[["title", "target_date", "progress"]],
                         use_container_width=True, hide_index=True)

    def _render_organization(self):
        st.markdown("##### Organisation")
        df = pd.DataFrame(data_access.get_goal_category_analysis())
        df["completion_rate"] = [completion_rate(d, t) for d, t in zip(df["completed"], df["total_goals"])]
        fig = px.bar(df.sort_values("completion_rate"), x="completion_rate", y="category", orientation="h",
                     range_x=[0, 100], title="Completion Rate by Category (%)")
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(df, use_container_width=True, hide_index=True)

    def render_body(self, user: dict) -> None:
        if self.is_leader:
            tab_org, tab_me = st.tabs(["🏢 Organisation", "🎯 My Goals"])
            with tab_org:
                self._render_organization()
            with tab_me:
                self._render_personal()
        else:
            self._render_personal()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
