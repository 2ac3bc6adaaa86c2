"""
apps/reports/analytics_dashboard.py

Analytics dashboard. Admin and HR get the organisation view (every
department); managers get the team view, scoped to their own department
and direct reports.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import achievement_rates, review_summary, team_summary, zone_distribution
from common.page_state import local_rows
from security import get_analytics_type

ZONE_COLORS = {"GREEN": "#34A853", "YELLOW": "#FBC02D", "RED": "#EA4335"}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.scope = get_analytics_type(user.get("role"))
        self.meta = {
            "title_override": "Analytics Dashboard" if self.scope == "organization" else "Team Analytics Dashboard",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo organisation metrics",
        }
        departments = data_access.get_department_metrics()
        if self.scope != "organization":
            departments = [d for d in departments if d["name"] == user.get("department")]
        self.departments = departments
        self.members = local_rows("team_members", lambda: data_access.get_team_members(user.get("name")))
        self.reviews = local_rows("team_reviews", data_access.get_team_reviews)

    def _render_overview_tab(self):
        stats = data_access.get_org_stats()
        if self.scope == "organization":
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Employees", stats["total_employees"])
            c2.metric("Performance Score", stats["overall_performance_score"])
            c3.metric("Review Completion", f"{stats['review_completion_rate']}%")
            c4.metric("Goal Achievement", f"{stats['goal_achievement_rate']}%")
        else:
            t = team_summary(self.members)
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Team Size", t["size"])
            c2.metric("Average Score", t["avg_score"])
            c3.metric("Goal Progress", f"{t['avg_goal_progress']}%")
            c4.metric("At Risk", t["at_risk"])

        trend = pd.DataFrame(data_access.get_org_trend())
        fig = px.line(trend, x="period", y=["goal_completion", "review_completion"], markers=True,
                      title="Organisation Completion Trend (%)")
        st.plotly_chart(fig, use_container_width=True)

    def _render_performance_tab(self):
        if not self.departments:
            st.info("No department metrics for your department.")
            return
        zones = zone_distribution(self.departments)
        df = pd.DataFrame({"zone": list(zones), "employees": list(zones.values())})
        c1, c2 = st.columns(2)
        with c1:
            fig = px.pie(df, names="zone", values="employees", color="zone", color_discrete_map=ZONE_COLORS,
                         hole=0.4, title="Performance Zones")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            depts = pd.DataFrame(self.departments)
            chart = alt.Chart(depts).mark_bar().encode(
                x=alt.X("avg_performance_score", title="Average score", scale=alt.Scale(domain=[0, 5])),
                y=alt.Y("name", sort="-x", title=None),
                tooltip=["name", "avg_performance_score", "employee_count"],
            ).properties(title="Average Score by Department")
            st.altair_chart(chart, use_container_width=True)

    def _render_goals_tab(self):
        df = pd.DataFrame(achievement_rates(data_access.get_goal_achievement_cycles()))
        fig = px.bar(df, x="cycle", y="rate", color="category", barmode="group", range_y=[0, 100],
                     title="Goal Achievement by Category (%)")
        st.plotly_chart(fig, use_container_width=True)
        if self.departments:
            depts = pd.DataFrame(self.departments)
            st.dataframe(depts[["name", "employee_count", "goal_completion_rate"]],
                         use_container_width=True, hide_index=True)

    def _render_reviews_tab(self):
        s = review_summary(self.reviews)
        c1, c2, c3 = st.columns(3)
        c1.metric("Reviews This Cycle", s["total"])
        c2.metric("Completed", s["completed"])
        c3.metric("Overdue", s["overdue"])
        cycles = pd.DataFrame(data_access.get_review_cycle_stats())
        fig = px.bar(cycles, x="cycle", y="avg_score", range_y=[0, 5], title="Average Review Score by Cycle")
        st.plotly_chart(fig, use_container_width=True)

    def _render_teams_tab(self):
        if not self.members:
            st.info("No team members found.")
            return
        df = pd.DataFrame(self.members)
        fig = px.scatter(df, x="goal_progress", y="performance_score", color="zone", text="name",
                         color_discrete_map=ZONE_COLORS, title="Team Members: Goals vs Score")
        fig.update_traces(textposition="top center")
        st.plotly_chart(fig, use_container_width=True)

    def render_body(self, user: dict) -> None:
        tabs = st.tabs(["📊 Overview", "🏅 Performance", "🎯 Goals", "📝 Reviews", "👥 Teams"])
        renderers = [self._render_overview_tab, self._render_performance_tab, self._render_goals_tab,
                     self._render_reviews_tab, self._render_teams_tab]
        for tab, render in zip(tabs, renderers):
            with tab:
                render()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
