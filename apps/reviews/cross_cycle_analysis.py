"""
apps/reviews/cross_cycle_analysis.py

How performance moves from one review cycle to the next: each
employee's trajectory, department scores, goal achievement by category
and competency ratings across cycles, with a short list of insights.
Managers see the employee trends of their own department only.

-------------------------------------------------------------------------------
TABS:
-------------------------------------------------------------------------------
1.  "📈 Trends": per-employee overall score across cycles.
2.  "🏢 Departments": average score and completion per cycle.
3.  "🎯 Goals": achievement rate per goal category.
4.  "🧠 Competencies": average competency rating per cycle.
5.  "💡 Insights": who and what is improving or slipping.
-------------------------------------------------------------------------------
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, achievement_rates, department_changes, employee_trends, score_trajectory

TRAJECTORY_ICONS = {"Improving": "📈", "Stable": "➖", "Declining": "📉"}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Cross-Cycle Analysis",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo review history",
        }
        history = data_access.get_employee_score_history()
        if user.get("role") == "MANAGER" and user.get("department"):
            history = [h for h in history if h["department"] == user["department"]]
        self.history = history
        self.departments = data_access.get_department_cycles()
        self.goals = achievement_rates(data_access.get_goal_achievement_cycles())
        self.competencies = data_access.get_competency_cycles()

    def _render_trends_tab(self):
        trends = employee_trends(self.history)
        if not trends:
            st.info("No review history for your department yet.")
            return
        c1, c2, c3 = st.columns(3)
        for col, label in zip((c1, c2, c3), TRAJECTORY_ICONS):
            col.metric(f"{TRAJECTORY_ICONS[label]} {label}", sum(1 for t in trends if t["trajectory"] == label))

        names = [t["employee"] for t in trends]
        chosen = st.multiselect("Employees", names, default=names, key="cross_cycle_people")
        long = pd.DataFrame([
            {"employee": h["employee"], **c} for h in self.history if h["employee"] in chosen for c in h["cycles"]
        ])
        if not long.empty:
            fig = px.line(long, x="cycle", y="overall_score", color="employee", markers=True, range_y=[1, 5],
                          title="Overall Score by Cycle")
            st.plotly_chart(fig, use_container_width=True)
        st.dataframe(pd.DataFrame(trends), use_container_width=True, hide_index=True)

    def _render_departments_tab(self):
        df = pd.DataFrame(self.departments)
        department = st.selectbox("Department", [ALL] + sorted(df["department"].unique()), key="cross_cycle_dept")
        if department != ALL:
            df = df[df["department"] == department]
        chart = alt.Chart(df).mark_line(point=True).encode(
            x=alt.X("cycle", sort=None, title=None),
            y=alt.Y("avg_score", title="Average score", scale=alt.Scale(domain=[3, 5])),
            color="department",
            tooltip=["department", "cycle", "avg_score", "completion_rate"],
        ).properties(title="Department Score by Cycle")
        st.altair_chart(chart, use_container_width=True)
        st.dataframe(pd.DataFrame(department_changes(self.departments)), use_container_width=True, hide_index=True)

    def _render_goals_tab(self):
        df = pd.DataFrame(self.goals)
        fig = px.bar(df, x="category", y="rate", color="cycle", barmode="group", range_y=[0, 100],
                     title="Goal Achievement Rate (%)")
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(df, use_container_width=True, hide_index=True)

    def _render_competencies_tab(self):
        df = pd.DataFrame(self.competencies)
        fig = px.line(df, x="cycle", y="avg_rating", color="competency", markers=True, range_y=[1, 5],
                      title="Competency Rating by Cycle")
        st.plotly_chart(fig, use_container_width=True)

    def _render_insights_tab(self):
        trends = employee_trends(self.history)
        for t in trends:
            if t["trajectory"] == "Declining":
                st.warning(f"{t['employee']} has dropped {abs(t['change']):g} points since their first cycle.")
            elif t["trajectory"] == "Improving":
                st.success(f"{t['employee']} has gained {t['change']:g} points since their first cycle.")

        by_competency = {}
        for row in self.competencies:
            by_competency.setdefault(row["competency"], []).append(row["avg_rating"])
        for name, ratings in by_competency.items():
            trajectory = score_trajectory(ratings)
            if trajectory != "Stable":
                st.info(f"{TRAJECTORY_ICONS[trajectory]} {name} is {trajectory.lower()} across the organisation.")

    def render_body(self, user: dict) -> None:
        tabs = st.tabs(["📈 Trends", "🏢 Departments", "🎯 Goals", "🧠 Competencies", "💡 Insights"])
        renderers = [self._render_trends_tab, self._render_departments_tab, self._render_goals_tab,
                     self._render_competencies_tab, self._render_insights_tab]
        for tab, render in zip(tabs, renderers):
            with tab:
                render()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
