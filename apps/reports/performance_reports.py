"""
apps/reports/performance_reports.py

Organisation performance report: department scores, zone mix and the
departments that need attention.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import departments_needing_attention, zone_distribution

ZONE_COLORS = {"GREEN": "#2ca02c", "YELLOW": "#ffbf00", "RED": "#d62728"}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Performance Reports",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo analytics",
        }
        self.departments = data_access.get_department_metrics()
        self.stats = data_access.get_org_stats()

    def render_body(self, user: dict) -> None:
        s = self.stats
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Employees", s["total_employees"])
        c2.metric("Overall Score", s["overall_performance_score"])
        c3.metric("Review Completion", f"{s['review_completion_rate']}%")
        c4.metric("Goal Achievement", f"{s['goal_achievement_rate']}%")

        min_score = st.slider("Flag departments scoring below", 3.0, 5.0, 4.0, 0.1, key="perf_min_score")
        min_goal = st.slider("...or completing fewer goals than (%)", 50, 100, 75, key="perf_min_goal")

        df = pd.DataFrame(self.departments)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(df.sort_values("avg_performance_score"), x="avg_performance_score", y="name",
                         orientation="h", title="Average Score by Department", range_x=[0, 5])
            fig.add_vline(x=min_score, line_dash="dash", line_color="red")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            zones = zone_distribution(self.departments)
            fig = px.pie(names=list(zones), values=list(zones.values()), title="Performance Zones",
                         color=list(zones), color_discrete_map=ZONE_COLORS)
            st.plotly_chart(fig, use_container_width=True)

        zone_rows = [dict(department=d["name"], zone=z, employees=n)
                     for d in self.departments for z, n in d["zones"].items()]
        fig = px.bar(pd.DataFrame(zone_rows), x="department", y="employees", color="zone",
                     color_discrete_map=ZONE_COLORS, title="Zone Mix by Department")
        st.plotly_chart(fig, use_container_width=True)

        st.markdown("##### Needs Attention")
        flagged = departments_needing_attention(self.departments, min_score, min_goal)
        if not flagged:
            st.success("Every department is above both thresholds.")
        else:
            st.dataframe(
                pd.DataFrame(flagged)[["name", "employee_count", "avg_performance_score",
                                       "goal_completion_rate", "review_completion_rate"]],
                use_container_width=True, hide_index=True,
            )


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
