"""
apps/reviews/review_analytics.py

Review-cycle analytics: completion, on-time rate and average score per
cycle, and how departments compare.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Review Analytics",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo analytics",
        }
        self.cycles = pd.DataFrame(data_access.get_review_cycle_stats())
        self.departments = pd.DataFrame(data_access.get_department_metrics())

    def render_body(self, user: dict) -> None:
        latest = self.cycles.iloc[-1]
        previous = self.cycles.iloc[-2]
        c1, c2, c3 = st.columns(3)
        c1.metric("Completion Rate", f"{latest['completion_rate']}%",
                  delta=f"{latest['completion_rate'] - previous['completion_rate']:+.0f}%")
        c2.metric("On-Time Rate", f"{latest['on_time_rate']}%",
                  delta=f"{latest['on_time_rate'] - previous['on_time_rate']:+.0f}%")
        c3.metric("Average Score", latest["avg_score"],
                  delta=round(float(latest["avg_score"] - previous["avg_score"]), 2))

        long = self.cycles.melt(id_vars="cycle", value_vars=["completion_rate", "on_time_rate"],
                                var_name="measure", value_name="pct")
        chart = alt.Chart(long).mark_line(point=True).encode(
            x=alt.X("cycle", sort=None, title="Cycle"),
            y=alt.Y("pct", title="%", scale=alt.Scale(zero=False)),
            color="measure",
            tooltip=["cycle", "measure", "pct"],
        ).properties(title="Completion and On-Time Rate by Cycle")
        st.altair_chart(chart, use_container_width=True)

        fig = px.scatter(self.departments, x="review_completion_rate", y="avg_performance_score",
                         size="employee_count", text="name",
                         title="Review Completion vs Average Score by Department")
        fig.update_traces(textposition="top center")
        st.plotly_chart(fig, use_container_width=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
