"""
apps/goals/goal_analytics.py

Goal analytics across the organisation: completion by category, ratings
and the quarter-on-quarter trend.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import completion_rate


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Goal Analytics",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo analytics",
        }
        self.categories = pd.DataFrame(data_access.get_goal_category_analysis())
        self.trend = pd.DataFrame(data_access.get_org_trend())

    def render_body(self, user: dict) -> None:
        df = self.categories.copy()
        df["completion_rate"] = [completion_rate(d, t) for d, t in zip(df["completed"], df["total_goals"])]

        total = int(df["total_goals"].sum())
        done = int(df["completed"].sum())
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Total Goals", total)
        c2.metric("Completed", done)
        c3.metric("Completion Rate", f"{completion_rate(done, total)}%")
        c4.metric("Average Rating", round(float(df["avg_rating"].mean()), 2))

        c1, c2 = st.columns(2)
        with c1:
            long = df.melt(id_vars="category", value_vars=["total_goals", "completed"],
                           var_name="measure", value_name="goals")
            fig = px.bar(long, x="category", y="goals", color="measure", barmode="group",
                         title="Goals by Category")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            chart = alt.Chart(df).mark_circle(size=200).encode(
                x=alt.X("completion_rate", title="Completion Rate (%)", scale=alt.Scale(zero=False)),
                y=alt.Y("avg_rating", title="Average Rating", scale=alt.Scale(zero=False)),
                color="category",
                tooltip=["category", "total_goals", "completed", "avg_rating"],
            ).properties(title="Completion vs Rating")
            st.altair_chart(chart, use_container_width=True)

        st.markdown("##### Goal Completion Trend")
        st.line_chart(self.trend, x="period", y="goal_completion")

        st.dataframe(df, use_container_width=True, hide_index=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
