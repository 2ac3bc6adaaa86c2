"""
apps/reports/trend_analysis.py

Quarter-on-quarter trend of the organisation's headline measures.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access

MEASURES = {
    "avg_score": "Average Score",
    "goal_completion": "Goal Completion (%)",
    "review_completion": "Review Completion (%)",
    "employee_count": "Head Count",
}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Trend Analysis",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo analytics",
        }
        self.trend = pd.DataFrame(data_access.get_org_trend())

    def render_body(self, user: dict) -> None:
        selected = st.multiselect("Measures", list(MEASURES), default=["goal_completion", "review_completion"],
                                  format_func=MEASURES.get, key="trend_measures")
        if not selected:
            st.info("Pick at least one measure.")
            return

        long = self.trend.melt(id_vars="period", value_vars=selected, var_name="measure", value_name="value")
        long["measure"] = long["measure"].map(MEASURES)
        fig = px.line(long, x="period", y="value", color="measure", markers=True, title="Trend by Quarter")
        st.plotly_chart(fig, use_container_width=True)

        change = self.trend[list(MEASURES)].diff().iloc[1:]
        change.insert(0, "period", self.trend["period"].iloc[1:])
        st.markdown("##### Change vs Previous Quarter")
        st.dataframe(change.rename(columns=MEASURES), use_container_width=True, hide_index=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
