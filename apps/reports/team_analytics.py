"""
apps/reports/team_analytics.py

Team analytics for managers and team leads: score against goal progress
per person, and the at-risk members.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import streamlit as st

from common import data_access
from common.metrics import team_summary
from common.page_state import local_rows

ZONE_SCALE = alt.Scale(domain=["GREEN", "YELLOW", "RED"], range=["#2ca02c", "#ffbf00", "#d62728"])


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Team Analytics",
            "owner": user.get("name", "Manager"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo team data",
        }
        self.members = local_rows("team_members", lambda: data_access.get_team_members(user.get("name")))

    def render_body(self, user: dict) -> None:
        t = team_summary(self.members)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Team Size", t["size"])
        c2.metric("Average Score", t["avg_score"])
        c3.metric("Average Goal Progress", f"{t['avg_goal_progress']}%")
        c4.metric("At Risk", t["at_risk"])

        df = pd.DataFrame(self.members)
        chart = alt.Chart(df).mark_circle(size=250).encode(
            x=alt.X("goal_progress", title="Goal Progress (%)", scale=alt.Scale(domain=[0, 100])),
            y=alt.Y("performance_score", title="Performance Score", scale=alt.Scale(domain=[1, 5])),
            color=alt.Color("zone", scale=ZONE_SCALE),
            tooltip=["name", "designation", "performance_score", "goal_progress", "review_status"],
        ).properties(title="Score vs Goal Progress").interactive()
        st.altair_chart(chart, use_container_width=True)

        st.markdown("##### At-Risk Members")
        at_risk = df[df["zone"] == "RED"]
        if at_risk.empty:
            st.success("Nobody on the team is in the red zone.")
        else:
            st.dataframe(at_risk[["name", "designation", "performance_score", "goal_progress", "review_status"]],
                         use_container_width=True, hide_index=True)

        st.markdown("##### Full Team")
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
