"""
apps/dashboards/team_dashboard.py

Landing page for managers and team leads: how the team is doing, who
needs attention, and where reviews stand.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import goal_summary, review_summary, team_summary
from common.page_state import local_rows
from security import get_menu_label, get_navigation_suggestions

ZONE_COLORS = {"GREEN": "#2ca02c", "YELLOW": "#ffbf00", "RED": "#d62728"}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")
        self.meta = {
            "title_override": "Team Dashboard",
            "owner": user.get("name", "Manager"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo team data",
        }
        self.members = local_rows("team_members", lambda: data_access.get_team_members(user.get("name")))
        self.goals = local_rows("team_goals", data_access.get_team_goals)
        self.reviews = local_rows("team_reviews", data_access.get_team_reviews)

    def render_body(self, user: dict) -> None:
        t = team_summary(self.members)
        g = goal_summary(self.goals)
        r = review_summary(self.reviews)

        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Team Members", t["size"])
        c2.metric("Average Score", t["avg_score"])
        c3.metric("Team Goal Progress", f"{g['overall_progress']}%")
        c4.metric("Reviews Completed", f"{r['completed']}/{r['total']}")

        df = pd.DataFrame(self.members)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(df, x="name", y="performance_score", color="zone", color_discrete_map=ZONE_COLORS,
                         range_y=[0, 5], title="Performance by Member")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            counts = pd.DataFrame(self.reviews).groupby("status").size().reset_index(name="reviews")
            fig = px.pie(counts, names="status", values="reviews", hole=0.4, title="Review Status")
            st.plotly_chart(fig, use_container_width=True)

        attention = df[(df["zone"] == "RED") | (df["review_status"] == "Overdue")]
        st.markdown("##### Needs Attention")
        if attention.empty:
            st.success("Nobody needs attention right now.")
        else:
            st.dataframe(attention[["name", "designation", "performance_score", "goal_progress", "review_status"]],
                         use_container_width=True, hide_index=True)

        if g["pending_approval"]:
            st.info(f"{g['pending_approval']} team goal(s) are waiting for your approval.")

        suggestions = get_navigation_suggestions("team-dashboard", self.role)
        render_jump_links([{"id": s, "label": get_menu_label(s)} for s in suggestions], key_prefix="team_suggest")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
