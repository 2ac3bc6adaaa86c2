"""
apps/goals/team_goals.py

Goals of the people reporting to the signed-in manager or team lead,
with approval of pending goals.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, filter_goals, goal_summary, team_summary
from common.page_state import local_rows

logger = logging.getLogger(__name__)


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Team Goals",
            "owner": user.get("name", "Manager"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo team goals",
        }
        self.goals = local_rows("team_goals", data_access.get_team_goals)
        self.members = local_rows("team_members", lambda: data_access.get_team_members(user.get("name")))

    def _render_overview_tab(self):
        s = goal_summary(self.goals)
        t = team_summary(self.members)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Team Size", t["size"])
        c2.metric("Team Goals", s["total"])
        c3.metric("Average Progress", f"{s['overall_progress']}%")
        c4.metric("Awaiting Approval", s["pending_approval"])

        c1, c2 = st.columns([3, 1])
        term = c1.text_input("Search", placeholder="Goal or owner...", key="team_goals_search")
        status = c2.selectbox("Status", [ALL, "ACTIVE", "COMPLETED", "ON_HOLD"], key="team_goals_status")
        goals = filter_goals(self.goals, term, status)

        if not goals:
            st.info("No goals match the current filters.")
            return
        df = pd.DataFrame(goals)
        st.dataframe(
            df[["title", "owner", "category", "priority", "status", "progress", "target_date", "manager_approved"]],
            use_container_width=True, hide_index=True,
            column_config={"progress": st.column_config.ProgressColumn("Progress", min_value=0, max_value=100)},
        )

        members = pd.DataFrame(self.members)
        fig = px.bar(members, x="name", y="goal_progress", color="zone",
                     color_discrete_map={"GREEN": "#2ca02c", "YELLOW": "#ffbf00", "RED": "#d62728"},
                     title="Goal Progress by Team Member")
        st.plotly_chart(fig, use_container_width=True)

    def _render_approvals_tab(self):
        pending = [g for g in self.goals if not g.get("manager_approved")]
        if not pending:
            st.success("No goals are waiting for your approval.")
            return

        for goal in pending:
            with st.container(border=True):
                c1, c2, c3 = st.columns([4, 1, 1])
                c1.markdown(f"**{goal['title']}**")
                c1.caption(f"{goal['owner']} · {goal['category']} · due {goal['target_date']}")
                if c2.button("Approve", key=f"approve_{goal['id']}"):
                    goal["manager_approved"] = True
                    logger.info(f"Goal {goal['id']} approved by {self.user.get('email')}")
                    st.rerun()
                if c3.button("Put on hold", key=f"hold_{goal['id']}"):
                    goal["status"] = "ON_HOLD"
                    logger.info(f"Goal {goal['id']} put on hold by {self.user.get('email')}")
                    st.rerun()

    def render_body(self, user: dict) -> None:
        tab_overview, tab_approvals = st.tabs(["👥 Team Goals", "✅ Approvals"])
        with tab_overview:
            self._render_overview_tab()
        with tab_approvals:
            self._render_approvals_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
