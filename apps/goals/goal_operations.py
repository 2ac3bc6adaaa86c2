"""
apps/goals/goal_operations.py

One work list over the signed-in user's goals and, for team leads,
managers, HR and Admin, their team's goals. Views split the list into
mine / approved / pending approval / completed; leaders approve or put
goals on hold from here.
"""

import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import filter_goals, goal_summary
from common.page_state import local_rows
from config import INDIVIDUAL_CONTRIBUTORS

logger = logging.getLogger(__name__)

VIEWS = {
    "all": "📋 All Goals",
    "my": "🙋 My Goals",
    "approved": "✅ Approved",
    "pending": "⏳ Pending Approval",
    "completed": "🏁 Completed",
}
APPROVER_ROLES = ("ADMIN", "HR", "MANAGER", "TEAMLEAD")


def goal_view(goals: list, view: str, owner: str) -> list:
    """The goals shown under one of the VIEWS keys."""
    if view == "my":
        return [g for g in goals if g.get("owner") == owner]
    if view == "approved":
        return [g for g in goals if g.get("manager_approved")]
    if view == "pending":
        return [g for g in goals if not g.get("manager_approved") and g.get("status") != "COMPLETED"]
    if view == "completed":
        return [g for g in goals if g.get("status") == "COMPLETED"]
    return list(goals)


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.can_approve = user.get("role") in APPROVER_ROLES
        self.meta = {
            "title_override": "Goal Operations",
            "owner": user.get("name", "User"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo goals",
        }
        self.my_goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))
        self.team_goals = local_rows("team_goals", data_access.get_team_goals) if self.can_approve else []

    def _goals(self):
        # My goals carry no owner field; tag them on a copy.
        mine = [dict(g, owner=self.user.get("name"), mine=True) for g in self.my_goals]
        return mine + [dict(g, mine=False) for g in self.team_goals]

    def _source(self, goal):
        rows = self.my_goals if goal["mine"] else self.team_goals
        return next(g for g in rows if g["id"] == goal["id"])

    def _render_view(self, view):
        goals = goal_view(self._goals(), view, self.user.get("name"))
        term = st.text_input("Search", placeholder="Goal, owner or KRA...", key=f"goal_ops_search_{view}")
        goals = filter_goals(goals, term)
        if not goals:
            st.info("No goals in this view.")
            return

        df = pd.DataFrame(goals)
        st.dataframe(
            df[["title", "owner", "category", "priority", "status", "progress", "target_date", "manager_approved"]],
            use_container_width=True, hide_index=True,
            column_config={"progress": st.column_config.ProgressColumn("Progress", min_value=0, max_value=100)},
        )

        if view != "pending" or not self.can_approve:
            return
        for goal in goals:
            if goal["mine"]:
                continue
            c1, c2, c3 = st.columns([4, 1, 1])
            c1.markdown(f"**{goal['title']}** · {goal['owner']}")
            if c2.button("Approve", key=f"goal_ops_approve_{goal['id']}"):
                self._source(goal)["manager_approved"] = True
                logger.info(f"Goal {goal['id']} approved by {self.user.get('email')}")
                st.rerun()
            if c3.button("Hold", key=f"goal_ops_hold_{goal['id']}"):
                self._source(goal)["status"] = "ON_HOLD"
                logger.info(f"Goal {goal['id']} put on hold by {self.user.get('email')}")
                st.rerun()

    def render_body(self, user: dict) -> None:
        s = goal_summary(self._goals())
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Goals", s["total"])
        c2.metric("Active", s["active"])
        c3.metric("Completed", s["completed"])
        c4.metric("Pending Approval", s["pending_approval"])
        if user.get("role") in INDIVIDUAL_CONTRIBUTORS:
            render_jump_links([{"id": "my-goals", "label": "➕ New goal in My Goals"}], key_prefix="goal_ops")

        tabs = st.tabs(list(VIEWS.values()))
        for tab, view in zip(tabs, VIEWS):
            with tab:
                self._render_view(view)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
