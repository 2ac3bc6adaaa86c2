"""
apps/goals/my_goals.py

The signed-in user's own goals: progress overview, filters, creating a
goal, and logging progress against one.
"""

import logging
from datetime import datetime, timedelta

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, days_remaining, filter_goals, goal_summary, split_tags
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

GOAL_STATUSES = ["ACTIVE", "COMPLETED", "ON_HOLD", "CANCELLED"]
GOAL_CATEGORIES = ["TECHNICAL", "PROFESSIONAL", "LEADERSHIP", "PERSONAL"]
PRIORITIES = ["LOW", "MEDIUM", "HIGH", "CRITICAL"]

PRIORITY_ICONS = {"LOW": "🟢", "MEDIUM": "🟡", "HIGH": "🟠", "CRITICAL": "🔴"}


def _due_label(goal):
    if goal.get("status") == "COMPLETED":
        return "Done"
    days = days_remaining(goal.get("target_date"))
    if days is None:
        return "No date"
    if days < 0:
        return f"{-days} days overdue"
    return f"{days} days left"


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "My Goals",
            "owner": user.get("name", "You"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo goals",
        }
        self.goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))

    # --- TAB 1: OVERVIEW ---
    def _render_overview_tab(self):
        s = goal_summary(self.goals)
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Total Goals", s["total"])
        c2.metric("Active", s["active"])
        c3.metric("Completed", s["completed"])
        c4.metric("Awaiting Approval", s["pending_approval"])
        c5.metric("Overall Progress", f"{s['overall_progress']}%")

        c1, c2, c3, c4 = st.columns([2, 1, 1, 1])
        term = c1.text_input("Search", placeholder="Search goals...", key="my_goals_search")
        status = c2.selectbox("Status", [ALL] + GOAL_STATUSES, key="my_goals_status")
        category = c3.selectbox("Category", [ALL] + GOAL_CATEGORIES, key="my_goals_category")
        priority = c4.selectbox("Priority", [ALL] + PRIORITIES, key="my_goals_priority")

        goals = filter_goals(self.goals, term, status, category, priority)
        if not goals:
            st.info("No goals match the current filters.")
            return

        for goal in goals:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"**{PRIORITY_ICONS.get(goal['priority'], '')} {goal['title']}**")
                c1.caption(f"{goal['category']} · {goal['status']} · {_due_label(goal)}"
                           + (f" · KRA: {goal['kra_name']}" if goal.get("kra_name") else ""))
                c1.progress(goal["progress"] / 100, text=f"{goal['progress']}%")
                c2.caption("✅ Approved" if goal.get("manager_approved") else "⏳ Awaiting approval")
                c2.caption(f"📎 {goal.get('evidence_count', 0)} evidence")

        df = pd.DataFrame(goals)
        fig = px.bar(df, x="progress", y="title", orientation="h", color="category",
                     range_x=[0, 100], title="Progress by Goal")
        st.plotly_chart(fig, use_container_width=True)

    # --- TAB 2: NEW GOAL ---
    def _render_create_tab(self):
        kras = {k["id"]: k["title"] for k in data_access.get_kras() if k.get("is_active")}
        kra_options = [None] + list(kras)

        with st.form("new_goal_form", clear_on_submit=True):
            title = st.text_input("Goal Title")
            description = st.text_area("Description")
            c1, c2, c3 = st.columns(3)
            category = c1.selectbox("Category", GOAL_CATEGORIES)
            priority = c2.selectbox("Priority", PRIORITIES, index=1)
            kra_id = c3.selectbox("Linked KRA", kra_options,
                                  format_func=lambda k: "Not linked" if k is None else kras[k])
            c1, c2 = st.columns(2)
            start = c1.date_input("Start Date", value=datetime.now().date())
            target = c2.date_input("Target Date", value=datetime.now().date() + timedelta(days=90))
            c1, c2 = st.columns(2)
            target_value = c1.text_input("Target Value")
            unit = c2.text_input("Measurement Unit")
            milestones = st.text_input("Milestones", help="Comma separated")
            tags = st.text_input("Tags", help="Comma separated")
            submitted = st.form_submit_button("Create Goal")

        if not submitted:
            return
        if not title.strip():
            st.error("Goal title is required.")
            return
        if target < start:
            st.error("Target date must be on or after the start date.")
            return

        goal = {
            "id": next_id("goal"), "title": title.strip(), "description": description,
            "category": category, "priority": priority, "status": "ACTIVE", "progress": 0,
            "start_date": start.isoformat(), "target_date": target.isoformat(), "achievement": "NOT_STARTED",
            "kra_id": kra_id, "kra_name": kras.get(kra_id), "evidence_count": 0, "manager_approved": False,
            "target_value": target_value, "current_value": "0", "measurement_unit": unit,
            "milestones": split_tags(milestones), "tags": split_tags(tags), "created_on": today_str(),
        }
        self.goals.append(goal)
        logger.info(f"Goal '{goal['title']}' created by {self.user.get('email')}")
        st.success("Goal created and sent to your manager for approval.")

    # --- TAB 3: UPDATE PROGRESS ---
    def _render_update_tab(self):
        open_goals = {g["id"]: g for g in self.goals if g["status"] in ("ACTIVE", "ON_HOLD")}
        if not open_goals:
            st.info("You have no open goals.")
            return

        goal_id = st.selectbox("Goal", list(open_goals), format_func=lambda g: open_goals[g]["title"],
                               key="my_goals_update_pick")
        goal = open_goals[goal_id]
        if goal.get("milestones"):
            st.caption("Milestones: " + " → ".join(goal["milestones"]))

        with st.form("update_goal_form"):
            progress = st.slider("Progress (%)", 0, 100, int(goal["progress"]), key=f"goal_progress_{goal_id}")
            current_value = st.text_input("Current Value", value=goal.get("current_value") or "",
                                          key=f"goal_value_{goal_id}")
            status = st.selectbox("Status", GOAL_STATUSES, index=GOAL_STATUSES.index(goal["status"]),
                                  key=f"goal_status_{goal_id}")
            submitted = st.form_submit_button("Save Progress")

        if submitted:
            goal.update(progress=progress, current_value=current_value, status=status)
            if progress == 100 and status == "ACTIVE":
                goal["status"] = "COMPLETED"
            if goal["status"] == "COMPLETED":
                goal["achievement"] = "ACHIEVED"
            logger.info(f"Goal {goal_id} progress set to {progress}% by {self.user.get('email')}")
            st.success("Progress saved.")

    def render_body(self, user: dict) -> None:
        tab_overview, tab_new, tab_update = st.tabs(["🎯 My Goals", "➕ New Goal", "📈 Update Progress"])
        with tab_overview:
            self._render_overview_tab()
        with tab_new:
            self._render_create_tab()
        with tab_update:
            self._render_update_tab()


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
