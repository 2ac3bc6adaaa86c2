"""
apps/dashboards/personal_dashboard.py

The landing page for employees: my scores, my goals, what is due next,
and shortcuts to the pages this role uses most.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from auth.users_local import ROLE_QUICK_LINKS
from common import data_access
from common.layout import render_jump_links
from common.metrics import days_remaining, goal_summary
from common.page_state import local_rows
from security import get_menu_label, get_navigation_suggestions


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")
        self.meta = {
            "title_override": f"Welcome back, {user.get('name', '').split(' ')[0] or 'there'}",
            "owner": user.get("name", "You"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo data",
        }
        self.goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))
        self.summary = data_access.get_performance_summary(user.get("id"))
        self.trend = pd.DataFrame(data_access.get_personal_trend(user.get("id")))
        self.deadlines = data_access.get_upcoming_deadlines(user.get("id"))

    def render_body(self, user: dict) -> None:
        g = goal_summary(self.goals)
        p = self.summary
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Performance Score", p["current_score"], delta=round(p["current_score"] - p["previous_score"], 2))
        c2.metric("Active Goals", g["active"])
        c3.metric("Goal Progress", f"{g['overall_progress']}%")
        c4.metric("Completed Goals", g["completed"])

        c1, c2 = st.columns([2, 1])
        with c1:
            fig = px.line(self.trend, x="period", y="score", markers=True, title="My Score Trend",
                          range_y=[1, 5])
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            st.markdown("##### Coming Up")
            for item in sorted(self.deadlines, key=lambda d: d["due_date"]):
                days = days_remaining(item["due_date"])
                when = "overdue" if days is not None and days < 0 else f"in {days} days"
                st.markdown(f"- **{item['title']}** ({item['type']}) · {item['due_date']} · {when}")

        st.markdown("##### My Goals")
        active = [goal for goal in self.goals if goal["status"] == "ACTIVE"]
        for goal in sorted(active, key=lambda goal: goal["target_date"])[:5]:
            st.progress(goal["progress"] / 100, text=f"{goal['title']} · {goal['progress']}%")

        st.markdown("##### Quick Links")
        render_jump_links(ROLE_QUICK_LINKS.get(self.role, [])[1:], key_prefix="personal_quick")

        suggestions = get_navigation_suggestions("personal-dashboard", self.role)
        if suggestions:
            st.caption("You might also want to look at:")
            render_jump_links([{"id": s, "label": get_menu_label(s)} for s in suggestions],
                              key_prefix="personal_suggest")


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
