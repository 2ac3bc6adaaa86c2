"""
apps/dashboards/organization_dashboard.py

Landing page for Admin and HR: organisation-wide KPIs, department
comparison, the performance trend and recent activity.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import departments_needing_attention, zone_distribution
from security import get_menu_label, get_navigation_suggestions

ACTIVITY_ICONS = {
    "review_submitted": "📝",
    "goal_completed": "🏆",
    "goal_created": "🎯",
    "feedback_given": "💬",
}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")
        self.meta = {
            "title_override": "Organization Dashboard",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo analytics",
        }
        self.stats = data_access.get_org_stats()
        self.departments = data_access.get_department_metrics()
        self.trend = pd.DataFrame(data_access.get_org_trend())
        self.activities = data_access.get_system_activities()

    def render_body(self, user: dict) -> None:
        s = self.stats
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Employees", s["total_employees"], help=f"{s['active_employees']} active")
        c2.metric("Overall Score", s["overall_performance_score"])
        c3.metric("Review Completion", f"{s['review_completion_rate']}%")
        c4.metric("Goal Achievement", f"{s['goal_achievement_rate']}%")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Departments", s["total_departments"])
        c2.metric("Pending Reviews", s["pending_reviews"])
        c3.metric("Overdue Goals", s["overdue_goals"])
        zones = zone_distribution(self.departments)
        c4.metric("Red Zone", zones["RED"])

        dept = pd.DataFrame(self.departments)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(dept, x="name", y=["goal_completion_rate", "review_completion_rate"], barmode="group",
                         title="Completion Rates by Department (%)")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            fig = px.line(self.trend, x="period", y="avg_score", markers=True, title="Average Score Trend")
            st.plotly_chart(fig, use_container_width=True)

        c1, c2 = st.columns(2)
        with c1:
            st.markdown("##### Departments Needing Attention")
            flagged = departments_needing_attention(self.departments)
            for d in flagged:
                st.markdown(f"- **{d['name']}**: score {d['avg_performance_score']}, "
                            f"goals {d['goal_completion_rate']}%")
            if not flagged:
                st.caption("None.")
        with c2:
            st.markdown("##### Recent Activity")
            for a in self.activities:
                st.markdown(f"{ACTIVITY_ICONS.get(a['type'], '•')} {a['description']} "
                            f"· *{a['user']}, {a['department']}* · {a['timestamp']}")

        suggestions = get_navigation_suggestions("organization-dashboard", self.role)
        render_jump_links([{"id": m, "label": get_menu_label(m)} for m in suggestions], key_prefix="org_suggest")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
