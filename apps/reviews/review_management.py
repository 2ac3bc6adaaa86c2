"""
apps/reviews/review_management.py

Review management hub: how the current and past cycles are going, which
templates are in use, the performance zone split and links into the
review pages the signed-in role may open.
"""

from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import review_summary
from common.page_state import local_rows
from security import has_menu_access

ZONE_COLORS = {"GREEN": "#34A853", "YELLOW": "#FBC02D", "RED": "#EA4335"}

SUB_PAGES = [
    {"id": "review-operations", "label": "⚙️ Review Operations"},
    {"id": "review-templates", "label": "🗂️ Review Templates"},
    {"id": "review-workflows", "label": "🔀 Review Workflows"},
    {"id": "cross-cycle-analysis", "label": "📈 Cross-Cycle Analysis"},
]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Review Management",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo reviews",
        }
        self.reviews = local_rows("team_reviews", data_access.get_team_reviews)
        self.templates = local_rows("review_templates", data_access.get_review_templates)

    def _render_cycles_tab(self):
        s = review_summary(self.reviews)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Current Cycle Reviews", s["total"])
        c2.metric("Completed", s["completed"])
        c3.metric("Submitted", s["submitted"])
        c4.metric("Overdue", s["overdue"])

        df = pd.DataFrame(data_access.get_review_cycle_stats())
        fig = px.line(df, x="cycle", y=["completion_rate", "on_time_rate"], markers=True, range_y=[0, 100],
                      title="Completion and On-Time Rate by Cycle")
        st.plotly_chart(fig, use_container_width=True)

    def _render_templates_tab(self):
        active = [t for t in self.templates if t["is_active"]]
        c1, c2 = st.columns(2)
        c1.metric("Active Templates", f"{len(active)} / {len(self.templates)}")
        c2.metric("Times Used", sum(t.get("usage_count", 0) for t in self.templates))
        df = pd.DataFrame(self.templates)
        st.dataframe(df[["name", "type", "category", "rating_scale", "is_default", "is_active", "usage_count"]],
                     use_container_width=True, hide_index=True)

    def _render_performance_tab(self):
        report = data_access.get_review_report()
        zones = pd.DataFrame(report["zones"])
        fig = px.pie(zones, names="zone", values="count", color="zone", color_discrete_map=ZONE_COLORS,
                     hole=0.4, title="Performance Zones")
        st.plotly_chart(fig, use_container_width=True)
        st.metric("Average Rating", f"{report['kpis']['avg_rating']} / 5")

    def render_body(self, user: dict) -> None:
        links = [link for link in SUB_PAGES if has_menu_access(user.get("role"), link["id"])]
        render_jump_links(links, key_prefix="review_mgmt")
        tab_cycles, tab_templates, tab_perf = st.tabs(["📅 Cycles", "🗂️ Templates", "🏅 Performance"])
        with tab_cycles:
            self._render_cycles_tab()
        with tab_templates:
            self._render_templates_tab()
        with tab_perf:
            self._render_performance_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
