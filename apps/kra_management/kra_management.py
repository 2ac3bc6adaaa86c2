"""
apps/kra_management/kra_management.py

KRA management overview: headline numbers across the KRA library,
mappings, templates and bulk jobs, plus recent activity. Each sub-page
is one click away.
"""

from datetime import datetime

import altair as alt
import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.layout import render_jump_links
from common.metrics import kra_overview
from common.page_state import local_rows

ACTIVITY_ICONS = {"SUCCESS": "✅", "WARNING": "⚠️", "ERROR": "❌"}

SUB_PAGES = [
    {"id": "kra-operations", "label": "🎯 KRA Operations"},
    {"id": "kra-mapping", "label": "🕸️ KRA Mapping"},
    {"id": "kra-templates", "label": "📄 KRA Templates"},
    {"id": "kra-bulk-operations", "label": "🗄️ Bulk Operations"},
]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "KRA Management",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo KRA library",
        }
        self.kras = local_rows("kra_library", data_access.get_kra_library)
        self.mappings = local_rows("kra_mappings", data_access.get_kra_mappings)
        self.templates = local_rows("kra_templates", data_access.get_kra_templates)
        self.operations = local_rows("kra_bulk_operations", data_access.get_kra_bulk_operations)

    def render_body(self, user: dict) -> None:
        stats = kra_overview(self.kras, self.mappings, self.templates, self.operations)
        kras = stats["kras"]

        c1, c2, c3, c4 = st.columns(4)
        c1.metric("KRAs", kras["total"], help=f"{kras['draft']} draft · {kras['archived']} archived")
        c2.metric("Active / Approved", kras["active"] + kras["approved"])
        c3.metric("Active Mappings", f"{stats['active_mappings']} / {stats['mappings']}")
        c4.metric("Published Templates", f"{stats['published_templates']} / {stats['templates']}")

        c1, c2, c3 = st.columns(3)
        c1.metric("Bulk Jobs", stats["operations"])
        c2.metric("Running Jobs", stats["running_operations"])
        c3.metric("Average Rating", kras["avg_rating"])

        render_jump_links(SUB_PAGES, key_prefix="kra_overview")
        st.markdown("---")

        c1, c2 = st.columns(2)
        with c1:
            usage = pd.DataFrame(
                [{"category": k, "kras": v} for k, v in stats["by_category"].items()]
            )
            fig = px.pie(usage, names="category", values="kras", hole=0.4, title="KRAs by Category")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            depts = pd.DataFrame(stats["departments"]).melt(
                id_vars="department", value_vars=["kras", "mappings"], var_name="measure", value_name="count"
            )
            chart = alt.Chart(depts).mark_bar().encode(
                x=alt.X("department", title=None),
                xOffset="measure",
                y=alt.Y("count", title="Count"),
                color="measure",
                tooltip=["department", "measure", "count"],
            ).properties(title="KRAs and Mappings by Department")
            st.altair_chart(chart, use_container_width=True)

        st.markdown("##### Recent Activity")
        for item in data_access.get_kra_activity():
            with st.container(border=True):
                st.markdown(f"{ACTIVITY_ICONS.get(item['status'], '•')} **{item['title']}**")
                st.caption(f"{item['description']} · {item['user']} · {item['timestamp']}")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
