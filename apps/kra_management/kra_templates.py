"""
apps/kra_management/kra_templates.py

KRA templates: ready-made sets of weighted KRAs for a department and
level. A template can only be published when its KRA weightages add up
to 100%.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, search_records, split_tags, weightage_issues
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

TEMPLATE_CATEGORIES = ["LEADERSHIP", "TECHNICAL", "SALES", "OPERATIONS", "STRATEGIC"]
LEVELS = ["JUNIOR", "MID", "SENIOR", "LEAD", "EXECUTIVE"]


def set_published(template: dict, published: bool) -> dict:
    if published:
        issues = weightage_issues(template.get("kras", []))
        if issues:
            raise ValueError("; ".join(issues))
    template["is_published"] = published
    return template


def set_default(templates: list, template_id: str) -> None:
    """One default template per department."""
    chosen = next(t for t in templates if t["id"] == template_id)
    for t in templates:
        if t["department"] == chosen["department"]:
            t["is_default"] = t["id"] == template_id


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "KRA Templates",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo KRA templates",
        }
        self.templates = local_rows("kra_templates", data_access.get_kra_templates)
        self.kras = local_rows("kra_library", data_access.get_kra_library)

    # --- TAB 1: LIBRARY ---
    def _render_library_tab(self):
        c1, c2, c3, c4 = st.columns([2, 1, 1, 1])
        term = c1.text_input("Search", placeholder="Name, description or tag...", key="ktmpl_search")
        category = c2.selectbox("Category", [ALL] + TEMPLATE_CATEGORIES, key="ktmpl_category")
        level = c3.selectbox("Level", [ALL] + LEVELS, key="ktmpl_level")
        published_only = c4.checkbox("Published only", key="ktmpl_published")

        rows = [
            t for t in search_records(self.templates, term, ("name", "description", "tags"))
            if category in (ALL, t["category"]) and level in (ALL, t["level"])
            and (t["is_published"] or not published_only)
        ]
        if not rows:
            st.info("No templates match the current filters.")
            return

        for t in rows:
            badges = ("🟢 Published" if t["is_published"] else "⚪ Draft") + (" · ⭐ Default" if t["is_default"] else "")
            with st.expander(f"{t['name']} · {t['department']} · {t['level']} · {badges}"):
                st.write(t["description"])
                st.dataframe(pd.DataFrame(t["kras"]), use_container_width=True, hide_index=True)
                for issue in weightage_issues(t["kras"]):
                    st.warning(issue)

                c1, c2, c3 = st.columns(3)
                c1.caption(f"By {t['author']} · used {t['usage_count']}x · ⭐ {t['rating']}")
                label = "Unpublish" if t["is_published"] else "Publish"
                if c2.button(label, key=f"ktmpl_pub_{t['id']}"):
                    try:
                        set_published(t, not t["is_published"])
                    except ValueError as e:
                        st.error(f"Cannot publish: {e}")
                    else:
                        logger.info(f"KRA template {t['id']} published={t['is_published']} by {self.user.get('email')}")
                        st.rerun()
                if c3.button("Make default", key=f"ktmpl_default_{t['id']}", disabled=t["is_default"]):
                    set_default(self.templates, t["id"])
                    st.rerun()

    # --- TAB 2: POPULAR ---
    def _render_popular_tab(self):
        df = pd.DataFrame(self.templates)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(df.sort_values("rating"), x="rating", y="name", orientation="h", title="Top Rated",
                         range_x=[0, 5])
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            fig = px.bar(df.sort_values("usage_count"), x="usage_count", y="name", orientation="h",
                         title="Most Used")
            st.plotly_chart(fig, use_container_width=True)

    # --- TAB 3: BUILD ---
    def _render_build_tab(self):
        live = [k for k in self.kras if k["status"] in ("ACTIVE", "APPROVED")]
        by_id = {k["id"]: k for k in live}

        c1, c2 = st.columns(2)
        name = c1.text_input("Template Name", key="ktmpl_new_name")
        department = c2.selectbox("Department", sorted({d["name"] for d in data_access.get_departments()}),
                                  key="ktmpl_new_dept")
        c1, c2 = st.columns(2)
        category = c1.selectbox("Category", TEMPLATE_CATEGORIES, key="ktmpl_new_category")
        level = c2.selectbox("Level", LEVELS, index=2, key="ktmpl_new_level")
        description = st.text_area("Description", key="ktmpl_new_description")
        chosen = st.multiselect("KRAs", list(by_id), format_func=lambda k: by_id[k]["title"], key="ktmpl_new_kras")

        kras = []
        for kra_id in chosen:
            weight = st.slider(by_id[kra_id]["title"], 1, 100, int(by_id[kra_id]["weightage"]),
                               key=f"ktmpl_new_w_{kra_id}")
            kras.append({"title": by_id[kra_id]["title"], "weightage": weight, "kpis": list(by_id[kra_id]["kpis"])})

        issues = weightage_issues(kras)
        st.caption(f"Total weightage: {sum(k['weightage'] for k in kras)}%")
        tags = st.text_input("Tags", help="Comma separated", key="ktmpl_new_tags")

        if st.button("Save Template", type="primary"):
            if not name.strip():
                st.error("Template name is required.")
                return
            if issues:
                for issue in issues:
                    st.error(issue)
                return
            self.templates.append({
                "id": next_id("ktmpl"), "name": name.strip(), "description": description,
                "category": category, "department": department, "level": level, "kras": kras,
                "is_published": False, "is_default": False, "usage_count": 0, "rating": 0.0,
                "author": self.user.get("name"), "tags": split_tags(tags), "created_on": today_str(),
            })
            logger.info(f"KRA template '{name}' created by {self.user.get('email')}")
            st.success(f"Template '{name}' saved as a draft.")

    def render_body(self, user: dict) -> None:
        tab_lib, tab_popular, tab_build = st.tabs(["📚 Library", "🔥 Popular", "🧱 Build Template"])
        with tab_lib:
            self._render_library_tab()
        with tab_popular:
            self._render_popular_tab()
        with tab_build:
            self._render_build_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
