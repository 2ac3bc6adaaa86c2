"""
apps/reviews/review_templates.py

Review templates: which sections a review form has, how each is
weighted, and the rating scale. A template is only saved when its
section weights add up to 100%. Admin and HR may activate templates and
pick the default; managers may build and duplicate them.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, search_records, weightage_issues
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

TEMPLATE_TYPES = ["Self-Assessment", "R1-Review", "R2-Review", "Goal-KRA-Matrix", "Custom"]
TEMPLATE_CATEGORIES = ["Annual", "Quarterly", "Project-Based", "Custom"]
SECTION_TYPES = ["KRA", "Goal", "Competency", "Custom"]

RATING_SCALES = {
    "5-point": ["Unsatisfactory", "Below Expectations", "Meets Expectations", "Exceeds Expectations", "Outstanding"],
    "4-point": ["Below Expectations", "Meets Expectations", "Exceeds Expectations", "Outstanding"],
    "10-point": [str(i) for i in range(1, 11)],
}

ADMIN_ROLES = ("ADMIN", "HR")


def duplicate_template(template: dict, author: str) -> dict:
    copy_ = dict(template, sections=[dict(s) for s in template["sections"]])
    copy_.update(
        id=next_id("rtmpl"), name=f"{template['name']} (Copy)", is_default=False, is_active=False,
        created_by=author, created_on=today_str(), last_modified=today_str(), usage_count=0,
    )
    return copy_


def make_default(templates: list, template_id: str) -> None:
    """One default template per category; the default is always active."""
    chosen = next(t for t in templates if t["id"] == template_id)
    for t in templates:
        if t["category"] == chosen["category"]:
            t["is_default"] = t["id"] == template_id
    chosen["is_active"] = True


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.is_admin = user.get("role") in ADMIN_ROLES
        self.meta = {
            "title_override": "Review Templates",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo review templates",
        }
        self.templates = local_rows("review_templates", data_access.get_review_templates)

    # --- TAB 1: TEMPLATES ---
    def _render_templates_tab(self):
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Templates", len(self.templates))
        c2.metric("Active", sum(1 for t in self.templates if t["is_active"]))
        c3.metric("Times Used", sum(t.get("usage_count", 0) for t in self.templates))
        c4.metric("Defaults", sum(1 for t in self.templates if t["is_default"]))

        c1, c2, c3 = st.columns([2, 1, 1])
        term = c1.text_input("Search", placeholder="Name or description...", key="rtmpl_search")
        category = c2.selectbox("Category", [ALL] + TEMPLATE_CATEGORIES, key="rtmpl_category")
        template_type = c3.selectbox("Type", [ALL] + TEMPLATE_TYPES, key="rtmpl_type")

        rows = [
            t for t in search_records(self.templates, term, ("name", "description"))
            if category in (ALL, t["category"]) and template_type in (ALL, t["type"])
        ]
        if not rows:
            st.info("No templates match the current filters.")
            return

        for t in rows:
            flags = ("🟢 Active" if t["is_active"] else "⚪ Inactive") + (" · ⭐ Default" if t["is_default"] else "")
            with st.expander(f"{t['name']} · {t['type']} · {t['category']} · {flags}"):
                st.write(t["description"])
                st.dataframe(pd.DataFrame(t["sections"]), use_container_width=True, hide_index=True)
                for issue in weightage_issues(t["sections"], field="weight"):
                    st.warning(issue)
                st.caption(f"Scale: {t['rating_scale']} · roles: {', '.join(t['applicable_roles'])} · "
                           f"departments: {', '.join(t['departments'])} · used {t['usage_count']}x")

                c1, c2, c3 = st.columns(3)
                if c1.button("Duplicate", key=f"rtmpl_dup_{t['id']}"):
                    self.templates.append(duplicate_template(t, self.user.get("name")))
                    logger.info(f"Review template {t['id']} duplicated by {self.user.get('email')}")
                    st.rerun()
                if self.is_admin:
                    if c2.button("Deactivate" if t["is_active"] else "Activate", key=f"rtmpl_act_{t['id']}",
                                 disabled=t["is_default"]):
                        t["is_active"] = not t["is_active"]
                        t["last_modified"] = today_str()
                        st.rerun()
                    if c3.button("Make default", key=f"rtmpl_def_{t['id']}", disabled=t["is_default"]):
                        make_default(self.templates, t["id"])
                        st.rerun()

    # --- TAB 2: BUILDER ---
    def _render_builder_tab(self):
        c1, c2 = st.columns(2)
        name = c1.text_input("Template Name", key="rtmpl_new_name")
        scale = c2.selectbox("Rating Scale", list(RATING_SCALES), key="rtmpl_new_scale")
        c1, c2 = st.columns(2)
        template_type = c1.selectbox("Type", TEMPLATE_TYPES, index=3, key="rtmpl_new_type")
        category = c2.selectbox("Category", TEMPLATE_CATEGORIES, key="rtmpl_new_category")
        description = st.text_area("Description", key="rtmpl_new_description")
        st.caption("Scale labels: " + " · ".join(RATING_SCALES[scale]))

        st.markdown("##### Sections")
        seed = pd.DataFrame([
            {"title": "Key Result Areas", "type": "KRA", "weight": 60, "is_required": True},
            {"title": "Individual Goals", "type": "Goal", "weight": 30, "is_required": True},
            {"title": "Core Competencies", "type": "Competency", "weight": 10, "is_required": False},
        ])
        edited = st.data_editor(
            seed, num_rows="dynamic", use_container_width=True, hide_index=True, key="rtmpl_new_sections",
            column_config={
                "type": st.column_config.SelectboxColumn("Type", options=SECTION_TYPES, required=True),
                "weight": st.column_config.NumberColumn("Weight (%)", min_value=0, max_value=100, step=5),
            },
        )
        sections = [s for s in edited.to_dict("records") if str(s.get("title") or "").strip()]
        issues = weightage_issues(sections, field="weight")
        st.caption(f"Total weight: {sum(s.get('weight') or 0 for s in sections):g}%")

        if st.button("Save Template", type="primary"):
            if not name.strip():
                st.error("Template name is required.")
                return
            if issues:
                for issue in issues:
                    st.error(issue)
                return
            self.templates.append({
                "id": next_id("rtmpl"), "name": name.strip(), "description": description, "type": template_type,
                "category": category, "is_active": self.is_admin, "is_default": False, "rating_scale": scale,
                "sections": sections, "applicable_roles": ["EMPLOYEE", "TEAMLEAD", "MANAGER"],
                "departments": ["All"], "created_by": self.user.get("name"), "created_on": today_str(),
                "last_modified": today_str(), "usage_count": 0,
            })
            logger.info(f"Review template '{name}' created by {self.user.get('email')}")
            st.success(f"Template '{name}' saved." + ("" if self.is_admin else " HR will activate it."))

    # --- TAB 3: LIBRARY ---
    def _render_library_tab(self):
        library = data_access.get_review_template_library()
        for item in library:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"**{item['name']}** · {item['category']} · ⭐ {item['rating']}")
                c1.caption(f"{item['description']} · by {item['author']} · {item['download_count']} downloads")
                if c2.button("Import", key=f"rtmpl_lib_{item['id']}"):
                    self.templates.append({
                        "id": next_id("rtmpl"), "name": item["name"], "description": item["description"],
                        "type": "Custom", "category": "Custom", "is_active": False, "is_default": False,
                        "rating_scale": "5-point",
                        "sections": [{"title": "Overall Performance", "type": "Custom", "weight": 100,
                                      "is_required": True}],
                        "applicable_roles": ["EMPLOYEE"], "departments": ["All"],
                        "created_by": item["author"], "created_on": today_str(), "last_modified": today_str(),
                        "usage_count": 0,
                    })
                    st.success(f"'{item['name']}' imported as an inactive template.")

        df = pd.DataFrame(self.templates)
        fig = px.bar(df, x="name", y="usage_count", color="category", title="Template Usage")
        st.plotly_chart(fig, use_container_width=True)

    def render_body(self, user: dict) -> None:
        tab_list, tab_build, tab_lib = st.tabs(["🗂️ Templates", "🧱 Builder", "📚 Library"])
        with tab_list:
            self._render_templates_tab()
        with tab_build:
            self._render_builder_tab()
        with tab_lib:
            self._render_library_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
