"""
apps/goals/goal_templates.py

Reusable goal templates. Anyone can browse and use a template (which
copies it into My Goals); Admin, HR and managers can author new ones.
"""

import logging
from datetime import datetime, timedelta

import pandas as pd
import streamlit as st

from common import data_access
from common.metrics import ALL, filter_templates, split_tags, template_summary
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

CATEGORIES = ["TECHNICAL", "PROFESSIONAL", "LEADERSHIP", "PERSONAL"]
DIFFICULTIES = ["BEGINNER", "INTERMEDIATE", "ADVANCED", "EXPERT"]
AUTHOR_ROLES = ("ADMIN", "HR", "MANAGER")


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.can_author = user.get("role") in AUTHOR_ROLES
        self.meta = {
            "title_override": "Goal Templates",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo template library",
        }
        self.templates = local_rows("goal_templates", data_access.get_goal_templates)
        self.my_goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))

    def _use_template(self, template):
        goal = {
            "id": next_id("goal"), "title": template["title"], "description": template["description"],
            "category": template["category"], "priority": template["priority"], "status": "ACTIVE",
            "progress": 0, "start_date": today_str(),
            "target_date": (datetime.now().date() + timedelta(days=template["estimated_duration"])).isoformat(),
            "achievement": "NOT_STARTED", "kra_id": None, "kra_name": None, "evidence_count": 0,
            "manager_approved": False, "target_value": template["target_value"], "current_value": "0",
            "measurement_unit": template["measurement_unit"], "milestones": list(template["milestones"]),
            "tags": list(template["tags"]), "created_on": today_str(),
        }
        self.my_goals.append(goal)
        template["usage_count"] = template.get("usage_count", 0) + 1
        logger.info(f"Template {template['id']} used by {self.user.get('email')}")

    def _render_library_tab(self):
        s = template_summary(self.templates)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Templates", s["total"])
        c2.metric("Approved", s["approved"])
        c3.metric("Times Used", s["total_usage"])
        c4.metric("Average Rating", s["avg_rating"])

        c1, c2, c3, c4 = st.columns([2, 1, 1, 1])
        term = c1.text_input("Search", placeholder="Title, skill, tag...", key="tmpl_search")
        category = c2.selectbox("Category", [ALL] + CATEGORIES, key="tmpl_category")
        difficulty = c3.selectbox("Difficulty", [ALL] + DIFFICULTIES, key="tmpl_difficulty")
        approved_only = c4.checkbox("Approved only", value=True, key="tmpl_approved")

        templates = filter_templates(self.templates, term, category, difficulty, approved_only)
        if not templates:
            st.info("No templates match the current filters.")
            return

        for t in sorted(templates, key=lambda t: t.get("usage_count", 0), reverse=True):
            with st.expander(f"{t['title']} · ⭐ {t['rating']} · used {t['usage_count']}x"):
                st.write(t["description"])
                c1, c2, c3 = st.columns(3)
                c1.caption(f"**Category:** {t['category']}")
                c2.caption(f"**Difficulty:** {t['difficulty']}")
                c3.caption(f"**Duration:** {t['estimated_duration']} days")
                if t.get("milestones"):
                    st.markdown("**Milestones:** " + " → ".join(t["milestones"]))
                if t.get("required_skills"):
                    st.markdown("**Skills:** " + ", ".join(t["required_skills"]))
                if st.button("Use this template", key=f"use_{t['id']}", disabled=not t.get("is_approved")):
                    self._use_template(t)
                    st.success(f"'{t['title']}' added to My Goals.")

    def _render_author_tab(self):
        if not self.can_author:
            st.info("Only Admin, HR and managers can create templates.")
            return

        with st.form("new_template_form", clear_on_submit=True):
            title = st.text_input("Title")
            description = st.text_area("Description")
            c1, c2, c3 = st.columns(3)
            category = c1.selectbox("Category", CATEGORIES)
            difficulty = c2.selectbox("Difficulty", DIFFICULTIES, index=1)
            duration = c3.number_input("Estimated Duration (days)", min_value=1, value=90)
            c1, c2 = st.columns(2)
            target_value = c1.text_input("Target Value")
            unit = c2.text_input("Measurement Unit")
            milestones = st.text_input("Milestones", help="Comma separated")
            skills = st.text_input("Required Skills", help="Comma separated")
            tags = st.text_input("Tags", help="Comma separated")
            is_public = st.checkbox("Visible to everyone", value=True)
            submitted = st.form_submit_button("Create Template")

        if not submitted:
            return
        if not title.strip() or not description.strip():
            st.error("Title and description are required.")
            return

        # HR and Admin templates are approved straight away; manager templates wait for HR.
        approved = self.user.get("role") in ("ADMIN", "HR")
        self.templates.append({
            "id": next_id("tmpl"), "title": title.strip(), "description": description, "category": category,
            "priority": "MEDIUM", "estimated_duration": int(duration), "target_value": target_value,
            "measurement_unit": unit, "milestones": split_tags(milestones), "success_criteria": [],
            "required_skills": split_tags(skills), "difficulty": difficulty, "tags": split_tags(tags),
            "is_public": is_public, "is_approved": approved, "usage_count": 0, "rating": 0.0,
            "created_by_name": self.user.get("name"), "created_date": today_str(),
            "department": self.user.get("department"), "kra_alignment": [],
        })
        logger.info(f"Template '{title}' created by {self.user.get('email')}")
        st.success("Template created." if approved else "Template created and sent to HR for approval.")

    def _render_table_tab(self):
        df = pd.DataFrame(self.templates)
        st.dataframe(
            df[["title", "category", "difficulty", "estimated_duration", "usage_count", "rating",
                "is_approved", "is_public", "created_by_name"]],
            use_container_width=True, hide_index=True,
        )

    def render_body(self, user: dict) -> None:
        tab_lib, tab_author, tab_table = st.tabs(["📚 Library", "✍️ Create Template", "📋 All Templates"])
        with tab_lib:
            self._render_library_tab()
        with tab_author:
            self._render_author_tab()
        with tab_table:
            self._render_table_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
