"""
apps/kra_management/kra_operations.py

The KRA library: search and filter KRAs, create new ones, and move them
through DRAFT → ACTIVE → APPROVED → ARCHIVED. Only Admin and HR may
approve.

-------------------------------------------------------------------------------
TABS:
-------------------------------------------------------------------------------
1.  "📋 Library": filters, the KRA list with status actions.
2.  "➕ Create KRA": new KRA form (starts as DRAFT unless marked active).
3.  "📊 Analytics": usage and rating charts.
-------------------------------------------------------------------------------
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, filter_kras, kra_summary, split_tags
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

KRA_CATEGORIES = ["INDIVIDUAL", "TEAM", "ORGANIZATIONAL"]
KRA_STATUSES = ["DRAFT", "ACTIVE", "APPROVED", "ARCHIVED"]

# status -> the statuses a KRA may move to next
NEXT_STATUSES = {
    "DRAFT": ["ACTIVE", "ARCHIVED"],
    "ACTIVE": ["APPROVED", "ARCHIVED"],
    "APPROVED": ["ARCHIVED"],
    "ARCHIVED": ["DRAFT"],
}

APPROVER_ROLES = ("ADMIN", "HR")


def validate_kra(values: dict, kras: list) -> list:
    errors = []
    if not str(values.get("title") or "").strip():
        errors.append("Title is required")
    if not str(values.get("description") or "").strip():
        errors.append("Description is required")
    weightage = values.get("weightage") or 0
    if not 1 <= weightage <= 100:
        errors.append("Weightage must be between 1 and 100")
    title = str(values.get("title") or "").strip().lower()
    if title and any(k["title"].strip().lower() == title and k["id"] != values.get("id") for k in kras):
        errors.append(f"A KRA called '{values['title']}' already exists")
    return errors


def change_status(kra: dict, new_status: str, user: dict) -> dict:
    if new_status not in NEXT_STATUSES.get(kra["status"], []):
        raise ValueError(f"Cannot move a {kra['status']} KRA to {new_status}")
    if new_status == "APPROVED" and user.get("role") not in APPROVER_ROLES:
        raise PermissionError("Only Admin and HR can approve KRAs")
    kra["status"] = new_status
    kra["last_modified"] = today_str()
    if new_status == "APPROVED":
        kra["approved_by"] = user.get("name")
    return kra


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "KRA Operations",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo KRA library",
        }
        self.kras = local_rows("kra_library", data_access.get_kra_library)
        self.departments = sorted({d["name"] for d in data_access.get_departments()} |
                                  {k["department"] for k in self.kras})

    # --- TAB 1: LIBRARY ---
    def _render_library_tab(self):
        s = kra_summary(self.kras)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Total KRAs", s["total"])
        c2.metric("Active", s["active"])
        c3.metric("Drafts", s["draft"])
        c4.metric("Average Rating", s["avg_rating"])

        c1, c2, c3 = st.columns([2, 1, 1])
        term = c1.text_input("Search", placeholder="Title, description or tag...", key="kra_ops_search")
        category = c2.selectbox("Category", [ALL] + KRA_CATEGORIES, key="kra_ops_category")
        status = c3.selectbox("Status", [ALL] + KRA_STATUSES, key="kra_ops_status")

        kras = filter_kras(self.kras, term, category, status)
        if not kras:
            st.info("No KRAs match the current filters.")
            return

        for kra in kras:
            with st.expander(f"{kra['title']} · {kra['status']} · v{kra['version']} · {kra['weightage']}%"):
                st.write(kra["description"])
                c1, c2, c3 = st.columns(3)
                c1.caption(f"**Category:** {kra['category']}")
                c2.caption(f"**Department:** {kra['department']}")
                c3.caption(f"**Used:** {kra['usage_count']}x · ⭐ {kra['rating']}")
                if kra.get("kpis"):
                    st.markdown("**KPIs:**\n" + "\n".join(f"- {kpi}" for kpi in kra["kpis"]))
                if kra.get("tags"):
                    st.caption("Tags: " + ", ".join(kra["tags"]))

                options = NEXT_STATUSES.get(kra["status"], [])
                c1, c2 = st.columns([2, 1])
                target = c1.selectbox("Move to", options, key=f"kra_next_{kra['id']}")
                if c2.button("Update Status", key=f"kra_move_{kra['id']}"):
                    try:
                        change_status(kra, target, self.user)
                    except (ValueError, PermissionError) as e:
                        st.error(str(e))
                    else:
                        logger.info(f"KRA {kra['id']} moved to {target} by {self.user.get('email')}")
                        st.rerun()

    # --- TAB 2: CREATE ---
    def _render_create_tab(self):
        with st.form("kra_create_form", clear_on_submit=True):
            c1, c2 = st.columns(2)
            title = c1.text_input("KRA Title")
            category = c2.selectbox("Category", KRA_CATEGORIES)
            description = st.text_area("Description")
            c1, c2 = st.columns(2)
            department = c1.selectbox("Department", self.departments)
            weightage = c2.number_input("Weightage (%)", min_value=1, max_value=100, value=25)
            kpis = st.text_area("Key Performance Indicators", help="One per line")
            tags = st.text_input("Tags", help="Comma separated")
            active = st.checkbox("Activate straight away", value=False)
            submitted = st.form_submit_button("Create KRA")

        if not submitted:
            return
        values = {"title": title.strip(), "description": description, "weightage": weightage}
        errors = validate_kra(values, self.kras)
        if errors:
            for error in errors:
                st.error(error)
            return

        self.kras.insert(0, dict(
            values, id=next_id("kra-lib"), category=category, department=department,
            status="ACTIVE" if active else "DRAFT", created_by=self.user.get("name"),
            created_on=today_str(), last_modified=today_str(), version=1, approved_by=None,
            usage_count=0, rating=0.0, tags=split_tags(tags),
            kpis=[line.strip() for line in kpis.splitlines() if line.strip()],
        ))
        logger.info(f"KRA '{title}' created by {self.user.get('email')}")
        st.success(f"KRA '{title}' created.")

    # --- TAB 3: ANALYTICS ---
    def _render_analytics_tab(self):
        df = pd.DataFrame(self.kras)
        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(df.sort_values("usage_count"), x="usage_count", y="title", orientation="h",
                         color="category", title="Usage by KRA")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            fig = px.histogram(df, x="status", color="category", title="KRAs by Status",
                               category_orders={"status": KRA_STATUSES})
            st.plotly_chart(fig, use_container_width=True)
        st.dataframe(
            df[["title", "category", "department", "weightage", "status", "version", "usage_count", "rating"]],
            use_container_width=True, hide_index=True,
        )

    def render_body(self, user: dict) -> None:
        tab_lib, tab_create, tab_stats = st.tabs(["📋 Library", "➕ Create KRA", "📊 Analytics"])
        with tab_lib:
            self._render_library_tab()
        with tab_create:
            self._render_create_tab()
        with tab_stats:
            self._render_analytics_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
