"""
apps/user_management/reviewer_mapping.py

Reviewer mapping: who reviews whom. Every employee gets an R1 (first
line) reviewer and optionally an R2. The hierarchy tab draws the
resulting reviewer tree with Graphviz.
"""

import logging
from datetime import datetime

import graphviz
import pandas as pd
import streamlit as st

from common import data_access
from common.metrics import reviewer_coverage, search_records
from common.page_state import local_rows

logger = logging.getLogger(__name__)

NO_REVIEWER = "(none)"
REVIEWER_ROLES = ("ADMIN", "HR", "MANAGER", "TEAMLEAD")


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Reviewer Mapping",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo employee directory",
        }
        self.employees = local_rows("employees", data_access.get_employees)

    def _reviewer_names(self):
        return sorted({e["name"] for e in self.employees if e.get("role") in REVIEWER_ROLES})

    # --- TAB 1: MAPPINGS ---
    def _render_mapping_tab(self):
        cov = reviewer_coverage(self.employees)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Employees", cov["total"])
        c2.metric("With R1", cov["with_r1"])
        c3.metric("With R2", cov["with_r2"])
        c4.metric("R1 Coverage", f"{cov['coverage_pct']}%")

        if cov["unmapped"]:
            st.warning(f"{cov['unmapped']} employee(s) have no R1 reviewer.")

        term = st.text_input("Search", placeholder="Employee or reviewer...", key="mapping_search")
        rows = search_records(self.employees, term, ("name", "department", "r1_reviewer", "r2_reviewer"))
        df = pd.DataFrame(rows)
        if df.empty:
            st.info("No employees match your search.")
            return
        st.dataframe(df[["name", "role", "department", "r1_reviewer", "r2_reviewer"]],
                     use_container_width=True, hide_index=True)

    # --- TAB 2: ASSIGN ---
    def _render_assign_tab(self):
        by_id = {e["id"]: e for e in self.employees}
        selected = st.selectbox("Employee", list(by_id), format_func=lambda eid: by_id[eid]["name"],
                                key="mapping_employee")
        employee = by_id[selected]
        candidates = [NO_REVIEWER] + [n for n in self._reviewer_names() if n != employee["name"]]

        def _index(name):
            return candidates.index(name) if name in candidates else 0

        with st.form("assign_reviewer_form"):
            c1, c2 = st.columns(2)
            r1 = c1.selectbox("R1 Reviewer", candidates, index=_index(employee.get("r1_reviewer")),
                              key=f"mapping_r1_{selected}")
            r2 = c2.selectbox("R2 Reviewer", candidates, index=_index(employee.get("r2_reviewer")),
                              key=f"mapping_r2_{selected}")
            submitted = st.form_submit_button("Save Mapping")

        if not submitted:
            return
        if r1 == NO_REVIEWER and r2 != NO_REVIEWER:
            st.error("Assign an R1 reviewer before an R2 reviewer.")
            return
        if r1 != NO_REVIEWER and r1 == r2:
            st.error("R1 and R2 must be different people.")
            return

        employee["r1_reviewer"] = None if r1 == NO_REVIEWER else r1
        employee["r2_reviewer"] = None if r2 == NO_REVIEWER else r2
        logger.info(f"Reviewers for {employee['email']} set to R1={employee['r1_reviewer']} "
                    f"R2={employee['r2_reviewer']} by {self.user.get('email')}")
        st.success(f"Reviewer mapping saved for {employee['name']}.")

    # --- TAB 3: HIERARCHY ---
    def _render_hierarchy_tab(self):
        try:
            dot = graphviz.Digraph(comment="Reviewer Hierarchy")
            dot.attr(rankdir="TB", ranksep="0.8", nodesep="0.4")
            dot.attr("node", shape="box", style="rounded,filled", fillcolor="white", fontname="Arial")
            dot.attr("edge", fontname="Arial", fontsize="9", arrowsize="0.7")

            color_map = {
                "ADMIN": "#FFD1D1",
                "HR": "#E8D1FF",
                "MANAGER": "#D1E8FF",
                "TEAMLEAD": "#D1FFD6",
                "EMPLOYEE": "#F5F5F5",
            }
            names = {e["name"] for e in self.employees}
            for e in self.employees:
                dot.node(e["name"], label=f"{e['name']}\n{e['role']}", fillcolor=color_map.get(e["role"], "#F5F5F5"))
            for e in self.employees:
                if e.get("r1_reviewer") in names:
                    dot.edge(e["r1_reviewer"], e["name"], label="R1")
                if e.get("r2_reviewer") in names:
                    dot.edge(e["r2_reviewer"], e["name"], label="R2", style="dashed")

            st.graphviz_chart(dot, use_container_width=True)
        except Exception as e:
            logger.exception("Could not render reviewer hierarchy")
            st.error(f"Could not render reviewer hierarchy. Is Graphviz installed? Error: {e}")

    def render_body(self, user: dict) -> None:
        tab_map, tab_assign, tab_tree = st.tabs(["🗺️ Mappings", "✏️ Assign", "🌳 Hierarchy"])
        with tab_map:
            self._render_mapping_tab()
        with tab_assign:
            self._render_assign_tab()
        with tab_tree:
            self._render_hierarchy_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
