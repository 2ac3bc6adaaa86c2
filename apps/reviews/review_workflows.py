"""
apps/reviews/review_workflows.py

Review workflows: the ordered stages a review passes through, drawn as
a Graphviz flow, plus a form for defining new workflows.
"""

import logging
from datetime import datetime

import graphviz
import streamlit as st

from common import data_access
from common.metrics import split_tags
from common.page_state import local_rows, next_id

logger = logging.getLogger(__name__)


def workflow_graph(workflow) -> graphviz.Digraph:
    dot = graphviz.Digraph(comment=workflow["name"])
    dot.attr(rankdir="LR", nodesep="0.4")
    dot.attr("node", shape="box", style="rounded,filled", fillcolor="#D1E8FF", fontname="Arial")
    dot.node("start", "Start", shape="circle", fillcolor="#D1FFD6")
    previous = "start"
    for i, stage in enumerate(workflow["stages"]):
        node_id = f"s{i}"
        dot.node(node_id, stage)
        dot.edge(previous, node_id)
        previous = node_id
    dot.node("end", "Done", shape="doublecircle", fillcolor="#D1FFD6")
    dot.edge(previous, "end")
    return dot


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Review Workflows",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo workflow config",
        }
        self.workflows = local_rows("review_workflows", data_access.get_review_workflows)

    def _render_list_tab(self):
        for wf in self.workflows:
            icon = "🟢" if wf["is_active"] else "⚪"
            with st.expander(f"{icon} {wf['name']} · {wf['applies_to']}", expanded=wf["is_active"]):
                try:
                    st.graphviz_chart(workflow_graph(wf), use_container_width=True)
                except Exception as e:
                    logger.exception(f"Could not draw workflow {wf['id']}")
                    st.error(f"Could not draw workflow. Is Graphviz installed? Error: {e}")
                reminders = f"every {wf['reminder_days']} days" if wf["auto_reminders"] else "off"
                st.caption(f"{len(wf['stages'])} stages · reminders {reminders}")
                label = "Deactivate" if wf["is_active"] else "Activate"
                if st.button(label, key=f"wf_toggle_{wf['id']}"):
                    wf["is_active"] = not wf["is_active"]
                    logger.info(f"Workflow {wf['id']} set active={wf['is_active']} by {self.user.get('email')}")
                    st.rerun()

    def _render_create_tab(self):
        with st.form("new_workflow_form", clear_on_submit=True):
            name = st.text_input("Workflow Name")
            stages = st.text_input("Stages", help="Comma separated, in order",
                                   placeholder="Self-Assessment, R1 Review, HR Calibration")
            applies_to = st.text_input("Applies To", value="All departments")
            c1, c2 = st.columns(2)
            auto_reminders = c1.checkbox("Automatic reminders", value=True)
            reminder_days = c2.number_input("Reminder every (days)", min_value=1, value=3)
            submitted = st.form_submit_button("Create Workflow")

        if not submitted:
            return
        stage_list = split_tags(stages)
        if not name.strip() or not stage_list:
            st.error("A name and at least one stage are required.")
            return
        if len(set(stage_list)) != len(stage_list):
            st.error("Stage names must be unique within a workflow.")
            return

        self.workflows.append({
            "id": next_id("wf"), "name": name.strip(), "stages": stage_list, "applies_to": applies_to,
            "is_active": True, "auto_reminders": auto_reminders, "reminder_days": int(reminder_days),
        })
        logger.info(f"Workflow '{name}' created by {self.user.get('email')}")
        st.success("Workflow created.")

    def render_body(self, user: dict) -> None:
        tab_list, tab_create = st.tabs(["🔀 Workflows", "➕ New Workflow"])
        with tab_list:
            self._render_list_tab()
        with tab_create:
            self._render_create_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
