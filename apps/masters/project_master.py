"""
apps/masters/project_master.py

Project master. Projects carry dates, budget and a status on top of the
usual master fields, so the overview adds a timeline.
"""

import altair as alt
import pandas as pd
import streamlit as st

from common import data_access
from common.master_page import Field, MasterPage

PROJECT_STATUSES = ["PLANNING", "ACTIVE", "ON_HOLD", "COMPLETED", "CANCELLED"]
PRIORITIES = ["LOW", "MEDIUM", "HIGH", "CRITICAL"]


class Page(MasterPage):
    title = "Project Master"
    entity = "project"
    state_key = "projects"
    id_prefix = "proj"
    count_field = "team_size"
    count_label = "Team Members"
    search_fields = ("name", "code", "description", "department_name", "lead_name")
    table_columns = ["code", "name", "department_name", "lead_name", "status", "priority",
                     "start_date", "end_date", "budget", "team_size"]
    chart_field = "team_size"
    fields = [
        Field("name", "Project Name", required=True),
        Field("code", "Code", required=True),
        Field("department_name", "Department"),
        Field("domain_name", "Domain"),
        Field("lead_name", "Project Lead"),
        Field("manager_name", "Manager"),
        Field("start_date", "Start Date", kind="date"),
        Field("end_date", "End Date", kind="date"),
        Field("status", "Status", kind="select", options=PROJECT_STATUSES),
        Field("priority", "Priority", kind="select", options=PRIORITIES),
        Field("budget", "Budget", kind="number"),
        Field("team_size", "Team Size", kind="number"),
        Field("description", "Description", kind="textarea"),
    ]

    def load_records(self):
        return data_access.get_projects()

    def _render_overview_tab(self):
        super()._render_overview_tab()

        df = pd.DataFrame([p for p in self.records if p.get("is_active", True)])
        if df.empty:
            return

        st.markdown("##### Project Timeline")
        chart = alt.Chart(df).mark_bar(opacity=0.8).encode(
            x=alt.X("start_date:T", title="Timeline"),
            x2="end_date:T",
            y=alt.Y("name", sort=None, title="Project"),
            color=alt.Color("status", title="Status"),
            tooltip=["name", "lead_name", "status", "start_date", "end_date"],
        ).interactive()
        st.altair_chart(chart, use_container_width=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
