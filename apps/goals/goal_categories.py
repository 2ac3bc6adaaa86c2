"""
apps/goals/goal_categories.py

Goal categories master (Admin and HR). A category limits how many goals
one person may hold in it, says whether its goals need manager approval,
and which departments may use it.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.master_page import Field, MasterPage
from common.metrics import ALL, completion_rate, filter_categories

COLORS = ["blue", "green", "purple", "orange", "red", "gray"]


class Page(MasterPage):
    title = "Goal Categories"
    entity = "category"
    state_key = "goal_categories"
    id_prefix = "cat"
    unique_field = "name"
    count_field = "total_goals"
    count_label = "Goals"
    search_fields = ("name", "description")
    table_columns = ["name", "description", "total_goals", "completed_goals", "avg_progress",
                     "max_goals_per_person", "required_approval", "department_access", "is_active"]
    fields = [
        Field("name", "Category Name", required=True),
        Field("color", "Colour", kind="select", options=COLORS),
        Field("description", "Description", kind="textarea", required=True),
        Field("max_goals_per_person", "Max Goals per Person", kind="number"),
        Field("department_access", "Departments", kind="tags", help="Comma separated, or All"),
        Field("required_approval", "Goals need manager approval", kind="checkbox"),
    ]
    data_source = "Demo goal categories"

    def load_records(self):
        return data_access.get_goal_categories()

    def _render_overview_tab(self):
        super()._render_overview_tab()

        status = st.radio("Show", [ALL, "ACTIVE", "INACTIVE"], horizontal=True, key="goal_cat_status")
        rows = filter_categories(self.records, status=status)
        if not rows:
            return
        df = pd.DataFrame(rows).fillna({"completed_goals": 0, "avg_progress": 0})
        df["completion_rate"] = [completion_rate(r.get("completed_goals", 0), r.get("total_goals", 0)) for r in rows]

        c1, c2 = st.columns(2)
        with c1:
            fig = px.bar(df, x="name", y=["total_goals", "completed_goals"], barmode="group",
                         title="Goals per Category")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            fig = px.bar(df, x="name", y="completion_rate", range_y=[0, 100], color="name",
                         title="Completion Rate (%)")
            fig.update_layout(showlegend=False)
            st.plotly_chart(fig, use_container_width=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
