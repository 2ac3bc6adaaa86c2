"""
apps/masters/kra_master.py

KRA (Key Result Area) master. KRAs are weighted; the weightage of the
active KRAs in one department should add up to 100%.
"""

import plotly.express as px
import pandas as pd
import streamlit as st

from common import data_access
from common.master_page import Field, MasterPage

KRA_CATEGORIES = ["INDIVIDUAL", "TEAM", "ORGANIZATIONAL"]
FREQUENCIES = ["MONTHLY", "QUARTERLY", "HALF_YEARLY", "YEARLY"]


class Page(MasterPage):
    title = "KRA Master"
    entity = "KRA"
    state_key = "kras"
    id_prefix = "kra"
    name_field = "title"
    unique_field = "title"
    count_field = "weightage"
    count_label = "Total Weightage %"
    search_fields = ("title", "description", "department", "domain", "category")
    table_columns = ["title", "category", "department", "domain", "weightage", "target_value", "frequency", "is_active"]
    fields = [
        Field("title", "KRA Title", required=True),
        Field("category", "Category", kind="select", options=KRA_CATEGORIES),
        Field("department", "Department", required=True),
        Field("domain", "Domain"),
        Field("weightage", "Weightage (%)", kind="number"),
        Field("frequency", "Frequency", kind="select", options=FREQUENCIES),
        Field("target_value", "Target Value"),
        Field("measurement_criteria", "Measurement Criteria"),
        Field("description", "Description", kind="textarea"),
    ]

    def load_records(self):
        return data_access.get_kras()

    def _render_overview_tab(self):
        super()._render_overview_tab()

        df = pd.DataFrame([k for k in self.records if k.get("is_active", True)])
        if df.empty:
            return

        st.markdown("##### Weightage by Department")
        totals = df.groupby("department")["weightage"].sum().reset_index()
        for row in totals.itertuples():
            if row.weightage != 100:
                st.warning(f"{row.department}: active KRA weightage adds up to {row.weightage:g}%, not 100%.")

        fig = px.pie(df, names="title", values="weightage", title="Weightage split")
        st.plotly_chart(fig, use_container_width=True)


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
