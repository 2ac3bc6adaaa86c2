"""
apps/masters/domain_master.py

Domain master: skill areas (Development, QA, ...) with the skills and
certifications that belong to each.
"""

import pandas as pd
import streamlit as st

from common import data_access
from common.master_page import Field, MasterPage


class Page(MasterPage):
    title = "Domain Master"
    entity = "domain"
    state_key = "domains"
    id_prefix = "domain"
    search_fields = ("name", "code", "description", "skills", "certifications")
    table_columns = ["code", "name", "description", "employee_count", "is_active"]
    chart_field = "employee_count"
    fields = [
        Field("name", "Domain Name", required=True),
        Field("code", "Code", required=True),
        Field("skills", "Skills", kind="tags"),
        Field("certifications", "Certifications", kind="tags"),
        Field("description", "Description", kind="textarea"),
    ]

    def load_records(self):
        return data_access.get_domains()

    def _render_overview_tab(self):
        super()._render_overview_tab()

        st.markdown("##### Skills Catalogue")
        rows = [
            {"domain": d["name"], "skill": skill}
            for d in self.records if d.get("is_active", True)
            for skill in d.get("skills") or []
        ]
        if rows:
            counts = pd.DataFrame(rows).groupby("domain").size().reset_index(name="skills")
            st.bar_chart(counts, x="domain", y="skills")
        else:
            st.caption("No skills recorded yet.")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
