"""
apps/reports/export_center.py

Export centre: pick any dataset the signed-in role can see and download
it as CSV.
"""

import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from common import data_access
from config import ADMIN_HR, LEADERSHIP_ROLES

logger = logging.getLogger(__name__)

# name -> (loader, roles allowed; None means everyone)
DATASETS = {
    "My Goals": (data_access.get_my_goals, None),
    "My Reviews": (data_access.get_my_reviews, None),
    "Goal Evidence": (data_access.get_evidence, None),
    "Team Members": (data_access.get_team_members, LEADERSHIP_ROLES),
    "Team Goals": (data_access.get_team_goals, LEADERSHIP_ROLES),
    "Team Reviews": (data_access.get_team_reviews, LEADERSHIP_ROLES),
    "Department Metrics": (data_access.get_department_metrics, ADMIN_HR),
    "Organisation Trend": (data_access.get_org_trend, ADMIN_HR),
    "Employees": (data_access.get_employees, ADMIN_HR),
    "Departments": (data_access.get_departments, ADMIN_HR),
    "Domains": (data_access.get_domains, ADMIN_HR),
    "Projects": (data_access.get_projects, ADMIN_HR),
    "KRAs": (data_access.get_kras, ADMIN_HR),
    "Bulk Operations": (data_access.get_bulk_operations, ADMIN_HR),
}


def datasets_for_role(role: str) -> list:
    return [name for name, (_, roles) in DATASETS.items() if roles is None or role in roles]


def _flat(value):
    if isinstance(value, list):
        return "; ".join(map(str, value))
    if isinstance(value, dict):
        return "; ".join(f"{k}={v}" for k, v in value.items())
    return value


def dataset_frame(name: str) -> pd.DataFrame:
    """Load a dataset as a flat frame; list and dict values become "; "-joined text."""
    loader, _ = DATASETS[name]
    df = pd.DataFrame(loader())
    for col in df.columns:
        df[col] = df[col].map(_flat)
    return df


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Export Center",
            "owner": "HR Analytics",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "All demo datasets",
        }
        self.available = datasets_for_role(user.get("role"))

    def render_body(self, user: dict) -> None:
        name = st.selectbox("Dataset", self.available, key="export_dataset")
        df = dataset_frame(name)

        columns = st.multiselect("Columns", list(df.columns), default=list(df.columns), key=f"export_cols_{name}")
        if not columns:
            st.info("Pick at least one column.")
            return

        st.caption(f"{len(df)} rows · {len(columns)} columns")
        st.dataframe(df[columns].head(50), use_container_width=True, hide_index=True)

        file_name = f"{name.lower().replace(' ', '_')}_{datetime.now():%Y%m%d}.csv"
        if st.download_button("⬇️ Download CSV", data=df[columns].to_csv(index=False),
                              file_name=file_name, mime="text/csv", type="primary"):
            logger.info(f"Export '{name}' downloaded by {self.user.get('email')}")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
