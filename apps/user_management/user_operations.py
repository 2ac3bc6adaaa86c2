"""
apps/user_management/user_operations.py

Employee directory for Admin and HR: search and filter employees, add a
new one, and switch an employee between Active / Inactive / Pending.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.bulk_jobs import validate_import_record
from common.metrics import ALL, category_breakdown, search_records
from common.page_state import local_rows, next_id, today_str
from config import ROLES

logger = logging.getLogger(__name__)

USER_STATUSES = ["Active", "Inactive", "Pending"]


def filter_employees(employees, term="", role=ALL, department=ALL, status=ALL):
    hits = search_records(employees, term, ("name", "email", "employee_id", "department", "project"))
    return [
        e for e in hits
        if role in (ALL, e.get("role"))
        and department in (ALL, e.get("department"))
        and status in (ALL, e.get("status"))
    ]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")

        self.meta = {
            "title_override": "User Operations",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo employee directory",
        }
        self.employees = local_rows("employees", data_access.get_employees)

    # --- TAB 1: DIRECTORY ---
    def _render_directory_tab(self):
        counts = category_breakdown(self.employees, "status")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Total Users", len(self.employees))
        c2.metric("Active", counts.get("Active", 0))
        c3.metric("Inactive", counts.get("Inactive", 0))
        c4.metric("Pending", counts.get("Pending", 0))

        departments = sorted({e["department"] for e in self.employees if e.get("department")})
        c1, c2, c3, c4 = st.columns([2, 1, 1, 1])
        term = c1.text_input("Search", placeholder="Name, email, employee ID...", key="users_search")
        role = c2.selectbox("Role", [ALL] + list(ROLES), key="users_role")
        department = c3.selectbox("Department", [ALL] + departments, key="users_dept")
        status = c4.selectbox("Status", [ALL] + USER_STATUSES, key="users_status")

        rows = filter_employees(self.employees, term, role, department, status)
        if not rows:
            st.info("No users match the current filters.")
            return

        df = pd.DataFrame(rows)
        st.dataframe(
            df[["employee_id", "name", "email", "role", "department", "project", "manager", "status", "last_login"]],
            use_container_width=True, hide_index=True,
        )

        c1, c2 = st.columns(2)
        with c1:
            fig = px.pie(df, names="role", title="Users by Role")
            st.plotly_chart(fig, use_container_width=True)
        with c2:
            by_dept = df.groupby("department").size().reset_index(name="users")
            fig = px.bar(by_dept, x="department", y="users", title="Users by Department")
            st.plotly_chart(fig, use_container_width=True)

    # --- TAB 2: ADD USER ---
    def _render_add_tab(self):
        departments = sorted({d["name"] for d in data_access.get_departments()})
        with st.form("add_user_form", clear_on_submit=True):
            c1, c2 = st.columns(2)
            name = c1.text_input("Full Name")
            email = c2.text_input("Email")
            c1, c2 = st.columns(2)
            role = c1.selectbox("Role", list(ROLES), index=list(ROLES).index("EMPLOYEE"))
            department = c2.selectbox("Department", departments)
            c1, c2 = st.columns(2)
            domain = c1.text_input("Domain")
            project = c2.text_input("Project")
            c1, c2 = st.columns(2)
            manager = c1.text_input("Manager")
            phone = c2.text_input("Phone")
            submitted = st.form_submit_button("Add User")

        if not submitted:
            return

        record = {"name": name, "email": email, "role": role, "department": department}
        errors = validate_import_record(record, [e["email"] for e in self.employees])
        if errors:
            for error in errors:
                st.error(error)
            return

        employee = dict(
            record,
            id=next_id("emp"),
            employee_id=f"EMP{len(self.employees) + 1:03d}",
            phone=phone, domain=domain or None, project=project or None, manager=manager or None,
            join_date=today_str(), status="Pending", last_login=None,
            r1_reviewer=None, r2_reviewer=None,
        )
        self.employees.append(employee)
        logger.info(f"User {email} added by {self.user.get('email')}")
        st.success(f"{name} added with status Pending.")

    # --- TAB 3: STATUS ---
    def _render_status_tab(self):
        by_id = {e["id"]: e for e in self.employees}
        selected = st.selectbox("Employee", list(by_id),
                                format_func=lambda eid: f"{by_id[eid]['name']} ({by_id[eid]['email']})",
                                key="users_status_pick")
        employee = by_id[selected]
        st.caption(f"Current status: **{employee['status']}** · role {employee['role']}")

        new_status = st.radio("Set status", USER_STATUSES, index=USER_STATUSES.index(employee["status"]),
                              horizontal=True, key=f"users_status_radio_{selected}")
        if st.button("Update Status", disabled=new_status == employee["status"]):
            employee["status"] = new_status
            logger.info(f"User {employee['email']} set to {new_status} by {self.user.get('email')}")
            st.success(f"{employee['name']} is now {new_status}.")

    def render_body(self, user: dict) -> None:
        tab_dir, tab_add, tab_status = st.tabs(["👥 Directory", "➕ Add User", "🔁 Status"])
        with tab_dir:
            self._render_directory_tab()
        with tab_add:
            self._render_add_tab()
        with tab_status:
            self._render_status_tab()


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
