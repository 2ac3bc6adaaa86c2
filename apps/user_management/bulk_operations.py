"""
apps/user_management/bulk_operations.py

Bulk operations for Admin and HR.

-------------------------------------------------------------------------------
TABS:
-------------------------------------------------------------------------------
1.  "📥 Import": upload a CSV of employees, see a row-by-row validation
    preview, then start an import job for the valid rows.
2.  "⚙️ Bulk Actions": update / export / delete users in one department.
3.  "📧 Notifications": send one email template to a group of users.
4.  "📊 Operations": live progress of running jobs (pause / resume) and
    the history of finished ones.

Jobs are simulated: common/bulk_jobs.py advances them on a timer driven
by `st.fragment(run_every=...)`, so only the progress panel reruns.
-------------------------------------------------------------------------------
"""

import logging
import random
from datetime import datetime

import pandas as pd
import streamlit as st

from common import data_access
from common.bulk_jobs import (
    BULK_OPERATION_TYPES,
    advance_operation,
    has_running,
    import_template_frame,
    new_operation,
    operation_summary,
    pause_operation,
    resume_operation,
    validate_import_frame,
)
from common.page_state import local_rows, next_id
from config import BULK_TICK_SECONDS

logger = logging.getLogger(__name__)

STATUS_ICONS = {
    "pending": "⏳",
    "running": "🔄",
    "paused": "⏸️",
    "completed": "✅",
    "failed": "❌",
}

NOTIFY_GROUPS = {
    "All active employees": 150,
    "Managers and team leads": 35,
    "Employees with pending reviews": 23,
    "Employees with overdue goals": 15,
}


def _rng() -> random.Random:
    if "bulk_rng" not in st.session_state:
        st.session_state["bulk_rng"] = random.Random()
    return st.session_state["bulk_rng"]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Bulk Operations",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Simulated job runner",
        }
        self.operations = local_rows("bulk_operations", data_access.get_bulk_operations)
        self.employees = local_rows("employees", data_access.get_employees)

    def _start(self, op_type, name, description, total, success_ratio=1.0):
        op = new_operation(next_id("op"), op_type, name, description, total, success_ratio=success_ratio)
        self.operations.insert(0, op)
        logger.info(f"Bulk operation '{name}' ({op_type}, {total} records) started by {self.user.get('email')}")
        st.success(f"Started: {name}. Follow it on the Operations tab.")

    # --- TAB 1: IMPORT ---
    def _render_import_tab(self):
        st.markdown("Upload a CSV with the columns below. Rows are checked before anything is imported.")
        st.download_button(
            "⬇️ Download template",
            data=import_template_frame().to_csv(index=False),
            file_name="user_import_template.csv",
            mime="text/csv",
        )

        uploaded = st.file_uploader("Employee CSV", type=["csv"], key="bulk_upload")
        if uploaded is not None:
            try:
                raw = pd.read_csv(uploaded)
            except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
                st.error(f"Could not read {uploaded.name}: {e}")
                return
            source_name = uploaded.name
        else:
            st.caption("No file uploaded, showing the sample preview.")
            raw = pd.DataFrame(data_access.get_import_preview())
            source_name = "sample.csv"

        preview = validate_import_frame(raw, [e["email"] for e in self.employees])
        valid = preview[preview["status"] == "valid"]

        c1, c2, c3 = st.columns(3)
        c1.metric("Rows", len(preview))
        c2.metric("Valid", len(valid))
        c3.metric("With Errors", len(preview) - len(valid))

        st.dataframe(
            preview.style.apply(
                lambda row: ["background-color: #FFE5E5" if row["status"] == "error" else ""] * len(row), axis=1
            ),
            use_container_width=True, hide_index=True,
        )

        if st.button(f"Import {len(valid)} valid record(s)", disabled=valid.empty, type="primary"):
            self._start("import", f"Import from {source_name}", f"Import {len(valid)} valid records", len(valid))

    # --- TAB 2: BULK ACTIONS ---
    def _render_actions_tab(self):
        departments = sorted({e["department"] for e in self.employees if e.get("department")})
        with st.form("bulk_action_form"):
            c1, c2 = st.columns(2)
            action = c1.selectbox("Action", ["update", "export", "delete"],
                                  format_func=lambda t: BULK_OPERATION_TYPES[t])
            department = c2.selectbox("Department", ["All departments"] + departments)
            note = st.text_area("Details", placeholder="e.g. move to the new Platform domain")
            submitted = st.form_submit_button("Run Bulk Action")

        if not submitted:
            return
        targets = [e for e in self.employees if department == "All departments" or e.get("department") == department]
        if not targets:
            st.warning("No users in that department.")
            return
        self._start(action, f"Bulk {action.title()}", note or f"{action} users in {department.lower()}",
                    len(targets), success_ratio=0.96)

    # --- TAB 3: NOTIFICATIONS ---
    def _render_notify_tab(self):
        with st.form("bulk_notify_form", clear_on_submit=True):
            group = st.selectbox("Recipients", list(NOTIFY_GROUPS),
                                 format_func=lambda g: f"{g} ({NOTIFY_GROUPS[g]})")
            subject = st.text_input("Subject")
            body = st.text_area("Message", height=150)
            submitted = st.form_submit_button("Send Notification")

        if not submitted:
            return
        if not subject.strip() or not body.strip():
            st.error("Subject and message are required.")
            return
        self._start("notify", "Bulk Email Notification", f"{subject} → {group}", NOTIFY_GROUPS[group])

    # --- TAB 4: OPERATIONS ---
    def _render_progress(self):
        rng = _rng()
        was_running = has_running(self.operations)
        for op in self.operations:
            advance_operation(op, rng, max_step=15.0)
        if was_running and not has_running(self.operations):
            # last job finished: full rerun stops the timer and refreshes history
            st.rerun()

        summary = operation_summary(self.operations)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Running", summary["running"])
        c2.metric("Paused", summary["paused"])
        c3.metric("Completed", summary["completed"])
        c4.metric("Records Processed", summary["records_processed"])

        active = [op for op in self.operations if op["status"] in ("running", "paused", "pending")]
        if not active:
            st.caption("No jobs in progress.")
        for op in active:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"**{STATUS_ICONS[op['status']]} {op['name']}** · "
                            f"{BULK_OPERATION_TYPES.get(op['type'], op['type'])}")
                c1.progress(int(op["progress"]) / 100,
                            text=f"{op['processed_records']} / {op['total_records']} records")
                if op["status"] == "running":
                    if c2.button("Pause", key=f"pause_{op['id']}"):
                        pause_operation(op)
                        st.rerun()
                elif c2.button("Resume", key=f"resume_{op['id']}"):
                    resume_operation(op)
                    st.rerun()

    def _render_history(self):
        st.markdown("##### History")
        done = [op for op in self.operations if op["status"] in ("completed", "failed")]
        if not done:
            st.caption("No finished jobs yet.")
            return
        df = pd.DataFrame(done)
        st.dataframe(
            df[["name", "type", "status", "total_records", "success_count", "error_count", "created_at", "completed_at"]],
            use_container_width=True, hide_index=True,
        )
        for op in done:
            if op.get("errors"):
                with st.expander(f"Errors in {op['name']}"):
                    for error in op["errors"]:
                        st.markdown(f"- {error}")

    def render_body(self, user: dict) -> None:
        tab_import, tab_actions, tab_notify, tab_ops = st.tabs(
            ["📥 Import", "⚙️ Bulk Actions", "📧 Notifications", "📊 Operations"]
        )
        with tab_import:
            self._render_import_tab()
        with tab_actions:
            self._render_actions_tab()
        with tab_notify:
            self._render_notify_tab()
        with tab_ops:
            run_every = BULK_TICK_SECONDS if has_running(self.operations) else None
            st.fragment(run_every=run_every)(self._render_progress)()
            self._render_history()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
