"""
apps/kra_management/kra_bulk_operations.py

Bulk jobs over the KRA library: import KRAs from CSV, export them, and
follow import / update / sync / clean-up jobs as they run. Jobs are
simulated by common/bulk_jobs.py, the same runner the user bulk
operations page uses.
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
    new_operation,
    operation_summary,
    pause_operation,
    resume_operation,
)
from common.metrics import ALL
from common.page_state import local_rows, next_id
from config import BULK_TICK_SECONDS

logger = logging.getLogger(__name__)

KRA_IMPORT_COLUMNS = ["title", "description", "category", "department", "weightage"]
KRA_CATEGORIES = ("INDIVIDUAL", "TEAM", "ORGANIZATIONAL")

STATUS_ICONS = {"pending": "⏳", "running": "🔄", "paused": "⏸️", "completed": "✅", "failed": "❌"}


def validate_kra_rows(df: pd.DataFrame, existing_titles=()) -> pd.DataFrame:
    """
    Row-by-row check of a KRA import. Adds `status` ("valid" / "error")
    and `errors` columns; titles must be new, also within the file.
    """
    seen = {str(t).strip().lower() for t in existing_titles}
    statuses, messages = [], []
    for row in df.to_dict("records"):
        errors = []
        for col in ("title", "description", "department"):
            if pd.isna(row.get(col)) or not str(row.get(col)).strip():
                errors.append(f"Missing {col}")
        if str(row.get("category") or "").upper() not in KRA_CATEGORIES:
            errors.append(f"Unknown category '{row.get('category')}'")
        weightage = pd.to_numeric(row.get("weightage"), errors="coerce")
        if pd.isna(weightage) or not 1 <= weightage <= 100:
            errors.append("Weightage must be between 1 and 100")
        title = str(row.get("title") or "").strip().lower()
        if title and title in seen:
            errors.append("Duplicate KRA title")
        seen.add(title)
        statuses.append("error" if errors else "valid")
        messages.append("; ".join(errors))

    out = df.copy()
    out["status"] = statuses
    out["errors"] = messages
    return out


def _rng() -> random.Random:
    if "kra_bulk_rng" not in st.session_state:
        st.session_state["kra_bulk_rng"] = random.Random()
    return st.session_state["kra_bulk_rng"]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "KRA Bulk Operations",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Simulated job runner",
        }
        self.operations = local_rows("kra_bulk_operations", data_access.get_kra_bulk_operations)
        self.kras = local_rows("kra_library", data_access.get_kra_library)

    def _start(self, op_type, name, description, total, success_ratio=1.0):
        op = new_operation(next_id("kbulk"), op_type, name, description, total, success_ratio=success_ratio)
        op.update(started_by=self.user.get("name"), warnings=[])
        self.operations.insert(0, op)
        logger.info(f"KRA bulk operation '{name}' ({op_type}, {total} records) started by {self.user.get('email')}")
        st.success(f"Started: {name}. Follow it on the Operations tab.")

    # --- TAB 1: OPERATIONS ---
    def _render_progress(self):
        rng = _rng()
        was_running = has_running(self.operations)
        for op in self.operations:
            advance_operation(op, rng, max_step=15.0)
        if was_running and not has_running(self.operations):
            st.rerun()

        summary = operation_summary(self.operations)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Running", summary["running"])
        c2.metric("Paused / Pending", summary["paused"] + summary["pending"])
        c3.metric("Failed", summary["failed"])
        c4.metric("Records Processed", summary["records_processed"])

        for op in [op for op in self.operations if op["status"] in ("running", "paused", "pending")]:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"**{STATUS_ICONS[op['status']]} {op['name']}** · "
                            f"{BULK_OPERATION_TYPES.get(op['type'], op['type'])}")
                c1.progress(int(op["progress"]) / 100,
                            text=f"{op['processed_records']} / {op['total_records']} records")
                if op["status"] == "running":
                    if c2.button("Pause", key=f"kra_pause_{op['id']}"):
                        pause_operation(op)
                        st.rerun()
                elif c2.button("Resume" if op["status"] == "paused" else "Start", key=f"kra_resume_{op['id']}"):
                    resume_operation(op)
                    st.rerun()

    def _render_history(self):
        c1, c2 = st.columns(2)
        status = c1.selectbox("Status", [ALL, "completed", "failed"], key="kra_bulk_status")
        op_type = c2.selectbox("Type", [ALL] + list(BULK_OPERATION_TYPES), key="kra_bulk_type")
        done = [
            op for op in self.operations
            if op["status"] in ("completed", "failed")
            and status in (ALL, op["status"]) and op_type in (ALL, op["type"])
        ]
        if not done:
            st.caption("No finished jobs match.")
            return
        st.dataframe(
            pd.DataFrame(done)[["name", "type", "status", "total_records", "success_count", "error_count",
                                "created_at", "completed_at"]],
            use_container_width=True, hide_index=True,
        )
        for op in done:
            if op.get("errors") or op.get("warnings"):
                with st.expander(f"Issues in {op['name']}"):
                    for error in op.get("errors", []):
                        st.markdown(f"- ❌ {error}")
                    for warning in op.get("warnings", []):
                        st.markdown(f"- ⚠️ {warning}")

    # --- TAB 2: IMPORT ---
    def _render_import_tab(self):
        st.markdown("Upload a CSV of KRAs. Rows are checked before anything is imported.")
        st.download_button(
            "⬇️ Download template",
            data=pd.DataFrame(columns=KRA_IMPORT_COLUMNS).to_csv(index=False),
            file_name="kra_import_template.csv",
            mime="text/csv",
        )
        uploaded = st.file_uploader("KRA CSV", type=["csv"], key="kra_bulk_upload")
        if uploaded is None:
            st.caption("No file uploaded.")
            return
        try:
            raw = pd.read_csv(uploaded)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            st.error(f"Could not read {uploaded.name}: {e}")
            return

        missing = [c for c in KRA_IMPORT_COLUMNS if c not in raw.columns]
        if missing:
            st.error(f"Missing column(s): {', '.join(missing)}")
            return

        preview = validate_kra_rows(raw, [k["title"] for k in self.kras])
        valid = preview[preview["status"] == "valid"]
        c1, c2 = st.columns(2)
        c1.metric("Valid", len(valid))
        c2.metric("With Errors", len(preview) - len(valid))
        st.dataframe(preview, use_container_width=True, hide_index=True)

        if st.button(f"Import {len(valid)} KRA(s)", disabled=valid.empty, type="primary"):
            self._start("import", f"KRA import from {uploaded.name}", f"Import {len(valid)} KRAs", len(valid))

    # --- TAB 3: EXPORT / UPDATE ---
    def _render_export_tab(self):
        departments = sorted({k["department"] for k in self.kras})
        department = st.selectbox("Department", [ALL] + departments, key="kra_bulk_dept")
        rows = [k for k in self.kras if department in (ALL, k["department"])]
        df = pd.DataFrame(rows)
        st.caption(f"{len(rows)} KRA(s) selected.")

        c1, c2 = st.columns(2)
        if c1.download_button("📤 Export CSV", data=df.to_csv(index=False), file_name="kras_export.csv",
                              mime="text/csv", disabled=df.empty):
            logger.info(f"{len(rows)} KRAs exported by {self.user.get('email')}")
        if c2.button("🔄 Sync with HRMS", disabled=df.empty):
            self._start("sync", "HRMS KRA Sync", f"Sync {len(rows)} KRAs", len(rows), success_ratio=0.9)

    def render_body(self, user: dict) -> None:
        tab_ops, tab_import, tab_export = st.tabs(["📊 Operations", "📥 Import", "📤 Export & Sync"])
        with tab_ops:
            run_every = BULK_TICK_SECONDS if has_running(self.operations) else None
            st.fragment(run_every=run_every)(self._render_progress)()
            self._render_history()
        with tab_import:
            self._render_import_tab()
        with tab_export:
            self._render_export_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
