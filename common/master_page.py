"""
common/master_page.py

The shared recipe behind the four master-data pages (departments,
domains, projects, KRAs).

Each master page subclasses MasterPage and only declares its fields;
this module draws the same two tabs for all of them:

1.  "📋 Overview": summary metrics, a search box, the table and a chart.
2.  "🛠️ Manage": create a record, edit one, or flip it active/inactive.
    Records are never deleted, only deactivated.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from common.metrics import master_summary, search_records, split_tags
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)


class Field:
    """One input on the manage form."""

    def __init__(self, name, label, kind="text", options=None, required=False, help=None):
        self.name = name
        self.label = label
        self.kind = kind          # text | textarea | select | number | date | tags | checkbox
        self.options = options or []
        self.required = required
        self.help = help


def validate_master_record(record: Dict, records: List[Dict], fields: List[Field],
                           unique_field: Optional[str] = "code") -> List[str]:
    """Required-field and uniqueness checks for a master record."""
    errors = []
    for field in fields:
        if field.required and not str(record.get(field.name) or "").strip():
            errors.append(f"{field.label} is required")

    if unique_field and record.get(unique_field):
        wanted = str(record[unique_field]).strip().lower()
        clash = [r for r in records
                 if str(r.get(unique_field) or "").strip().lower() == wanted and r.get("id") != record.get("id")]
        if clash:
            errors.append(f"{unique_field.title()} '{record[unique_field]}' is already used")
    return errors


class MasterPage:
    title = "Master"
    entity = "record"
    state_key = "master"
    id_prefix = "rec"
    name_field = "name"
    unique_field = "code"
    count_field = "employee_count"
    count_label = "Employees"
    search_fields = ("name", "code", "description")
    table_columns: List[str] = []
    chart_field: Optional[str] = None
    fields: List[Field] = []
    data_source = "Demo master data"

    def __init__(self, user: dict, **options):
        self.user = user
        self.role = user.get("role")
        self.can_edit = self.role in ("ADMIN", "HR")

        self.meta = {
            "title_override": self.title,
            "owner": "PMS Admin Team",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": self.data_source,
            "coming_soon": False,
        }
        self.records = local_rows(self.state_key, self.load_records)

    def load_records(self) -> List[Dict]:
        raise NotImplementedError

    def _label(self, record):
        code = record.get(self.unique_field) if self.unique_field else None
        return f"{record.get(self.name_field)} ({code})" if code else str(record.get(self.name_field))

    # --- TAB 1: OVERVIEW ---
    def _render_overview_tab(self):
        summary = master_summary(self.records, self.count_field)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric(f"Total {self.entity.title()}s", summary["total"])
        c2.metric("Active", summary["active"])
        c3.metric("Inactive", summary["inactive"])
        c4.metric(self.count_label, summary["people"])

        st.markdown("---")
        c1, c2 = st.columns([3, 1])
        term = c1.text_input("Search", key=f"{self.state_key}_search",
                             placeholder=f"Search {self.entity}s...")
        show_inactive = c2.checkbox("Show inactive", key=f"{self.state_key}_inactive")

        rows = search_records(self.records, term, self.search_fields)
        if not show_inactive:
            rows = [r for r in rows if r.get("is_active", True)]

        if not rows:
            st.info(f"No {self.entity}s match your search.")
            return

        df = pd.DataFrame(rows)
        cols = [c for c in self.table_columns if c in df.columns] or list(df.columns)
        st.dataframe(df[cols], use_container_width=True, hide_index=True)

        if self.chart_field and self.chart_field in df.columns:
            fig = px.bar(df, x=self.name_field, y=self.chart_field,
                         title=f"{self.count_label} by {self.entity.title()}")
            st.plotly_chart(fig, use_container_width=True)

    # --- TAB 2: MANAGE ---
    def _input(self, field: Field, current, record_id):
        key = f"{self.state_key}_form_{record_id}_{field.name}"
        if field.kind == "textarea":
            return st.text_area(field.label, value=current or "", key=key, help=field.help)
        if field.kind == "select":
            index = field.options.index(current) if current in field.options else 0
            return st.selectbox(field.label, field.options, index=index, key=key, help=field.help)
        if field.kind == "number":
            return st.number_input(field.label, value=float(current or 0), min_value=0.0, key=key, help=field.help)
        if field.kind == "date":
            value = pd.to_datetime(current).date() if current else datetime.now().date()
            return st.date_input(field.label, value=value, key=key, help=field.help).isoformat()
        if field.kind == "checkbox":
            return st.checkbox(field.label, value=bool(current), key=key, help=field.help)
        if field.kind == "tags":
            return split_tags(st.text_input(field.label, value=", ".join(current or []), key=key,
                                            help=field.help or "Comma separated"))
        return st.text_input(field.label, value=current or "", key=key, help=field.help)

    def _render_manage_tab(self):
        if not self.can_edit:
            st.info(f"Only Admin and HR users can change {self.entity}s.")
            return

        action = st.radio("What do you want to do?", ["➕ Create New", "🛠️ Edit Existing"],
                          horizontal=True, key=f"{self.state_key}_action")

        record = {}
        if action == "🛠️ Edit Existing":
            if not self.records:
                st.info(f"There are no {self.entity}s yet.")
                return
            by_id = {r["id"]: r for r in self.records}
            selected = st.selectbox(f"Select {self.entity}", list(by_id),
                                    format_func=lambda rid: self._label(by_id[rid]),
                                    key=f"{self.state_key}_selected")
            record = by_id[selected]

            status = "Active" if record.get("is_active", True) else "Inactive"
            c1, c2 = st.columns([3, 1])
            c1.caption(f"Status: **{status}** · created {record.get('created_on', 'N/A')}")
            toggle_label = "Deactivate" if record.get("is_active", True) else "Activate"
            if c2.button(toggle_label, key=f"{self.state_key}_toggle"):
                record["is_active"] = not record.get("is_active", True)
                logger.info(f"{self.entity} {record['id']} set active={record['is_active']} by {self.user.get('email')}")
                st.rerun()

        with st.form(f"{self.state_key}_form"):
            st.markdown(f"##### {'Editing ' + self._label(record) if record else 'New ' + self.entity.title()}")
            values = {}
            for a, b in zip(self.fields[0::2], self.fields[1::2] + [None]):
                c1, c2 = st.columns(2)
                with c1:
                    values[a.name] = self._input(a, record.get(a.name), record.get("id", "new"))
                if b:
                    with c2:
                        values[b.name] = self._input(b, record.get(b.name), record.get("id", "new"))
            submitted = st.form_submit_button("Save")

        if not submitted:
            return

        candidate = dict(record, **values)
        errors = validate_master_record(candidate, self.records, self.fields, self.unique_field)
        if errors:
            for error in errors:
                st.error(error)
            return

        if record:
            record.update(values)
            st.success(f"{self._label(record)} updated.")
        else:
            candidate.update(
                id=next_id(self.id_prefix),
                is_active=True,
                created_by=self.user.get("email"),
                created_on=today_str(),
            )
            candidate.setdefault(self.count_field, 0)
            self.records.append(candidate)
            st.success(f"{self._label(candidate)} created.")
        logger.info(f"{self.entity} saved by {self.user.get('email')}")

    def render_body(self, user: dict) -> None:
        tab_overview, tab_manage = st.tabs(["📋 Overview", "🛠️ Manage"])
        with tab_overview:
            self._render_overview_tab()
        with tab_manage:
            self._render_manage_tab()
