"""
apps/kra_management/kra_mapping.py

Map KRAs onto roles, departments, individuals and projects, with a
weightage per mapping. Active mappings are checked for conflicts: the
same KRA mapped twice onto one target, or more than 100% mapped onto
one target.
"""

import logging
from datetime import datetime

import graphviz
import pandas as pd
import streamlit as st

from common import data_access
from common.metrics import ALL, filter_mappings, mapping_conflicts
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

MAPPING_TYPES = ["ROLE", "DEPARTMENT", "INDIVIDUAL", "PROJECT"]


def mapping_graph(mappings) -> graphviz.Digraph:
    """KRA → target graph of the active mappings, edges labelled by weightage."""
    dot = graphviz.Digraph()
    dot.attr(rankdir="LR")
    dot.attr("node", shape="box", style="rounded,filled", fillcolor="#E8F0FE")
    for m in mappings:
        if not m.get("is_active"):
            continue
        dot.node(m["kra_id"], m["kra_title"])
        dot.node(f"target::{m['target_name']}", f"{m['target_name']}\n({m['mapping_type'].title()})",
                 fillcolor="#E6F4EA")
        dot.edge(m["kra_id"], f"target::{m['target_name']}", label=f"{m['weightage']}%")
    return dot


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "KRA Mapping",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo KRA mappings",
        }
        self.mappings = local_rows("kra_mappings", data_access.get_kra_mappings)
        self.kras = local_rows("kra_library", data_access.get_kra_library)

    # --- TAB 1: MAPPINGS ---
    def _render_mappings_tab(self):
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Mappings", len(self.mappings))
        c2.metric("Active", sum(1 for m in self.mappings if m["is_active"]))
        c3.metric("Auto-assign", sum(1 for m in self.mappings if m["auto_assign"]))
        c4.metric("Times Applied", sum(m.get("usage_count", 0) for m in self.mappings))

        kra_titles = {k["id"]: k["title"] for k in self.kras}
        c1, c2, c3 = st.columns([2, 1, 1])
        term = c1.text_input("Search", placeholder="KRA or target...", key="kra_map_search")
        mapping_type = c2.selectbox("Type", [ALL] + MAPPING_TYPES, key="kra_map_type")
        kra_id = c3.selectbox("KRA", [ALL] + list(kra_titles), key="kra_map_kra",
                              format_func=lambda k: kra_titles.get(k, k))

        rows = filter_mappings(self.mappings, term, mapping_type, kra_id)
        if not rows:
            st.info("No mappings match the current filters.")
            return

        df = pd.DataFrame(rows)
        df.insert(0, "select", False)
        edited = st.data_editor(
            df[["select", "kra_title", "mapping_type", "target_name", "weightage", "is_active", "auto_assign"]],
            use_container_width=True, hide_index=True, key="kra_map_editor",
            disabled=["kra_title", "mapping_type", "target_name", "weightage", "is_active", "auto_assign"],
        )
        selected = [rows[i]["id"] for i in edited.index[edited["select"]]]

        c1, c2, _ = st.columns([1, 1, 2])
        for label, active, col in (("Activate selected", True, c1), ("Deactivate selected", False, c2)):
            if col.button(label, disabled=not selected, key=f"kra_map_bulk_{active}"):
                for m in self.mappings:
                    if m["id"] in selected:
                        m["is_active"] = active
                logger.info(f"{len(selected)} KRA mapping(s) set active={active} by {self.user.get('email')}")
                st.rerun()

    # --- TAB 2: NEW MAPPING ---
    def _render_create_tab(self):
        live = [k for k in self.kras if k["status"] in ("ACTIVE", "APPROVED")]
        if not live:
            st.info("There are no active KRAs to map.")
            return
        by_id = {k["id"]: k for k in live}
        with st.form("kra_map_form", clear_on_submit=True):
            kra_id = st.selectbox("KRA", list(by_id), format_func=lambda k: by_id[k]["title"])
            c1, c2 = st.columns(2)
            mapping_type = c1.selectbox("Map onto", MAPPING_TYPES)
            target = c2.text_input("Target", placeholder="e.g. Sales Representative")
            c1, c2 = st.columns(2)
            weightage = c1.number_input("Weightage (%)", min_value=1, max_value=100, value=25)
            auto_assign = c2.checkbox("Auto-assign to new members", value=True)
            conditions = st.text_area("Conditions", help="One per line, e.g. Experience: ≥2 years")
            submitted = st.form_submit_button("Create Mapping")

        if not submitted:
            return
        if not target.strip():
            st.error("Target is required.")
            return

        mapping = {
            "id": next_id("map"), "kra_id": kra_id, "kra_title": by_id[kra_id]["title"],
            "mapping_type": mapping_type, "target_name": target.strip(), "target_type": mapping_type.title(),
            "weightage": int(weightage), "is_active": True, "auto_assign": auto_assign,
            "conditions": [c.strip() for c in conditions.splitlines() if c.strip()],
            "created_by": self.user.get("name"), "created_on": today_str(), "usage_count": 0,
        }
        clashes = mapping_conflicts(self.mappings + [mapping])
        if any(c["target"] == mapping["target_name"] for c in clashes):
            for c in clashes:
                if c["target"] == mapping["target_name"]:
                    st.error(f"{c['target']}: {c['issue']}")
            return
        self.mappings.append(mapping)
        logger.info(f"KRA {kra_id} mapped onto {target} by {self.user.get('email')}")
        st.success(f"Mapped '{mapping['kra_title']}' onto {mapping['target_name']}.")

    # --- TAB 3: RULES ---
    def _render_rules_tab(self):
        conflicts = mapping_conflicts(self.mappings)
        if conflicts:
            st.warning(f"{len(conflicts)} conflict(s) among the active mappings.")
            st.dataframe(pd.DataFrame(conflicts), use_container_width=True, hide_index=True)
        else:
            st.success("No conflicts among the active mappings.")

        st.graphviz_chart(mapping_graph(self.mappings), use_container_width=True)

        st.markdown("##### Assignment Conditions")
        for m in self.mappings:
            if m.get("conditions"):
                st.markdown(f"**{m['kra_title']} → {m['target_name']}**: " + "; ".join(m["conditions"]))

    def render_body(self, user: dict) -> None:
        tab_list, tab_create, tab_rules = st.tabs(["🕸️ Mappings", "➕ New Mapping", "📐 Rules & Conflicts"])
        with tab_list:
            self._render_mappings_tab()
        with tab_create:
            self._render_create_tab()
        with tab_rules:
            self._render_rules_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
