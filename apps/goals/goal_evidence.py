"""
apps/goals/goal_evidence.py

Evidence attached to goals: documents, links and images that back up
progress. Employees submit evidence; managers review it.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, evidence_summary, filter_evidence, split_tags
from common.page_state import local_rows, next_id, today_str

logger = logging.getLogger(__name__)

EVIDENCE_TYPES = ["DOCUMENT", "LINK", "IMAGE", "VIDEO", "REPORT", "CERTIFICATE"]
EVIDENCE_STATUSES = ["PENDING", "APPROVED", "NEEDS_REVISION", "REJECTED"]
STATUS_ICONS = {"PENDING": "⏳", "APPROVED": "✅", "NEEDS_REVISION": "✏️", "REJECTED": "❌"}
REVIEWER_ROLES = ("ADMIN", "HR", "MANAGER", "TEAMLEAD")


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.can_review = user.get("role") in REVIEWER_ROLES
        self.meta = {
            "title_override": "Goal Evidence",
            "owner": user.get("name", "You"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo evidence store",
        }
        self.evidence = local_rows("goal_evidence", data_access.get_evidence)
        self.goals = local_rows("my_goals", lambda: data_access.get_my_goals(user.get("id")))

    def _render_list_tab(self):
        s = evidence_summary(self.evidence)
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Total", s["total"])
        c2.metric("Approved", s["approved"])
        c3.metric("Pending", s["pending"])
        c4.metric("Needs Revision", s["needs_revision"])
        c5.metric("Average Rating", s["avg_rating"] if s["avg_rating"] is not None else "N/A")

        goals = {g["id"]: g["title"] for g in self.goals}
        c1, c2, c3, c4 = st.columns([2, 1, 1, 1])
        term = c1.text_input("Search", placeholder="Search evidence...", key="evidence_search")
        status = c2.selectbox("Status", [ALL] + EVIDENCE_STATUSES, key="evidence_status")
        ev_type = c3.selectbox("Type", [ALL] + EVIDENCE_TYPES, key="evidence_type")
        goal_id = c4.selectbox("Goal", [ALL] + list(goals), key="evidence_goal",
                               format_func=lambda g: "All goals" if g == ALL else goals[g])

        rows = filter_evidence(self.evidence, term, status, ev_type, goal_id)
        if not rows:
            st.info("No evidence matches the current filters.")
            return

        for ev in rows:
            with st.expander(f"{STATUS_ICONS.get(ev['status'], '')} {ev['title']} · {ev['goal_title']}"):
                st.write(ev["description"])
                st.caption(f"{ev['type']} · submitted {ev['submitted_date']} by {ev['submitted_by_name']}")
                if ev.get("link_url"):
                    st.markdown(f"[Open link]({ev['link_url']})")
                if ev.get("file_name"):
                    st.caption(f"📎 {ev['file_name']}")
                if ev.get("review_comments"):
                    st.info(f"**{ev.get('reviewed_by_name')}:** {ev['review_comments']}")

        df = pd.DataFrame(rows)
        fig = px.histogram(df, x="type", color="status", barmode="group", title="Evidence by Type")
        st.plotly_chart(fig, use_container_width=True)

    def _render_submit_tab(self):
        goals = {g["id"]: g for g in self.goals if g["status"] != "CANCELLED"}
        if not goals:
            st.info("Create a goal before submitting evidence.")
            return

        with st.form("submit_evidence_form", clear_on_submit=True):
            goal_id = st.selectbox("Goal", list(goals), format_func=lambda g: goals[g]["title"])
            title = st.text_input("Title")
            description = st.text_area("Description")
            c1, c2 = st.columns(2)
            ev_type = c1.selectbox("Type", EVIDENCE_TYPES)
            link_url = c2.text_input("Link (for LINK evidence)")
            upload = st.file_uploader("File")
            tags = st.text_input("Tags", help="Comma separated")
            submitted = st.form_submit_button("Submit Evidence")

        if not submitted:
            return
        if not title.strip():
            st.error("Title is required.")
            return
        if ev_type == "LINK" and not link_url.strip():
            st.error("A link is required for LINK evidence.")
            return

        goal = goals[goal_id]
        self.evidence.insert(0, {
            "id": next_id("ev"), "goal_id": goal_id, "goal_title": goal["title"], "title": title.strip(),
            "description": description, "type": ev_type, "file_name": upload.name if upload else None,
            "link_url": link_url or None, "submitted_by": self.user.get("id"),
            "submitted_by_name": self.user.get("name"), "submitted_date": today_str(), "status": "PENDING",
            "reviewed_by_name": None, "reviewed_date": None, "review_comments": None, "rating": None,
            "tags": split_tags(tags), "milestone": None, "is_public": False, "version": 1,
            "category": goal["category"],
        })
        goal["evidence_count"] = goal.get("evidence_count", 0) + 1
        logger.info(f"Evidence submitted for goal {goal_id} by {self.user.get('email')}")
        st.success("Evidence submitted for review.")

    def _render_review_tab(self):
        if not self.can_review:
            st.info("Only managers and team leads review evidence.")
            return
        pending = [e for e in self.evidence if e["status"] == "PENDING"]
        if not pending:
            st.success("Nothing waiting for review.")
            return

        for ev in pending:
            with st.form(f"review_{ev['id']}"):
                st.markdown(f"**{ev['title']}** · {ev['goal_title']} · {ev['submitted_by_name']}")
                c1, c2 = st.columns(2)
                decision = c1.selectbox("Decision", ["APPROVED", "NEEDS_REVISION", "REJECTED"],
                                        key=f"decision_{ev['id']}")
                rating = c2.slider("Rating", 1, 5, 4, key=f"rating_{ev['id']}")
                comments = st.text_area("Comments", key=f"comments_{ev['id']}")
                if st.form_submit_button("Submit Review"):
                    ev.update(status=decision, rating=rating if decision == "APPROVED" else None,
                              review_comments=comments, reviewed_by_name=self.user.get("name"),
                              reviewed_date=today_str())
                    logger.info(f"Evidence {ev['id']} marked {decision} by {self.user.get('email')}")
                    st.rerun()

    def render_body(self, user: dict) -> None:
        tab_list, tab_submit, tab_review = st.tabs(["📎 Evidence", "⬆️ Submit", "🔍 Review"])
        with tab_list:
            self._render_list_tab()
        with tab_submit:
            self._render_submit_tab()
        with tab_review:
            self._render_review_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
