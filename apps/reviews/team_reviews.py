"""
apps/reviews/team_reviews.py

Reviews of the signed-in manager's team: who is where in the cycle, and
the manager's rating for submitted self-assessments.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import review_summary
from common.page_state import local_rows
from security import get_review_context

logger = logging.getLogger(__name__)


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.context = get_review_context(user.get("role"), "team-reviews")
        self.meta = {
            "title_override": "Team Reviews",
            "owner": user.get("name", "Manager"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo reviews",
        }
        self.reviews = local_rows("team_reviews", data_access.get_team_reviews)

    def _render_status_tab(self):
        s = review_summary(self.reviews)
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Team Reviews", s["total"])
        c2.metric("Completed", s["completed"])
        c3.metric("Submitted", s["submitted"])
        c4.metric("In Progress", s["in_progress"] + s["not_started"])
        c5.metric("Overdue", s["overdue"])

        df = pd.DataFrame(self.reviews)
        st.dataframe(df[["employee", "cycle", "stage", "status", "due_date", "self_score", "manager_score"]],
                     use_container_width=True, hide_index=True)

        counts = df.groupby("status").size().reset_index(name="reviews")
        fig = px.pie(counts, names="status", values="reviews", title="Review Status", hole=0.4)
        st.plotly_chart(fig, use_container_width=True)

    def _render_rate_tab(self):
        waiting = [r for r in self.reviews if r["status"] == "Submitted"]
        if not waiting:
            st.success("No self-assessments are waiting for your rating.")
            return

        for review in waiting:
            with st.form(f"rate_{review['id']}"):
                st.markdown(f"**{review['employee']}** · self score {review.get('self_score')}")
                score = st.slider("Manager score", 1.0, 5.0, float(review.get("self_score") or 3.0), 0.1,
                                  key=f"score_{review['id']}")
                comments = st.text_area("Feedback", key=f"feedback_{review['id']}")
                if st.form_submit_button("Complete Review"):
                    review.update(manager_score=round(score, 1), status="Completed",
                                  stage="Manager Review", manager_comments=comments)
                    logger.info(f"Team review {review['id']} completed by {self.user.get('email')}")
                    st.rerun()

    def _render_reminders_tab(self):
        lagging = [r for r in self.reviews if r["status"] in ("Not Started", "Overdue")]
        if not lagging:
            st.success("Everyone is on track.")
            return
        for review in lagging:
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"**{review['employee']}** · {review['status']} · due {review['due_date']}")
            if c2.button("Send reminder", key=f"remind_{review['id']}"):
                logger.info(f"Review reminder for {review['employee']} sent by {self.user.get('email')}")
                st.toast(f"Reminder sent to {review['employee']}.")

    def render_body(self, user: dict) -> None:
        if self.context != "team":
            st.warning("Team reviews are only available to managers, team leads, HR and Admin.")
            return
        tab_status, tab_rate, tab_remind = st.tabs(["📋 Status", "⭐ Rate", "🔔 Reminders"])
        with tab_status:
            self._render_status_tab()
        with tab_rate:
            self._render_rate_tab()
        with tab_remind:
            self._render_reminders_tab()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
