"""
apps/reviews/my_reviews.py

The signed-in user's reviews: current score against the previous cycle,
open reviews with their self-assessment, and past review history.
"""

import logging
from datetime import datetime

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from common import data_access
from common.metrics import days_remaining, review_summary
from common.page_state import local_rows, today_str

logger = logging.getLogger(__name__)

OPEN_STATUSES = ("Not Started", "In Progress")
RATING_LABELS = {1: "Needs improvement", 2: "Below expectations", 3: "Meets expectations",
                 4: "Exceeds expectations", 5: "Outstanding"}


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "My Reviews",
            "owner": user.get("name", "You"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo reviews",
        }
        self.reviews = local_rows("my_reviews", lambda: data_access.get_my_reviews(user.get("id")))
        self.summary = data_access.get_performance_summary(user.get("id"))

    def _render_summary(self):
        p = self.summary
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Current Score", p["current_score"],
                  delta=round(p["current_score"] - p["previous_score"], 2))
        c2.metric("KRA Progress", f"{p['kra_progress']}%")
        c3.metric("Goal Progress", f"{p['goal_progress']}%")
        c4.metric("Competencies", f"{p['competency_progress']}%")

        fig = go.Figure(go.Indicator(
            mode="gauge+number+delta",
            value=p["current_score"],
            delta={"reference": p["previous_score"]},
            gauge={"axis": {"range": [0, 5]},
                   "steps": [{"range": [0, 3], "color": "#FFE5E5"},
                             {"range": [3, 4], "color": "#FFF5D1"},
                             {"range": [4, 5], "color": "#DFF5E1"}]},
            title={"text": "Overall Rating"},
        ))
        fig.update_layout(height=260, margin=dict(t=40, b=10))
        st.plotly_chart(fig, use_container_width=True)

    def _render_open_tab(self):
        open_reviews = [r for r in self.reviews if r["status"] in OPEN_STATUSES]
        if not open_reviews:
            st.success("You have no open reviews.")
            return

        for review in open_reviews:
            days = days_remaining(review["due_date"])
            due = f"due {review['due_date']}" + (f" ({-days} days overdue)" if days is not None and days < 0 else "")
            with st.expander(f"📝 {review['title']} · {review['status']} · {due}", expanded=True):
                st.progress(review["progress"] / 100, text=f"{review['progress']}% complete")
                with st.form(f"self_assessment_{review['id']}"):
                    kra = st.select_slider("KRA achievement", options=list(RATING_LABELS),
                                           format_func=RATING_LABELS.get, value=4, key=f"kra_{review['id']}")
                    goals = st.select_slider("Goal achievement", options=list(RATING_LABELS),
                                             format_func=RATING_LABELS.get, value=4, key=f"goals_{review['id']}")
                    highlights = st.text_area("Key achievements", key=f"highlights_{review['id']}")
                    c1, c2 = st.columns(2)
                    save = c1.form_submit_button("Save Draft")
                    submit = c2.form_submit_button("Submit", type="primary")

                if save or submit:
                    review.update(kra_score=float(kra), goal_score=float(goals), highlights=highlights)
                    if submit:
                        if not highlights.strip():
                            st.error("Add your key achievements before submitting.")
                            continue
                        review.update(status="Submitted", progress=100, submitted_on=today_str())
                        logger.info(f"Review {review['id']} submitted by {self.user.get('email')}")
                        st.success("Review submitted to your reviewer.")
                    else:
                        review.update(status="In Progress", progress=max(review["progress"], 50))
                        st.info("Draft saved.")

    def _render_history_tab(self):
        s = review_summary(self.reviews)
        c1, c2, c3 = st.columns(3)
        c1.metric("Reviews", s["total"])
        c2.metric("Completed", s["completed"])
        c3.metric("Average Score", s["avg_score"] if s["avg_score"] is not None else "N/A")

        df = pd.DataFrame(self.reviews)
        st.dataframe(df[["title", "type", "cycle", "status", "due_date", "reviewer", "overall_score"]],
                     use_container_width=True, hide_index=True)

        trend = pd.DataFrame(data_access.get_personal_trend(self.user.get("id")))
        st.line_chart(trend, x="period", y="score")

    def render_body(self, user: dict) -> None:
        self._render_summary()
        tab_open, tab_history = st.tabs(["📝 Open Reviews", "📜 History"])
        with tab_open:
            self._render_open_tab()
        with tab_history:
            self._render_history_tab()


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
