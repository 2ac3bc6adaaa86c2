"""
apps/reviews/review_operations.py

Day-to-day running of a review cycle: move reviews through their
stages, chase late ones in bulk, switch workflows on and off and watch
for overdue work.
"""

import logging
from datetime import date, datetime, timedelta

import pandas as pd
import plotly.express as px
import streamlit as st

from common import data_access
from common.metrics import ALL, review_summary
from common.page_state import local_rows

logger = logging.getLogger(__name__)

REVIEW_STAGES = ["Self-Assessment", "Manager Review", "HR Calibration"]
CLOSED = ("Completed",)


def advance_review(review: dict, stages=REVIEW_STAGES) -> dict:
    """Moves a review to its next stage; past the last stage it is completed."""
    if review["status"] in CLOSED:
        raise ValueError(f"Review for {review['employee']} is already completed")
    position = stages.index(review["stage"]) if review["stage"] in stages else -1
    if position + 1 >= len(stages):
        review["status"] = "Completed"
    else:
        review["stage"] = stages[position + 1]
        review["status"] = "In Progress"
    return review


def extend_due_date(review: dict, days: int) -> dict:
    due = datetime.strptime(review["due_date"], "%Y-%m-%d").date()
    review["due_date"] = (due + timedelta(days=days)).isoformat()
    if review["status"] == "Overdue":
        review["status"] = "In Progress"
    return review


def overdue_reviews(reviews, today: date = None) -> list:
    """Open reviews whose due date has passed, oldest first."""
    today = today or date.today()
    late = [
        r for r in reviews
        if r["status"] not in CLOSED and datetime.strptime(r["due_date"], "%Y-%m-%d").date() < today
    ]
    return sorted(late, key=lambda r: r["due_date"])


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Review Operations",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo reviews",
        }
        self.reviews = local_rows("team_reviews", data_access.get_team_reviews)
        self.workflows = local_rows("review_workflows", data_access.get_review_workflows)

    # --- TAB 1: PROCESSES ---
    def _render_processes_tab(self):
        s = review_summary(self.reviews)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Reviews", s["total"])
        c2.metric("Completed", s["completed"])
        c3.metric("In Flight", s["in_progress"] + s["submitted"] + s["not_started"])
        c4.metric("Overdue", s["overdue"])

        status = st.selectbox("Status", [ALL, "Not Started", "In Progress", "Submitted", "Overdue", "Completed"],
                              key="review_ops_status")
        for review in [r for r in self.reviews if status in (ALL, r["status"])]:
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"**{review['employee']}** · {review['cycle']} · {review['stage']} · {review['status']}")
            if c2.button("Advance", key=f"review_ops_adv_{review['id']}", disabled=review["status"] in CLOSED):
                advance_review(review)
                logger.info(f"Review {review['id']} moved to {review['stage']} ({review['status']}) "
                            f"by {self.user.get('email')}")
                st.rerun()

    # --- TAB 2: ACTIONS ---
    def _render_actions_tab(self):
        open_reviews = [r for r in self.reviews if r["status"] not in CLOSED]
        if not open_reviews:
            st.success("Every review in this cycle is complete.")
            return
        labels = {r["id"]: f"{r['employee']} ({r['status']}, due {r['due_date']})" for r in open_reviews}
        chosen = st.multiselect("Reviews", list(labels), format_func=labels.get, key="review_ops_selected")
        c1, c2, c3 = st.columns(3)
        days = c1.number_input("Extend by (days)", min_value=1, max_value=60, value=7, key="review_ops_days")
        if c2.button("📅 Extend deadline", disabled=not chosen):
            for review in open_reviews:
                if review["id"] in chosen:
                    extend_due_date(review, int(days))
            logger.info(f"{len(chosen)} review deadline(s) extended by {days} days by {self.user.get('email')}")
            st.rerun()
        if c3.button("🔔 Send reminders", disabled=not chosen):
            logger.info(f"Reminders sent for {len(chosen)} review(s) by {self.user.get('email')}")
            st.toast(f"Reminders sent to {len(chosen)} reviewee(s).")

    # --- TAB 3: WORKFLOWS ---
    def _render_workflows_tab(self):
        for wf in self.workflows:
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                c1.markdown(f"**{wf['name']}** · {wf['applies_to']}")
                c1.caption(" → ".join(wf["stages"]))
                active = c2.toggle("Active", value=wf["is_active"], key=f"review_ops_wf_{wf['id']}")
                if active != wf["is_active"]:
                    wf["is_active"] = active
                    logger.info(f"Workflow {wf['id']} {'activated' if active else 'deactivated'} "
                                f"by {self.user.get('email')}")

    # --- TAB 4: MONITORING ---
    def _render_monitoring_tab(self):
        late = overdue_reviews(self.reviews)
        if late:
            st.warning(f"{len(late)} open review(s) are past their due date.")
            st.dataframe(pd.DataFrame(late)[["employee", "stage", "status", "due_date"]],
                         use_container_width=True, hide_index=True)
        else:
            st.success("Nothing is overdue.")
        df = pd.DataFrame(self.reviews)
        counts = df.groupby(["stage", "status"]).size().reset_index(name="reviews")
        fig = px.bar(counts, x="stage", y="reviews", color="status", title="Reviews by Stage",
                     category_orders={"stage": REVIEW_STAGES})
        st.plotly_chart(fig, use_container_width=True)

    def render_body(self, user: dict) -> None:
        tabs = st.tabs(["⚙️ Processes", "⚡ Actions", "🔀 Workflows", "📡 Monitoring"])
        renderers = [self._render_processes_tab, self._render_actions_tab, self._render_workflows_tab,
                     self._render_monitoring_tab]
        for tab, render in zip(tabs, renderers):
            with tab:
                render()


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
