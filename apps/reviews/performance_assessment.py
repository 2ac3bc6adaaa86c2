"""
apps/reviews/performance_assessment.py

Performance assessment form for self, R1 (team lead) and R2 (manager)
reviews. Every KRA, goal and competency item is rated 1-5; the scores,
overall zone and recommendation are recalculated on each change by
common/assessment.py.

-------------------------------------------------------------------------------
TABS:
-------------------------------------------------------------------------------
1.  "🏅 Assessment": rate and comment each item, section by section.
2.  "💬 Comments": strengths, improvement areas, reviewer comments.
3.  "🌱 Development": development plan and goals for next period.
4.  "📎 Evidence": evidence listed against each item.
-------------------------------------------------------------------------------
"""

import copy
import json
import logging
from datetime import datetime

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from common import data_access
from common.assessment import RATING_LABELS, gaps_to_target, rating_label, score_assessment
from common.page_state import local_rows, today_str

logger = logging.getLogger(__name__)

REVIEW_TYPES = {
    "Self-Assessment": "Self-Assessment",
    "R1-Review": "R1 Review (Team Lead)",
    "R2-Review": "R2 Review (Manager)",
}
REVIEW_CYCLES = ["Annual Review 2024", "Q4 Review 2024"]
ZONE_COLORS = {"GREEN": "#34A853", "YELLOW": "#FBC02D", "RED": "#EA4335"}


def allowed_review_types(role: str) -> list:
    """Employees only assess themselves; leaders also review others."""
    if role == "EMPLOYEE":
        return ["Self-Assessment"]
    if role == "TEAMLEAD":
        return ["Self-Assessment", "R1-Review"]
    return list(REVIEW_TYPES)


def submission_errors(sections: list, text: dict) -> list:
    errors = []
    for section in sections:
        for item in section["items"]:
            if not item.get("rating"):
                errors.append(f"'{item['description']}' is not rated")
    for field in ("strengths", "improvement_areas"):
        if not (text.get(field) or "").strip():
            errors.append(f"{field.replace('_', ' ').capitalize()} is required")
    return errors


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.meta = {
            "title_override": "Performance Assessment",
            "owner": "HR Operations",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Demo assessment form",
        }
        self.sections = local_rows("assessment_sections", data_access.get_assessment_sections)
        self.submissions = local_rows("assessment_submissions", list)
        self.team = [m["name"] for m in data_access.get_team_members(user.get("name"))]

    def _render_context(self):
        c1, c2, c3 = st.columns(3)
        review_type = c1.selectbox("Review Type", allowed_review_types(self.user.get("role")),
                                   format_func=REVIEW_TYPES.get, key="assess_type")
        if review_type == "Self-Assessment":
            employee = self.user.get("name")
            c2.text_input("Employee", value=employee, disabled=True, key="assess_self")
        else:
            employee = c2.selectbox("Employee", self.team, key="assess_employee")
        cycle = c3.selectbox("Review Cycle", REVIEW_CYCLES, key="assess_cycle")
        return review_type, employee, cycle

    def _render_scores(self, scores):
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("KRA Score", scores["kra_score"] or "-", help="Weight 60%")
        c2.metric("Goal Score", scores["goal_score"] or "-", help="Weight 30%")
        c3.metric("Competency", scores["competency_score"] or "-", help="Weight 10%")
        c4.metric("Overall", scores["overall_score"], help="Weighted average")
        c5.markdown(
            f"<div style='padding:0.6rem;border-radius:8px;text-align:center;color:white;"
            f"background:{ZONE_COLORS[scores['zone']]}'><b>{scores['zone']} ZONE</b></div>",
            unsafe_allow_html=True,
        )
        st.caption(f"Recommendation: {scores['recommendation']}")

    # --- TAB 1: ASSESSMENT ---
    def _render_assessment_tab(self):
        for section in self.sections:
            st.markdown(f"##### {section['title']} · weight {section['weight']}%")
            for item in section["items"]:
                with st.container(border=True):
                    c1, c2 = st.columns([3, 2])
                    c1.markdown(f"**{item['description']}** · item weight {item['weight']}%, target {item['target_score']}")
                    item["rating"] = c2.select_slider(
                        "Rating", options=list(range(1, 6)), value=item.get("rating") or 3,
                        format_func=lambda r: f"{r} - {rating_label(r)}", key=f"assess_rating_{item['id']}",
                    )
                    item["comment"] = st.text_input("Comment", value=item.get("comment", ""),
                                                    key=f"assess_comment_{item['id']}")

        gaps = gaps_to_target(self.sections)
        if gaps:
            st.markdown("##### Below Target")
            st.dataframe(pd.DataFrame(gaps), use_container_width=True, hide_index=True)

        with st.expander("Rating scale"):
            for rating, label in sorted(RATING_LABELS.items(), reverse=True):
                st.markdown(f"- **{rating} - {label}**")

    # --- TAB 2 / 3: TEXT ---
    def _text(self, field, label, height=120):
        key = f"assess_text_{field}"
        return st.text_area(label, key=key, height=height)

    def _render_radar(self, scores):
        labels = [s["title"] for s in self.sections]
        values = [scores["sections"].get(s["id"]) or 0 for s in self.sections]
        fig = go.Figure(go.Scatterpolar(r=values + values[:1], theta=labels + labels[:1], fill="toself"))
        fig.update_layout(polar={"radialaxis": {"range": [0, 5]}}, showlegend=False, title="Section Scores")
        st.plotly_chart(fig, use_container_width=True)

    def render_body(self, user: dict) -> None:
        review_type, employee, cycle = self._render_context()

        tab_assess, tab_comments, tab_dev, tab_evidence = st.tabs(
            ["🏅 Assessment", "💬 Comments", "🌱 Development", "📎 Evidence"]
        )
        with tab_assess:
            self._render_assessment_tab()
        with tab_comments:
            text = {
                "strengths": self._text("strengths", "Key Strengths"),
                "improvement_areas": self._text("improvement_areas", "Areas for Improvement"),
            }
            if review_type != "Self-Assessment":
                text["reviewer_comments"] = self._text("reviewer_comments", "Reviewer Comments")
        with tab_dev:
            text["development_plan"] = self._text("development_plan", "Development Plan", height=160)
            text["next_goals"] = self._text("next_goals", "Goals for Next Period")
        with tab_evidence:
            for section in self.sections:
                for item in section["items"]:
                    st.markdown(f"**{item['description']}**: " + ", ".join(item.get("evidence", [])))

        scores = score_assessment(self.sections)
        st.markdown("---")
        self._render_scores(scores)
        self._render_radar(scores)

        record = {
            "employee": employee, "review_type": review_type, "cycle": cycle,
            "reviewer": self.user.get("name"), "scores": scores, **text,
            "sections": copy.deepcopy(self.sections), "saved_on": today_str(),
        }
        c1, c2, c3 = st.columns(3)
        if c1.button("💾 Save Draft"):
            self.submissions.append(dict(record, status="Draft"))
            st.success("Draft saved.")
        c2.download_button("📄 Export", data=json.dumps(record, indent=2, default=str),
                           file_name=f"assessment_{(employee or 'employee').replace(' ', '_').lower()}.json",
                           mime="application/json")
        if c3.button("📨 Submit Assessment", type="primary"):
            errors = submission_errors(self.sections, text)
            if errors:
                for error in errors:
                    st.error(error)
            else:
                self.submissions.append(dict(record, status="Submitted"))
                logger.info(f"{review_type} for {employee} ({cycle}) submitted by {self.user.get('email')}: "
                            f"{scores['overall_score']} {scores['zone']}")
                st.success(f"Assessment submitted: {scores['overall_score']} ({scores['zone']} zone).")


def render_page(user: dict, **options) -> (callable, dict):
    page = Page(user=user, **options)
    return page.render_body, page.meta
