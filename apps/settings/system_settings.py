"""
apps/settings/system_settings.py

System-wide settings. One module serves three menu entries; the router
passes `settings_type` to pick the section:

- "system":        organisation, session and security settings
- "goals":         goal limits and approval rules
- "notifications": email and reminder rules

Saved values are kept in the app-wide (not per-browser) local storage,
under "pms-settings-<type>", and override the shipped defaults.
"""

import logging
from datetime import datetime

import streamlit as st

from common import data_access
from common.page_state import get_shared_storage

logger = logging.getLogger(__name__)

SETTINGS_TYPES = {
    "system": "System Configuration",
    "goals": "Goal Configuration",
    "notifications": "Notification Settings",
}

TIMEZONES = ["Asia/Kolkata", "UTC", "Europe/London", "America/New_York"]
DATE_FORMATS = ["YYYY-MM-DD", "DD/MM/YYYY", "MM/DD/YYYY"]
REVIEW_PERIODS = ["Q", "H", "Y"]


def settings_key(settings_type: str) -> str:
    return f"pms-settings-{settings_type}"


def validate_settings(settings_type: str, values: dict) -> list:
    errors = []
    if settings_type == "system":
        if not str(values.get("organization_name") or "").strip():
            errors.append("Organisation name is required")
        if values.get("password_min_length", 0) < 6:
            errors.append("Passwords must be at least 6 characters")
        if values.get("session_timeout_minutes", 0) < 5:
            errors.append("Session timeout must be at least 5 minutes")
    elif settings_type == "goals":
        if values.get("max_goals_per_employee", 0) < 1:
            errors.append("Allow at least one goal per employee")
        if not 0 < values.get("min_goal_weightage", 0) <= 100:
            errors.append("Minimum goal weightage must be between 1 and 100")
    elif settings_type == "notifications":
        if values.get("reminder_days_before", 0) < 1:
            errors.append("Reminders must go out at least 1 day before the deadline")
        if values.get("escalate_overdue_after_days", 0) < 1:
            errors.append("Escalation must wait at least 1 day")
    return errors


class Page:
    def __init__(self, user: dict, settings_type: str = "system", **options):
        if settings_type not in SETTINGS_TYPES:
            logger.warning(f"Unknown settings type '{settings_type}', showing system settings")
            settings_type = "system"
        self.user = user
        self.settings_type = settings_type
        self.storage = get_shared_storage()
        self.meta = {
            "title_override": SETTINGS_TYPES[settings_type],
            "owner": "PMS Admin Team",
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Local settings store",
        }

        self.values = data_access.get_system_settings(settings_type)
        if self.storage is not None:
            self.values.update(self.storage.get_item(settings_key(settings_type), {}) or {})

    def _system_form(self, v):
        name = st.text_input("Organisation Name", value=v["organization_name"])
        c1, c2 = st.columns(2)
        tz = c1.selectbox("Timezone", TIMEZONES,
                          index=TIMEZONES.index(v["timezone"]) if v["timezone"] in TIMEZONES else 0)
        fmt = c2.selectbox("Date Format", DATE_FORMATS,
                           index=DATE_FORMATS.index(v["date_format"]) if v["date_format"] in DATE_FORMATS else 0)
        c1, c2 = st.columns(2)
        timeout = c1.number_input("Session Timeout (minutes)", value=int(v["session_timeout_minutes"]), step=5)
        pw_len = c2.number_input("Minimum Password Length", value=int(v["password_min_length"]))
        sso = st.toggle("Enable SSO sign-in", value=v["enable_sso"])
        maintenance = st.toggle("Maintenance mode", value=v["maintenance_mode"])
        return dict(organization_name=name, timezone=tz, date_format=fmt, session_timeout_minutes=int(timeout),
                    password_min_length=int(pw_len), enable_sso=sso, maintenance_mode=maintenance)

    def _goals_form(self, v):
        c1, c2 = st.columns(2)
        max_goals = c1.number_input("Max Goals per Employee", value=int(v["max_goals_per_employee"]))
        min_weight = c2.number_input("Minimum Goal Weightage (%)", value=int(v["min_goal_weightage"]))
        period = st.selectbox("Default Review Period", REVIEW_PERIODS,
                              index=REVIEW_PERIODS.index(v["default_review_period"]))
        approval = st.toggle("Goals need manager approval", value=v["require_manager_approval"])
        edit_after = st.toggle("Allow edits after approval", value=v["allow_goal_edit_after_approval"])
        evidence = st.toggle("Evidence required to complete a goal", value=v["evidence_required"])
        return dict(max_goals_per_employee=int(max_goals), min_goal_weightage=int(min_weight),
                    default_review_period=period, require_manager_approval=approval,
                    allow_goal_edit_after_approval=edit_after, evidence_required=evidence)

    def _notifications_form(self, v):
        email = st.toggle("Email notifications", value=v["email_enabled"])
        reviews = st.toggle("Review reminders", value=v["review_reminders"])
        deadlines = st.toggle("Goal deadline alerts", value=v["goal_deadline_alerts"])
        digest = st.toggle("Weekly digest", value=v["weekly_digest"])
        c1, c2 = st.columns(2)
        before = c1.number_input("Remind days before deadline", value=int(v["reminder_days_before"]))
        escalate = c2.number_input("Escalate overdue after (days)", value=int(v["escalate_overdue_after_days"]))
        return dict(email_enabled=email, review_reminders=reviews, goal_deadline_alerts=deadlines,
                    weekly_digest=digest, reminder_days_before=int(before), escalate_overdue_after_days=int(escalate))

    def render_body(self, user: dict) -> None:
        form_fn = {
            "system": self._system_form,
            "goals": self._goals_form,
            "notifications": self._notifications_form,
        }[self.settings_type]

        with st.form(f"settings_{self.settings_type}"):
            values = form_fn(self.values)
            c1, c2 = st.columns(2)
            save = c1.form_submit_button("Save Settings", type="primary")
            reset = c2.form_submit_button("Reset to Defaults")

        if reset:
            if self.storage is not None:
                self.storage.remove_item(settings_key(self.settings_type))
            logger.info(f"{self.settings_type} settings reset by {self.user.get('email')}")
            st.rerun()

        if save:
            errors = validate_settings(self.settings_type, values)
            if errors:
                for error in errors:
                    st.error(error)
                return
            if self.storage is None:
                st.error("Your session has expired. Please sign in again.")
                return
            self.storage.set_item(settings_key(self.settings_type), values)
            logger.info(f"{self.settings_type} settings saved by {self.user.get('email')}")
            st.success("Settings saved.")


def render_page(user: dict, settings_type: str = "system", **options) -> (callable, dict):
    page = Page(user=user, settings_type=settings_type, **options)
    return page.render_body, page.meta
