"""
apps/settings/personal_settings.py

Profile and preferences for the signed-in user. Changes go through the
auth store, so they are persisted with the session record and survive a
reload.
"""

import logging
from datetime import datetime

import streamlit as st

from common import data_access
from common.page_state import get_auth_store

logger = logging.getLogger(__name__)

THEMES = ["Light", "Dark", "System"]
LANGUAGES = ["English", "Hindi", "Spanish"]


class Page:
    def __init__(self, user: dict, **options):
        self.user = user
        self.store = get_auth_store()
        self.meta = {
            "title_override": "Personal Settings",
            "owner": user.get("name", "You"),
            "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
            "data_source": "Session profile",
        }
        self.preferences = dict(data_access.get_personal_preferences(user.get("id")),
                                **(user.get("preferences") or {}))

    def _save(self, **changes):
        if self.store is None:
            st.error("Your session has expired. Please sign in again.")
            return False
        self.store.update_user(**changes)
        logger.info(f"Profile of {self.user.get('email')} updated: {sorted(changes)}")
        return True

    def _render_profile_tab(self):
        c1, c2 = st.columns(2)
        c1.text_input("Email", value=self.user.get("email", ""), disabled=True)
        c2.text_input("Role", value=self.user.get("role", ""), disabled=True)

        with st.form("profile_form"):
            name = st.text_input("Display Name", value=self.user.get("name", ""))
            c1, c2 = st.columns(2)
            phone = c1.text_input("Phone", value=self.user.get("phone") or "")
            location = c2.text_input("Location", value=self.user.get("location") or "")
            bio = st.text_area("About Me", value=self.user.get("bio") or "")
            submitted = st.form_submit_button("Save Profile")

        if submitted:
            if not name.strip():
                st.error("Display name cannot be empty.")
            elif self._save(name=name.strip(), phone=phone, location=location, bio=bio):
                st.success("Profile saved.")

    def _render_preferences_tab(self):
        p = self.preferences
        with st.form("preferences_form"):
            c1, c2 = st.columns(2)
            theme = c1.selectbox("Theme", THEMES, index=THEMES.index(p["theme"]) if p["theme"] in THEMES else 0)
            language = c2.selectbox("Language", LANGUAGES,
                                    index=LANGUAGES.index(p["language"]) if p["language"] in LANGUAGES else 0)
            email_notifications = st.toggle("Email notifications", value=p["email_notifications"])
            weekly_summary = st.toggle("Weekly summary email", value=p["weekly_summary"])
            show_team = st.toggle("Show my team on the dashboard", value=p["show_team_in_dashboard"])
            submitted = st.form_submit_button("Save Preferences")

        if submitted:
            prefs = dict(theme=theme, language=language, email_notifications=email_notifications,
                         weekly_summary=weekly_summary, show_team_in_dashboard=show_team)
            if self._save(preferences=prefs):
                st.success("Preferences saved.")

    def render_body(self, user: dict) -> None:
        tab_profile, tab_prefs = st.tabs(["🙍 Profile", "🎛️ Preferences"])
        with tab_profile:
            self._render_profile_tab()
        with tab_prefs:
            self._render_preferences_tab()


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
