# ui_nav.py

import streamlit as st

from config import APP_TITLE, APP_VERSION, ROLE_BADGES


def _initials(name: str) -> str:
    return "".join(part[0] for part in (name or "?").split() if part)[:2].upper()


def build_sidebar(user, role_view):
    """
    Draw the sidebar UI and update session state (active_menu).

    role_view is the RoleView from security.resolve_role_view, so the
    menu tree here is already filtered for the signed-in role.

    Returns a dict:
      {
        "active_menu": ...,
        "logout": True/False
      }
    """

    # --- 1. Initialize Session State (Defaults) ---
    if not st.session_state.get("active_menu"):
        st.session_state["active_menu"] = role_view.default_menu_id

    active_menu = st.session_state["active_menu"]

    with st.sidebar:
        st.markdown(f"### 📊 {APP_TITLE}")
        st.caption("Performance Management")

        # --- 2. User card ---
        badge = ROLE_BADGES.get(role_view.role, "⚪")
        st.markdown(f"**{_initials(user.get('name'))} · {user.get('name', 'Unknown')}**")
        st.caption(f"{badge} {role_view.role} · {user.get('department') or 'N/A'}")

        st.markdown("---")

        # --- 3. Navigation ---
        for item in role_view.menu:
            submenu = item.get("submenu")
            if not submenu:
                _nav_button(item, active_menu)
                continue

            expanded_default = any(child["id"] == active_menu for child in submenu)
            with st.expander(f"{item['icon']} {item['label']}", expanded=expanded_default):
                for child in submenu:
                    _nav_button(child, active_menu)

        # --- 4. Sidebar Footer ---
        st.markdown("---")
        logout_clicked = st.button("🔐 Log Out", use_container_width=True)
        st.caption(f"🛡️ v{APP_VERSION} • Secure")

    return {
        "active_menu": st.session_state["active_menu"],
        "logout": logout_clicked,
    }


def _nav_button(item, active_menu):
    is_current = item["id"] == active_menu
    button_label = f"✅ {item['label']}" if is_current else f"{item['icon']} {item['label']}"
    clicked = st.button(button_label, key=f"nav::{item['id']}", use_container_width=True)
    if clicked and not is_current:
        st.session_state["active_menu"] = item["id"]
        st.rerun()
