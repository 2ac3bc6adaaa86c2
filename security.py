# security.py

import logging
from collections import namedtuple

import streamlit as st

from common.page_state import clear_page_rows
from config import (
    DASHBOARD_MENU_IDS,
    DEFAULT_DASHBOARD_BY_ROLE,
    LEAST_PRIVILEGED_ROLE,
    MENU_CONFIG,
    MENU_ITEMS,
    ROLE_HIERARCHY,
    ROLES,
)

logger = logging.getLogger(__name__)

# What a signed-in role gets to see: where it lands and what the sidebar shows.
RoleView = namedtuple("RoleView", ["role", "dashboard_type", "default_menu_id", "menu"])

# Menu groups in the order the sidebar "quick jump" lists them.
MENU_GROUPS = [
    "Dashboard", "Masters", "User Management", "KRA Management", "Goals Management",
    "Review Management", "Team Management", "Projects", "Reports & Analytics",
    "System Settings", "Personal",
]

# Related pages to suggest next, by current page
NAVIGATION_SUGGESTIONS = {
    "personal-dashboard": ["my-goals", "my-reviews", "goal-reports"],
    "team-dashboard": ["team-goals", "team-reviews", "team-analytics"],
    "organization-dashboard": ["user-operations", "department-master", "performance-reports"],
    "my-goals": ["goal-evidence", "my-reviews", "goal-reports"],
    "my-reviews": ["my-goals", "goal-reports"],
    "team-goals": ["team-reviews", "team-analytics"],
    "team-reviews": ["team-goals", "performance-assessment"],
}

ADMIN_REVIEW_MENUS = ("review-cycles", "review-workflows", "review-management-main")
TEAM_REVIEW_ROLES = ("MANAGER", "TEAMLEAD", "HR", "ADMIN")


# -------------------------------------------
# ROLE -> VIEW RESOLVER
# -------------------------------------------

def normalize_role(role) -> str:
    """Upper-case a role string; anything that is not a string becomes ''."""
    if not isinstance(role, str):
        return ""
    return role.strip().upper()


def resolve_role(role) -> str:
    """Return a known role, or the least-privileged role for anything else."""
    normalized = normalize_role(role)
    if normalized in ROLES:
        return normalized
    logger.warning(f"Unknown role: {role!r}, defaulting to {LEAST_PRIVILEGED_ROLE}")
    return LEAST_PRIVILEGED_ROLE


def get_dashboard_type(role) -> str:
    """personal / team / organization, per DEFAULT_DASHBOARD_BY_ROLE."""
    return DEFAULT_DASHBOARD_BY_ROLE[resolve_role(role)]


def get_default_dashboard(role) -> str:
    """The menu id of the dashboard a role lands on."""
    return DASHBOARD_MENU_IDS[get_dashboard_type(role)]


def get_analytics_type(role) -> str:
    return get_dashboard_type(role)


def get_review_context(role, active_menu: str) -> str:
    """admin for cycle/workflow admin pages, team for team reviews, else self."""
    if active_menu in ADMIN_REVIEW_MENUS:
        return "admin"
    if active_menu == "team-reviews" and normalize_role(role) in TEAM_REVIEW_ROLES:
        return "team"
    return "self"


def has_menu_access(role, menu_id: str) -> bool:
    menu = MENU_CONFIG.get(menu_id)
    if menu is None:
        logger.warning(f"Menu configuration not found for: {menu_id}")
        return False
    return normalize_role(role) in menu["roles"]


def filter_menu_items(role, menu_items) -> list:
    """
    Prune a menu tree down to the items this role may see.
    Works recursively on submenus; a parent whose submenu ends up
    empty is dropped as well. Returns new dicts, the input is untouched.
    """
    role = normalize_role(role)
    filtered = []
    for item in menu_items:
        if role not in item.get("roles", []):
            continue
        entry = {k: v for k, v in item.items() if k != "submenu"}
        if item.get("submenu") is not None:
            children = filter_menu_items(role, item["submenu"])
            if not children:
                continue
            entry["submenu"] = children
        filtered.append(entry)
    return filtered


def resolve_role_view(role, menu_items=None) -> RoleView:
    resolved = resolve_role(role)
    dashboard_type = DEFAULT_DASHBOARD_BY_ROLE[resolved]
    return RoleView(
        role=resolved,
        dashboard_type=dashboard_type,
        default_menu_id=DASHBOARD_MENU_IDS[dashboard_type],
        menu=filter_menu_items(resolved, MENU_ITEMS if menu_items is None else menu_items),
    )


# -------------------------------------------
# MENU LOOKUPS
# -------------------------------------------

def is_valid_menu_path(menu_id: str, role) -> bool:
    if menu_id not in MENU_CONFIG:
        return False
    return has_menu_access(role, menu_id)


def get_menu_breadcrumb(menu_id: str) -> list:
    menu = MENU_CONFIG.get(menu_id)
    if menu is None:
        logger.warning(f"Menu configuration not found for breadcrumb: {menu_id}")
        return [menu_id]
    return list(menu["breadcrumb"])


def get_menu_label(menu_id: str) -> str:
    menu = MENU_CONFIG.get(menu_id)
    if menu is not None:
        return menu["label"]
    return menu_id.replace("-", " ").title()


def get_menu_icon(menu_id: str) -> str:
    menu = MENU_CONFIG.get(menu_id)
    return menu["icon"] if menu is not None else "⚪"


def has_role_level(role, required_role) -> bool:
    """True when `role` is at least as senior as `required_role`."""
    user_level = ROLE_HIERARCHY.get(normalize_role(role), 0)
    required_level = ROLE_HIERARCHY.get(normalize_role(required_role), 0)
    return user_level >= required_level


def get_grouped_menu_items(role) -> dict:
    """Accessible leaf menu ids grouped by their top-level section."""
    grouped = {group: [] for group in MENU_GROUPS}
    for menu_id, menu in MENU_CONFIG.items():
        if menu["module"] is None or not has_menu_access(role, menu_id):
            continue
        group = menu["parent"] or "Personal"
        grouped.setdefault(group, []).append(menu_id)
    return {group: ids for group, ids in grouped.items() if ids}


def get_navigation_suggestions(current_menu_id: str, role) -> list:
    suggestions = [
        menu_id for menu_id in NAVIGATION_SUGGESTIONS.get(current_menu_id, [])
        if has_menu_access(role, menu_id)
    ]
    return suggestions[:3]


def is_valid_menu_transition(from_menu_id: str, to_menu_id: str, role) -> bool:
    # Only the target matters today; from_menu_id is kept for future rules.
    return has_menu_access(role, to_menu_id)


def get_contextual_menu_title(menu_id: str, role) -> str:
    base_label = get_menu_label(menu_id)
    role = normalize_role(role)
    if menu_id == "team-dashboard":
        if role == "TEAMLEAD":
            return f"{base_label} - Team Lead View"
        if role == "MANAGER":
            return f"{base_label} - Manager View"
    elif menu_id == "organization-dashboard":
        if role == "HR":
            return f"{base_label} - HR View"
        if role == "ADMIN":
            return f"{base_label} - Admin View"
    return base_label


# -------------------------------------------
# SESSION / LOGIN UI
# -------------------------------------------

def get_user_session(store):
    """Return (and initialise if needed) the session dict for auth."""
    if "active_menu" not in st.session_state:
        st.session_state["active_menu"] = None

    return store.current_session()


def _fill_demo_credentials(email, password):
    # Runs as a button callback, before the login widgets are drawn.
    st.session_state["login_email"] = email
    st.session_state["login_password"] = password


def ensure_logged_in(store, demo_accounts, demo_password):
    """
    Render the login UI and update the store on success.
    store = AuthStore(...)
    """
    st.title("PMS Login")
    st.caption("Performance Management System")

    if "login_email" not in st.session_state:
        st.session_state["login_email"] = ""
    if "login_password" not in st.session_state:
        st.session_state["login_password"] = ""

    with st.form("login_form"):
        email = st.text_input("Email Address", key="login_email", placeholder="Enter your email")
        password = st.text_input("Password", type="password", key="login_password",
                                 placeholder="Enter your password")
        login_btn = st.form_submit_button("Sign in", type="primary")

    if login_btn:
        store.clear_error()
        with st.spinner("Signing in..."):
            success = store.login(email, password)
        if success:
            clear_page_rows()
            st.session_state["active_menu"] = None
            st.rerun()
        else:
            st.error(store.error or "Invalid email or password. Please try again.")

    st.markdown("---")
    st.caption(f"Demo Accounts (Password: {demo_password})")
    cols = st.columns(len(demo_accounts))
    for col, account in zip(cols, demo_accounts):
        with col:
            st.markdown(f"**{account['role']}**")
            st.caption(account["description"])
            st.button(account["email"], key=f"demo::{account['email']}",
                      on_click=_fill_demo_credentials, args=(account["email"], demo_password))
