# config.py

import os

# The closed set of roles, most privileged first.
ROLES = ("ADMIN", "HR", "MANAGER", "TEAMLEAD", "EMPLOYEE")
LEAST_PRIVILEGED_ROLE = "EMPLOYEE"

ALL_ROLES = list(ROLES)
LEADERSHIP_ROLES = ["ADMIN", "HR", "MANAGER", "TEAMLEAD"]
ADMIN_HR = ["ADMIN", "HR"]
ADMIN_HR_MANAGER = ["ADMIN", "HR", "MANAGER"]
LINE_MANAGERS = ["MANAGER", "TEAMLEAD"]
INDIVIDUAL_CONTRIBUTORS = ["EMPLOYEE", "TEAMLEAD", "MANAGER"]

# Role hierarchy for "at least this senior" checks
ROLE_HIERARCHY = {
    "ADMIN": 5,
    "HR": 4,
    "MANAGER": 3,
    "TEAMLEAD": 2,
    "EMPLOYEE": 1,
}

# Which dashboard each role lands on after login.
DEFAULT_DASHBOARD_BY_ROLE = {
    "EMPLOYEE": "personal",
    "TEAMLEAD": "team",
    "MANAGER": "team",
    "ADMIN": "organization",
    "HR": "organization",
}

DASHBOARD_MENU_IDS = {
    "personal": "personal-dashboard",
    "team": "team-dashboard",
    "organization": "organization-dashboard",
}


def _item(menu_id, label, icon, roles, module=None, options=None, submenu=None):
    entry = {"id": menu_id, "label": label, "icon": icon, "roles": list(roles)}
    if module:
        entry["module"] = module
    if options:
        entry["options"] = dict(options)
    if submenu is not None:
        entry["submenu"] = submenu
    return entry


# The sidebar tree. Each leaf with a "module" maps to apps/<module>.py.
# Leaves without a "module" have no page and fall back to the default dashboard.
MENU_ITEMS = [
    # 1. DASHBOARDS
    _item("dashboard", "Dashboard", "🏠", ALL_ROLES, submenu=[
        _item("personal-dashboard", "Personal Dashboard", "🙋", ALL_ROLES,
              module="dashboards.personal_dashboard"),
        _item("team-dashboard", "Team Dashboard", "👥", LEADERSHIP_ROLES,
              module="dashboards.team_dashboard"),
        _item("organization-dashboard", "Organization Dashboard", "🏢", ADMIN_HR,
              module="dashboards.organization_dashboard"),
    ]),

    # 2. MASTERS (reference data)
    _item("masters", "Masters", "🗃️", ADMIN_HR, submenu=[
        _item("department-master", "Department Master", "🏢", ADMIN_HR,
              module="masters.department_master"),
        _item("domain-master", "Domain Master", "🧩", ADMIN_HR,
              module="masters.domain_master"),
        _item("project-master", "Project Master", "📁", ADMIN_HR,
              module="masters.project_master"),
        _item("kra-master", "KRA Master", "🎯", ADMIN_HR,
              module="masters.kra_master"),
    ]),

    # 3. USER MANAGEMENT
    _item("user-management", "User Management", "👤", ADMIN_HR, submenu=[
        _item("user-operations", "User Operations", "➕", ADMIN_HR,
              module="user_management.user_operations"),
        _item("reviewer-mapping", "Reviewer Mapping", "🔀", ADMIN_HR,
              module="user_management.reviewer_mapping"),
        _item("bulk-operations", "Bulk Operations", "📑", ADMIN_HR,
              module="user_management.bulk_operations"),
    ]),

    # 4. KRA MANAGEMENT
    _item("kra-management", "KRA Management", "🎯", ADMIN_HR_MANAGER, submenu=[
        _item("kra-overview", "KRA Overview", "📊", ADMIN_HR_MANAGER,
              module="kra_management.kra_management"),
        _item("kra-operations", "KRA Operations", "🎯", ADMIN_HR_MANAGER,
              module="kra_management.kra_operations"),
        _item("kra-mapping", "KRA Mapping", "🕸️", ADMIN_HR_MANAGER,
              module="kra_management.kra_mapping"),
        _item("kra-templates", "KRA Templates", "📄", ADMIN_HR_MANAGER,
              module="kra_management.kra_templates"),
        _item("kra-bulk-operations", "Bulk Operations", "🗄️", ADMIN_HR_MANAGER,
              module="kra_management.kra_bulk_operations"),
    ]),

    # 5. GOALS
    _item("goals-management", "Goals Management", "🎯", ALL_ROLES, submenu=[
        _item("goal-management", "Goal Management", "🎯", ADMIN_HR_MANAGER,
              module="goals.goal_management"),
        _item("goal-operations", "Goal Operations", "⚙️", ALL_ROLES,
              module="goals.goal_operations"),
        _item("goal-analytics", "Goal Analytics", "📊", ADMIN_HR_MANAGER,
              module="goals.goal_analytics"),
        _item("goal-evidence", "Evidence Management", "📎", ALL_ROLES,
              module="goals.goal_evidence"),
        _item("my-goals", "My Goals", "🏅", INDIVIDUAL_CONTRIBUTORS,
              module="goals.my_goals"),
        _item("team-goals", "Team Goals", "👥", LINE_MANAGERS,
              module="goals.team_goals"),
        _item("goal-categories", "Goal Categories", "🧩", ADMIN_HR,
              module="goals.goal_categories"),
        _item("goal-templates", "Goal Templates", "🗂️", ADMIN_HR_MANAGER,
              module="goals.goal_templates"),
    ]),

    # 6. REVIEWS
    _item("review-management", "Review Management", "📝", ALL_ROLES, submenu=[
        _item("review-management-main", "Review Management", "📝", ADMIN_HR_MANAGER,
              module="reviews.review_management"),
        _item("review-operations", "Review Operations", "⚙️", ADMIN_HR_MANAGER,
              module="reviews.review_operations"),
        _item("review-analytics", "Review Analytics", "📊", ADMIN_HR_MANAGER,
              module="reviews.review_analytics"),
        _item("performance-assessment", "Performance Assessment", "🏅", LEADERSHIP_ROLES,
              module="reviews.performance_assessment"),
        _item("my-reviews", "My Reviews", "📝", INDIVIDUAL_CONTRIBUTORS,
              module="reviews.my_reviews"),
        _item("team-reviews", "Team Reviews", "👥", LINE_MANAGERS,
              module="reviews.team_reviews"),
        _item("review-cycles", "Review Cycles", "📅", ADMIN_HR,
              module="reviews.review_cycles"),
        _item("review-templates", "Review Templates", "🗂️", ADMIN_HR_MANAGER,
              module="reviews.review_templates"),
        _item("review-workflows", "Review Workflows", "🔀", ADMIN_HR,
              module="reviews.review_workflows"),
        _item("cross-cycle-analysis", "Cross-Cycle Analysis", "📈", ADMIN_HR_MANAGER,
              module="reviews.cross_cycle_analysis"),
    ]),

    # 7. TEAM MANAGEMENT (no pages yet)
    _item("team-management", "Team Management", "👥", LINE_MANAGERS, submenu=[
        _item("team-performance", "Team Performance", "📈", LINE_MANAGERS),
        _item("team-development", "Team Development", "🏅", LINE_MANAGERS),
        _item("resource-planning", "Resource Planning", "📅", ["MANAGER"]),
    ]),

    # 8. PROJECTS (no pages yet)
    _item("projects", "Projects", "📁", LINE_MANAGERS, submenu=[
        _item("project-management", "Project Management", "💼", LINE_MANAGERS),
        _item("project-performance", "Project Performance", "📈", LINE_MANAGERS),
    ]),

    # 9. REPORTS & ANALYTICS
    _item("reports-analytics", "Reports & Analytics", "📊", ALL_ROLES, submenu=[
        _item("analytics-dashboard", "Analytics Dashboard", "📈", ADMIN_HR_MANAGER,
              module="reports.analytics_dashboard"),
        _item("performance-reports", "Performance Reports", "📊", ADMIN_HR_MANAGER,
              module="reports.performance_reports"),
        _item("goal-reports", "Goal Reports", "🎯", ALL_ROLES,
              module="reports.goal_reports"),
        _item("review-reports", "Review Reports", "🏅", ADMIN_HR_MANAGER,
              module="reports.review_reports"),
        _item("team-analytics", "Team Analytics", "👥", LEADERSHIP_ROLES,
              module="reports.team_analytics"),
        _item("trend-analysis", "Trend Analysis", "📈", ADMIN_HR_MANAGER,
              module="reports.trend_analysis"),
        _item("export-center", "Export Center", "📤", ADMIN_HR_MANAGER,
              module="reports.export_center"),
    ]),

    # 10. EVERYONE
    _item("feedback", "Feedback", "💬", ALL_ROLES),
    _item("personal-settings", "Personal Settings", "🙍", ALL_ROLES,
          module="settings.personal_settings"),

    # 11. SYSTEM SETTINGS
    _item("system-settings", "System Settings", "⚙️", ADMIN_HR, submenu=[
        _item("system-config", "System Configuration", "⚙️", ["ADMIN"],
              module="settings.system_settings", options={"settings_type": "system"}),
        _item("goal-config", "Goal Configuration", "🎯", ADMIN_HR,
              module="settings.system_settings", options={"settings_type": "goals"}),
        _item("notification-config", "Notification Settings", "🔔", ADMIN_HR,
              module="settings.system_settings", options={"settings_type": "notifications"}),
    ]),
]


def _flatten(items, parent_label=None):
    """Walk MENU_ITEMS into a flat {menu_id: config} table."""
    flat = {}
    for entry in items:
        breadcrumb = [parent_label, entry["label"]] if parent_label else [entry["label"]]
        flat[entry["id"]] = {
            "label": entry["label"],
            "icon": entry["icon"],
            "roles": list(entry["roles"]),
            "breadcrumb": breadcrumb,
            "module": entry.get("module"),
            "options": dict(entry.get("options", {})),
            "parent": parent_label,
        }
        if entry.get("submenu"):
            flat.update(_flatten(entry["submenu"], entry["label"]))
    return flat


MENU_CONFIG = _flatten(MENU_ITEMS)

# Sidebar icons for each role badge
ROLE_BADGES = {
    "ADMIN": "🔴",
    "HR": "🔵",
    "MANAGER": "🟣",
    "TEAMLEAD": "🟢",
    "EMPLOYEE": "⚪",
}

# --- Runtime settings (overridable from the environment) ---

APP_TITLE = "PMS Enhanced"
APP_VERSION = "2.1.0"

STORAGE_FILE = os.environ.get("PMS_STORAGE_FILE", "pms_local_storage.db")
AUTH_MODE = os.environ.get("PMS_AUTH_MODE", "local")
LOGIN_DELAY_SECONDS = float(os.environ.get("PMS_LOGIN_DELAY_SECONDS", "1.0"))
SESSION_CHECK_SECONDS = float(os.environ.get("PMS_SESSION_CHECK_SECONDS", str(5 * 60)))
LOG_LEVEL = os.environ.get("PMS_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("PMS_LOG_FILE") or None

# Fixed storage keys
AUTH_STORE_KEY = "pms-auth-store"
USER_KEY = "pms_user"
TOKEN_KEY = "pms_token"
REFRESH_TOKEN_KEY = "pms_refresh_token"

# Bulk operation progress timer
BULK_TICK_SECONDS = 0.8

# Per-browser storage namespace (auth/browser_session.py)
BROWSER_ID_COOKIE = "pms_browser_id"
BROWSER_ID_FALLBACK_COOKIES = ("_streamlit_xsrf",)
BROWSER_ID_PARAM = "bid"
