# auth/users_local.py

# Demo accounts for the 'local' auth mode.
# Every account shares the same password; keys are lower-case emails.

DEMO_PASSWORD = "password123"

USERS = {
    "admin@company.com": {
        "id": "user-admin",
        "name": "System Administrator",
        "email": "admin@company.com",
        "role": "ADMIN",
        "department": "IT",
        "domain": "Administration",
        "project": None,
        "manager": None,
        "permissions": ["*"],
        "is_active": True,
    },
    "hr@company.com": {
        "id": "user-hr",
        "name": "HR Manager",
        "email": "hr@company.com",
        "role": "HR",
        "department": "Human Resources",
        "domain": "HR Operations",
        "project": None,
        "manager": None,
        "permissions": ["user.read", "user.create", "user.update", "review.read", "goal.read"],
        "is_active": True,
    },
    "manager@company.com": {
        "id": "user-manager",
        "name": "Michael Chen",
        "email": "manager@company.com",
        "role": "MANAGER",
        "department": "Engineering",
        "domain": "Development",
        "project": "Web Platform",
        "manager": None,
        "permissions": ["team.read", "review.write", "goal.write", "analytics.read"],
        "is_active": True,
    },
    "teamlead@company.com": {
        "id": "user-teamlead",
        "name": "Jessica Wong",
        "email": "teamlead@company.com",
        "role": "TEAMLEAD",
        "department": "Engineering",
        "domain": "Development",
        "project": "Mobile App",
        "manager": "Michael Chen",
        "permissions": ["team.read", "review.write", "goal.write"],
        "is_active": True,
    },
    "employee@company.com": {
        "id": "user-employee",
        "name": "Sarah Johnson",
        "email": "employee@company.com",
        "role": "EMPLOYEE",
        "department": "Engineering",
        "domain": "Development",
        "project": "Web Platform",
        "manager": "Michael Chen",
        "permissions": ["profile.read", "profile.update", "goal.read", "goal.update", "review.read"],
        "is_active": True,
    },
}

# Shown on the login page as one-click logins
DEMO_ACCOUNTS = [
    {"role": "ADMIN", "email": "admin@company.com", "description": "Full system access"},
    {"role": "HR", "email": "hr@company.com", "description": "HR operations & reporting"},
    {"role": "MANAGER", "email": "manager@company.com", "description": "Team & department management"},
    {"role": "TEAMLEAD", "email": "teamlead@company.com", "description": "Team leadership & reviews"},
    {"role": "EMPLOYEE", "email": "employee@company.com", "description": "Performance & goal tracking"},
]

# Quick links per role (what the header "shortcuts" menu offers)
ROLE_QUICK_LINKS = {
    "ADMIN": [
        {"id": "dashboard", "label": "Dashboard"},
        {"id": "user-operations", "label": "User Management"},
        {"id": "department-master", "label": "Organizations"},
        {"id": "kra-operations", "label": "KRA Management"},
        {"id": "goal-management", "label": "Goal Management"},
        {"id": "review-management-main", "label": "Review Management"},
        {"id": "analytics-dashboard", "label": "Analytics"},
        {"id": "performance-reports", "label": "Reports"},
        {"id": "system-config", "label": "System Settings"},
    ],
    "HR": [
        {"id": "dashboard", "label": "Dashboard"},
        {"id": "user-operations", "label": "Employee Management"},
        {"id": "kra-operations", "label": "KRA Management"},
        {"id": "review-management-main", "label": "Review Management"},
        {"id": "analytics-dashboard", "label": "HR Analytics"},
        {"id": "performance-reports", "label": "HR Reports"},
    ],
    "MANAGER": [
        {"id": "dashboard", "label": "Dashboard"},
        {"id": "team-dashboard", "label": "My Team"},
        {"id": "team-goals", "label": "Team Goals"},
        {"id": "team-reviews", "label": "Team Reviews"},
        {"id": "team-analytics", "label": "Team Analytics"},
        {"id": "my-goals", "label": "My Goals"},
        {"id": "my-reviews", "label": "My Reviews"},
    ],
    "TEAMLEAD": [
        {"id": "dashboard", "label": "Dashboard"},
        {"id": "team-dashboard", "label": "My Team"},
        {"id": "team-goals", "label": "Team Goals"},
        {"id": "team-reviews", "label": "Team Reviews"},
        {"id": "my-goals", "label": "My Goals"},
        {"id": "my-reviews", "label": "My Reviews"},
    ],
    "EMPLOYEE": [
        {"id": "dashboard", "label": "Dashboard"},
        {"id": "my-goals", "label": "My Goals"},
        {"id": "my-reviews", "label": "My Reviews"},
        {"id": "goal-reports", "label": "Goal History"},
        {"id": "personal-settings", "label": "My Profile"},
    ],
}
