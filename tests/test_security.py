"""Tests for the role -> view resolver and menu helpers."""
import copy

import pytest

from config import MENU_ITEMS, ROLES
from security import (
    filter_menu_items,
    get_contextual_menu_title,
    get_dashboard_type,
    get_default_dashboard,
    get_grouped_menu_items,
    get_menu_breadcrumb,
    get_menu_icon,
    get_menu_label,
    get_navigation_suggestions,
    get_review_context,
    has_menu_access,
    has_role_level,
    is_valid_menu_path,
    is_valid_menu_transition,
    normalize_role,
    resolve_role,
    resolve_role_view,
)


def _ids(items):
    """All menu ids in a (nested) menu tree."""
    out = []
    for item in items:
        out.append(item["id"])
        out.extend(_ids(item.get("submenu") or []))
    return out


class TestRoleResolution:

    @pytest.mark.parametrize("role, dashboard_type, menu_id", [
        ("EMPLOYEE", "personal", "personal-dashboard"),
        ("TEAMLEAD", "team", "team-dashboard"),
        ("MANAGER", "team", "team-dashboard"),
        ("HR", "organization", "organization-dashboard"),
        ("ADMIN", "organization", "organization-dashboard"),
    ])
    def test_default_dashboards(self, role, dashboard_type, menu_id):
        assert get_dashboard_type(role) == dashboard_type
        assert get_default_dashboard(role) == menu_id

    def test_normalize_role(self):
        assert normalize_role(" hr ") == "HR"
        assert normalize_role(None) == ""
        assert normalize_role(42) == ""

    @pytest.mark.parametrize("role", ["INTERN", "", None, 7, "superuser"])
    def test_unknown_roles_fall_back_to_employee(self, role, caplog):
        assert resolve_role(role) == "EMPLOYEE"
        assert get_default_dashboard(role) == "personal-dashboard"
        assert "Unknown role" in caplog.text

    def test_known_role_is_case_insensitive(self):
        assert resolve_role("manager") == "MANAGER"

    def test_role_view_for_unknown_role(self):
        view = resolve_role_view("contractor")
        assert view.role == "EMPLOYEE"
        assert view.dashboard_type == "personal"
        assert view.default_menu_id == "personal-dashboard"
        assert _ids(view.menu) == _ids(resolve_role_view("EMPLOYEE").menu)


class TestMenuFiltering:

    def test_employee_menu(self):
        ids = _ids(filter_menu_items("EMPLOYEE", MENU_ITEMS))
        for visible in ("personal-dashboard", "my-goals", "my-reviews", "goal-reports", "personal-settings"):
            assert visible in ids
        for hidden in ("masters", "user-management", "kra-management", "team-management",
                       "projects", "system-settings", "team-dashboard", "organization-dashboard"):
            assert hidden not in ids

    def test_admin_sees_everything_except_line_manager_sections(self):
        ids = _ids(filter_menu_items("ADMIN", MENU_ITEMS))
        assert "system-config" in ids
        assert "department-master" in ids
        # team management and projects are for managers and team leads only
        assert "team-management" not in ids
        assert "projects" not in ids

    def test_hr_cannot_see_admin_only_leaf(self):
        ids = _ids(filter_menu_items("HR", MENU_ITEMS))
        assert "system-settings" in ids
        assert "goal-config" in ids
        assert "system-config" not in ids

    def test_every_visible_item_lists_the_role(self):
        for role in ROLES:
            stack = list(filter_menu_items(role, MENU_ITEMS))
            while stack:
                item = stack.pop()
                assert role in item["roles"]
                stack.extend(item.get("submenu") or [])

    def test_parent_with_no_visible_children_is_dropped(self):
        tree = [
            {"id": "p", "label": "P", "icon": "x", "roles": ["EMPLOYEE", "ADMIN"], "submenu": [
                {"id": "c", "label": "C", "icon": "x", "roles": ["ADMIN"]},
            ]},
            {"id": "leaf", "label": "Leaf", "icon": "x", "roles": ["EMPLOYEE"]},
        ]
        assert _ids(filter_menu_items("EMPLOYEE", tree)) == ["leaf"]
        assert _ids(filter_menu_items("ADMIN", tree)) == ["p", "c"]

    def test_nested_filtering_is_recursive(self):
        tree = [
            {"id": "a", "label": "A", "icon": "x", "roles": ["HR"], "submenu": [
                {"id": "b", "label": "B", "icon": "x", "roles": ["HR"], "submenu": [
                    {"id": "c", "label": "C", "icon": "x", "roles": ["ADMIN"]},
                ]},
                {"id": "d", "label": "D", "icon": "x", "roles": ["HR"]},
            ]},
        ]
        assert _ids(filter_menu_items("HR", tree)) == ["a", "d"]

    def test_input_is_not_mutated(self):
        before = copy.deepcopy(MENU_ITEMS)
        filter_menu_items("EMPLOYEE", MENU_ITEMS)
        assert MENU_ITEMS == before

    def test_unknown_role_sees_nothing_when_filtering_directly(self):
        assert filter_menu_items("INTERN", MENU_ITEMS) == []


class TestMenuLookups:

    def test_breadcrumbs(self):
        assert get_menu_breadcrumb("my-goals") == ["Goals Management", "My Goals"]
        assert get_menu_breadcrumb("personal-settings") == ["Personal Settings"]
        assert get_menu_breadcrumb("no-such-page") == ["no-such-page"]

    def test_labels_and_icons(self):
        assert get_menu_label("team-reviews") == "Team Reviews"
        assert get_menu_label("no-such-page") == "No Such Page"
        assert get_menu_icon("no-such-page") == "⚪"

    def test_access_checks(self):
        assert has_menu_access("HR", "reviewer-mapping")
        assert not has_menu_access("EMPLOYEE", "reviewer-mapping")
        assert not has_menu_access("ADMIN", "no-such-page")
        assert is_valid_menu_path("my-goals", "employee")
        assert not is_valid_menu_path("no-such-page", "ADMIN")
        assert is_valid_menu_transition("my-goals", "goal-evidence", "EMPLOYEE")
        assert not is_valid_menu_transition("my-goals", "kra-master", "EMPLOYEE")

    def test_role_levels(self):
        assert has_role_level("ADMIN", "HR")
        assert has_role_level("MANAGER", "MANAGER")
        assert not has_role_level("EMPLOYEE", "TEAMLEAD")
        assert not has_role_level("bogus", "EMPLOYEE")

    def test_grouped_menu_items(self):
        grouped = get_grouped_menu_items("EMPLOYEE")
        assert grouped["Personal"] == ["personal-settings"]
        assert "my-goals" in grouped["Goals Management"]
        assert "Masters" not in grouped
        # leaves without a page are not offered
        assert all("feedback" not in ids for ids in grouped.values())

    def test_navigation_suggestions(self):
        assert get_navigation_suggestions("personal-dashboard", "EMPLOYEE") == [
            "my-goals", "my-reviews", "goal-reports"]
        assert get_navigation_suggestions("team-reviews", "TEAMLEAD") == ["team-goals", "performance-assessment"]
        assert get_navigation_suggestions("unknown", "ADMIN") == []
        # HR cannot open my-goals / my-reviews
        assert get_navigation_suggestions("personal-dashboard", "HR") == ["goal-reports"]

    def test_review_context(self):
        assert get_review_context("MANAGER", "team-reviews") == "team"
        assert get_review_context("EMPLOYEE", "team-reviews") == "self"
        assert get_review_context("HR", "review-cycles") == "admin"
        assert get_review_context("EMPLOYEE", "my-reviews") == "self"

    def test_contextual_titles(self):
        assert get_contextual_menu_title("team-dashboard", "TEAMLEAD") == "Team Dashboard - Team Lead View"
        assert get_contextual_menu_title("team-dashboard", "MANAGER") == "Team Dashboard - Manager View"
        assert get_contextual_menu_title("organization-dashboard", "hr") == "Organization Dashboard - HR View"
        assert get_contextual_menu_title("my-goals", "EMPLOYEE") == "My Goals"
