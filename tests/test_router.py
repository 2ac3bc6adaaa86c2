"""Tests for menu id -> page module routing."""
import pytest

from config import MENU_CONFIG
from router import is_missing_page, page_module_path, resolve_route


class TestResolveRoute:

    def test_known_route(self):
        route = resolve_route("my-goals", "EMPLOYEE")
        assert route.menu_id == "my-goals"
        assert route.module == "goals.my_goals"
        assert route.options == {}
        assert not route.fallback

    @pytest.mark.parametrize("menu_id", [None, "", "dashboard"])
    def test_dashboard_aliases_go_to_role_default(self, menu_id):
        route = resolve_route(menu_id, "ADMIN")
        assert route.menu_id == "organization-dashboard"
        assert route.module == "dashboards.organization_dashboard"
        assert not route.fallback

    def test_unknown_id_falls_back(self, caplog):
        route = resolve_route("does-not-exist", "TEAMLEAD")
        assert route.menu_id == "team-dashboard"
        assert route.fallback
        assert "does-not-exist" in caplog.text

    def test_forbidden_id_falls_back(self):
        route = resolve_route("department-master", "EMPLOYEE")
        assert route.menu_id == "personal-dashboard"
        assert route.fallback

    def test_id_without_page_falls_back(self):
        route = resolve_route("feedback", "MANAGER")
        assert route.menu_id == "team-dashboard"
        assert route.fallback

    def test_unknown_role_routes_like_employee(self):
        assert resolve_route(None, "intern").menu_id == "personal-dashboard"
        assert resolve_route("kra-master", "intern").fallback

    @pytest.mark.parametrize("menu_id, settings_type", [
        ("system-config", "system"),
        ("goal-config", "goals"),
        ("notification-config", "notifications"),
    ])
    def test_settings_options_pass_through(self, menu_id, settings_type):
        route = resolve_route(menu_id, "ADMIN")
        assert route.module == "settings.system_settings"
        assert route.options == {"settings_type": settings_type}

    def test_options_are_a_copy(self):
        route = resolve_route("goal-config", "HR")
        route.options["settings_type"] = "tampered"
        assert MENU_CONFIG["goal-config"]["options"] == {"settings_type": "goals"}

    def test_module_path(self):
        assert page_module_path(resolve_route("my-goals", "EMPLOYEE")) == "apps.goals.my_goals"

    @pytest.mark.parametrize("menu_id", [["my-goals"], {"id": "my-goals"}, 42])
    def test_non_text_menu_id_falls_back(self, menu_id):
        route = resolve_route(menu_id, "EMPLOYEE")
        assert route.menu_id == "personal-dashboard"
        assert route.fallback


class TestMissingPage:

    def test_missing_module(self):
        err = ModuleNotFoundError("x", name="apps.goals.goal_categories")
        assert is_missing_page(err, "apps.goals.goal_categories")

    def test_missing_section_package(self):
        err = ModuleNotFoundError("x", name="apps.kra_management")
        assert is_missing_page(err, "apps.kra_management.kra_operations")

    def test_broken_import_inside_page(self):
        err = ModuleNotFoundError("x", name="some_missing_library")
        assert not is_missing_page(err, "apps.goals.my_goals")

    def test_similar_prefix_is_not_a_match(self):
        err = ModuleNotFoundError("x", name="apps.goals.my")
        assert not is_missing_page(err, "apps.goals.my_goals")
