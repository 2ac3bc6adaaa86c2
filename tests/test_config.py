"""Integrity checks for the menu configuration."""
import importlib
from collections import Counter
from pathlib import Path

import pytest

from auth.users_local import DEMO_ACCOUNTS, ROLE_QUICK_LINKS, USERS
from config import DASHBOARD_MENU_IDS, DEFAULT_DASHBOARD_BY_ROLE, MENU_CONFIG, MENU_ITEMS, ROLE_HIERARCHY, ROLES

ROOT = Path(__file__).resolve().parents[1]

# Menu entries that point at a page which has not been built yet ("coming soon").
PAGES_NOT_BUILT = {"reviews.review_cycles"}


def _walk(items):
    for item in items:
        yield item
        yield from _walk(item.get("submenu") or [])


def _page_modules():
    return sorted({m["module"] for m in MENU_CONFIG.values() if m["module"]})


class TestMenuConfig:

    def test_ids_are_unique(self):
        counts = Counter(item["id"] for item in _walk(MENU_ITEMS))
        assert [menu_id for menu_id, n in counts.items() if n > 1] == []
        assert len(MENU_CONFIG) == len(counts)

    def test_roles_are_in_the_closed_set(self):
        for item in _walk(MENU_ITEMS):
            assert item["roles"], item["id"]
            assert set(item["roles"]) <= set(ROLES), item["id"]

    def test_children_never_widen_parent_roles(self):
        for item in _walk(MENU_ITEMS):
            for child in item.get("submenu") or []:
                assert set(child["roles"]) <= set(item["roles"]), child["id"]

    def test_every_role_has_a_reachable_dashboard(self):
        assert set(DEFAULT_DASHBOARD_BY_ROLE) == set(ROLES) == set(ROLE_HIERARCHY)
        for role, dashboard_type in DEFAULT_DASHBOARD_BY_ROLE.items():
            menu = MENU_CONFIG[DASHBOARD_MENU_IDS[dashboard_type]]
            assert role in menu["roles"]
            assert menu["module"]

    def test_quick_links_point_at_menu_ids(self):
        for role, links in ROLE_QUICK_LINKS.items():
            assert role in ROLES
            for link in links:
                assert link["id"] in MENU_CONFIG, (role, link["id"])

    def test_demo_accounts_match_users(self):
        assert {a["email"] for a in DEMO_ACCOUNTS} == set(USERS)
        assert {u["role"] for u in USERS.values()} == set(ROLES)


class TestPageModules:

    @pytest.mark.parametrize("module", _page_modules())
    def test_page_exists_or_is_marked_not_built(self, module):
        exists = (ROOT / "apps" / Path(*module.split("."))).with_suffix(".py").exists()
        assert exists != (module in PAGES_NOT_BUILT), module

    @pytest.mark.parametrize("module", [m for m in _page_modules() if m not in PAGES_NOT_BUILT])
    def test_built_pages_expose_render_page(self, module):
        page = importlib.import_module(f"apps.{module}")
        assert callable(page.render_page)
