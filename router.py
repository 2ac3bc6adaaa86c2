# router.py

"""
Main-content router: menu id -> page module.

The router never raises. Anything it cannot (or may not) route goes to the
caller's default dashboard, with a warning in the log.
"""

import logging
from collections import namedtuple

from config import MENU_CONFIG
from security import get_default_dashboard, has_menu_access, resolve_role

logger = logging.getLogger(__name__)

# module is the dotted path under apps/, options are passed to render_page
Route = namedtuple("Route", ["menu_id", "module", "options", "fallback"])

DASHBOARD_ALIASES = ("", "dashboard")


def _default_route(role, fallback: bool) -> Route:
    menu_id = get_default_dashboard(role)
    menu = MENU_CONFIG[menu_id]
    return Route(menu_id=menu_id, module=menu["module"], options=dict(menu["options"]), fallback=fallback)


def resolve_route(menu_id, role) -> Route:
    role = resolve_role(role)

    if menu_id is None:
        return _default_route(role, fallback=False)

    if not isinstance(menu_id, str):
        logger.warning(f"Ignoring non-text menu route {menu_id!r}, showing default dashboard")
        return _default_route(role, fallback=True)

    if menu_id in DASHBOARD_ALIASES:
        return _default_route(role, fallback=False)

    menu = MENU_CONFIG.get(menu_id)
    if menu is None:
        logger.warning(f"Unknown menu route '{menu_id}', showing default dashboard")
        return _default_route(role, fallback=True)

    if not menu["module"]:
        logger.warning(f"Menu '{menu_id}' has no page yet, showing default dashboard")
        return _default_route(role, fallback=True)

    if not has_menu_access(role, menu_id):
        logger.warning(f"Role {role} may not open '{menu_id}', showing default dashboard")
        return _default_route(role, fallback=True)

    return Route(menu_id=menu_id, module=menu["module"], options=dict(menu["options"]), fallback=False)


def page_module_path(route: Route) -> str:
    return f"apps.{route.module}"


def is_missing_page(error: ModuleNotFoundError, module_path: str) -> bool:
    """
    True when `error` means the page module itself (or its section
    package) does not exist yet, as opposed to a broken import inside it.
    """
    missing = error.name or ""
    return bool(missing) and (module_path == missing or module_path.startswith(missing + "."))
