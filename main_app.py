import importlib
import logging

import streamlit as st

from auth.auth_service import AuthService
from auth.auth_store import AuthStore, SessionWatcher
from auth.browser_session import current_browser_id
from auth.users_local import DEMO_ACCOUNTS, DEMO_PASSWORD
from common.layout import render_frame
from common.local_storage import LocalStorage
from common.logging_config import setup_logging
from config import (
    APP_TITLE,
    AUTH_MODE,
    LOG_FILE,
    LOG_LEVEL,
    LOGIN_DELAY_SECONDS,
    SESSION_CHECK_SECONDS,
    STORAGE_FILE,
)
from router import is_missing_page, page_module_path, resolve_route
from security import (
    ensure_logged_in,
    get_contextual_menu_title,
    get_menu_breadcrumb,
    get_user_session,
    resolve_role_view,
)
from ui_nav import build_sidebar

logger = setup_logging("pms", level=LOG_LEVEL, log_file=LOG_FILE)

# session keys that survive a logout
KEEP_ON_LOGOUT = ("auth_store", "shared_storage", "browser_id")

# -------------------------------------------
# PAGE CONFIG
# -------------------------------------------
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_session_watcher() -> SessionWatcher:
    """One watcher thread per server process, shared by every browser session."""
    watcher = SessionWatcher(interval=SESSION_CHECK_SECONDS)
    watcher.start()
    return watcher


def get_auth_store() -> AuthStore:
    """One store per browser session, keyed in local storage by browser id."""
    if "auth_store" not in st.session_state:
        shared = LocalStorage(STORAGE_FILE)
        storage = shared.scoped(current_browser_id())
        service = AuthService(storage, mode=AUTH_MODE, login_delay=LOGIN_DELAY_SECONDS)
        store = AuthStore(service, storage)
        get_session_watcher().watch(store)
        st.session_state["shared_storage"] = shared
        st.session_state["auth_store"] = store
    return st.session_state["auth_store"]


# 1. Auth / session ---------------------------------
store = get_auth_store()
session = get_user_session(store)

if not session["authenticated"]:
    ensure_logged_in(store, DEMO_ACCOUNTS, DEMO_PASSWORD)  # will render login form or set session
    st.stop()

# 2. Figure out what this role can see ----------------
role_view = resolve_role_view(session["role"])
user = dict(session["user"], role=role_view.role)

# 3. Draw sidebar + get nav state ---------------------
nav_state = build_sidebar(user=user, role_view=role_view)

if nav_state["logout"]:
    # wipe page state & rerun; the store stays with this browser, the watcher with the process
    store.logout()
    for key in list(st.session_state.keys()):
        if key not in KEEP_ON_LOGOUT:
            del st.session_state[key]
    st.rerun()

# 4. Resolve the route --------------------------------
route = resolve_route(nav_state["active_menu"], role_view.role)
if route.fallback:
    st.session_state["active_menu"] = route.menu_id

breadcrumb = get_menu_breadcrumb(route.menu_id)
page_title = get_contextual_menu_title(route.menu_id, role_view.role)

# 5. Load and render the chosen page ------------------
module_path = page_module_path(route)

try:
    module = importlib.import_module(module_path)
    body_component, meta = module.render_page(user=user, **route.options)
except ModuleNotFoundError as e:
    if not is_missing_page(e, module_path):
        raise
    # "Coming soon" placeholder
    body_component = None
    meta = {
        "title_override": page_title,
        "last_updated": "N/A",
        "owner": "TBD",
        "data_source": "N/A",
        "coming_soon": True
    }
except Exception as e:
    # Catch any other error from within the page module
    logger.exception(f"Failed to build page '{route.menu_id}'")
    st.error(f"An error occurred while rendering '{page_title}'.")
    st.exception(e)
    st.stop()

# 6. Wrap it in the PMS frame -------------------------
try:
    render_frame(
        title_override=meta.get("title_override", page_title),
        body_component=body_component,
        user=user,
        breadcrumb=breadcrumb,
        last_updated=meta.get("last_updated", "N/A"),
        owner=meta.get("owner", "TBD"),
        data_source=meta.get("data_source", "N/A"),
        coming_soon=meta.get("coming_soon", False),
    )
except Exception as e:
    logger.exception(f"Page '{route.menu_id}' failed while rendering")
    st.error(f"An error occurred while rendering '{page_title}'.")
    st.exception(e)
