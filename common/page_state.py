# common/page_state.py

"""
Page-local state.

Pages keep their working copy of the demo records in st.session_state,
seeded from common/data_access.py the first time they are opened. Edits
live for the browser session only and are gone after a reload.
"""

import itertools
import time
from datetime import date

import streamlit as st

ROWS_PREFIX = "rows::"

_id_counter = itertools.count(1)


def local_rows(key: str, factory):
    """Return the session-held list for `key`, seeding it from `factory()`."""
    state_key = f"{ROWS_PREFIX}{key}"
    if state_key not in st.session_state:
        st.session_state[state_key] = factory()
    return st.session_state[state_key]


def replace_rows(key: str, rows) -> None:
    st.session_state[f"{ROWS_PREFIX}{key}"] = rows


def clear_page_rows(state=None) -> int:
    """Drop every page's working rows (a new user must not see the last one's)."""
    state = st.session_state if state is None else state
    keys = [k for k in list(state.keys()) if str(k).startswith(ROWS_PREFIX)]
    for key in keys:
        del state[key]
    return len(keys)


def next_id(prefix: str) -> str:
    return f"{prefix}-{int(time.time() * 1000)}-{next(_id_counter)}"


def today_str() -> str:
    return date.today().isoformat()


def get_auth_store():
    """The AuthStore main_app.py keeps for this browser session."""
    return st.session_state.get("auth_store")


def get_shared_storage():
    """App-wide (not per-browser) local storage, e.g. for system settings."""
    return st.session_state.get("shared_storage")
