"""
auth/browser_session.py

Which browser is this? Every Streamlit session on the server shares one
local-storage file, so the auth record and the pms_* keys are stored under a
per-browser namespace (see LocalStorage.scoped).

The id comes from, in order:

1.  the `pms_browser_id` cookie, if a proxy or an earlier visit set one;
2.  a hash of Streamlit's own per-browser XSRF cookie;
3.  the `bid` query parameter written on a previous run;
4.  a fresh random id, which is then written to the query string so a
    reload of the same tab finds it again.
"""

import hashlib
import logging
import re
import uuid
from typing import Callable, Mapping, Optional, Tuple

import streamlit as st

from config import BROWSER_ID_COOKIE, BROWSER_ID_FALLBACK_COOKIES, BROWSER_ID_PARAM

logger = logging.getLogger(__name__)

BROWSER_ID_RE = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


def is_valid_browser_id(value) -> bool:
    return isinstance(value, str) and bool(BROWSER_ID_RE.match(value))


def _hash_cookie(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:32]


def _first(value):
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value


def resolve_browser_id(
    cookies: Optional[Mapping[str, str]],
    query_params: Optional[Mapping[str, str]],
    new_id: Callable[[], str] = lambda: uuid.uuid4().hex,
) -> Tuple[str, str]:
    """Returns (browser_id, source) where source is "cookie", "query" or "new"."""
    cookies = cookies or {}
    query_params = query_params or {}

    own = _first(cookies.get(BROWSER_ID_COOKIE))
    if is_valid_browser_id(own):
        return own, "cookie"

    for name in BROWSER_ID_FALLBACK_COOKIES:
        value = _first(cookies.get(name))
        if isinstance(value, str) and value:
            return _hash_cookie(value), "cookie"

    from_query = _first(query_params.get(BROWSER_ID_PARAM))
    if is_valid_browser_id(from_query):
        return from_query, "query"
    if from_query:
        logger.warning(f"Ignoring malformed '{BROWSER_ID_PARAM}' query parameter")

    return new_id(), "new"


def current_browser_id() -> str:
    """The id for the browser behind this Streamlit session (cached per session)."""
    if "browser_id" not in st.session_state:
        browser_id, source = resolve_browser_id(st.context.cookies, st.query_params)
        if source != "cookie" and st.query_params.get(BROWSER_ID_PARAM) != browser_id:
            st.query_params[BROWSER_ID_PARAM] = browser_id
        logger.debug(f"Browser session {browser_id[:8]}... ({source})")
        st.session_state["browser_id"] = browser_id
    return st.session_state["browser_id"]
