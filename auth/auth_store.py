"""
auth/auth_store.py

The client-side auth store: who is signed in, whether the session is live,
and the tokens that came back from login.

The persisted record lives in the browser's local storage under
AUTH_STORE_KEY:

    {
      "user": {...} | null,
      "is_authenticated": bool,
      "token": str | null,
      "refresh_token": str | null,
      "last_activity": "2025-01-01T09:00:00" | null
    }

The refresh token is stored but never exchanged; there is no server.

State is read by the Streamlit script thread and changed by the session
watcher thread, so every read and write of it goes through `self._lock`.
"""

import copy
import logging
import threading
import weakref
from datetime import datetime
from typing import List, Optional

from config import AUTH_STORE_KEY, SESSION_CHECK_SECONDS

logger = logging.getLogger(__name__)

PERSISTED_FIELDS = ("user", "is_authenticated", "token", "refresh_token", "last_activity")


class AuthStore:
    def __init__(self, service, storage, storage_key: str = AUTH_STORE_KEY):
        self.service = service
        self.storage = storage
        self.storage_key = storage_key
        self._lock = threading.RLock()

        self.user: Optional[dict] = None
        self.is_authenticated = False
        self.is_loading = True
        self.token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.error: Optional[str] = None
        self.last_activity: Optional[str] = None

        self._rehydrate()
        self.refresh_user()

    # --- Persistence ---

    def _rehydrate(self) -> None:
        record = self.storage.get_item(self.storage_key) or {}
        if not isinstance(record, dict):
            logger.warning(f"Discarding malformed auth record under '{self.storage_key}'")
            record = {}
        with self._lock:
            self.user = record.get("user")
            self.is_authenticated = bool(record.get("is_authenticated", False))
            self.token = record.get("token")
            self.refresh_token = record.get("refresh_token")
            self.last_activity = record.get("last_activity")

    def _persist(self) -> None:
        self.storage.set_item(self.storage_key, self.snapshot())

    def snapshot(self) -> dict:
        """The persisted subset of the store, as written to storage."""
        with self._lock:
            return {
                "user": copy.deepcopy(self.user),
                "is_authenticated": self.is_authenticated,
                "token": self.token,
                "refresh_token": self.refresh_token,
                "last_activity": self.last_activity,
            }

    def current_session(self) -> dict:
        """
        A consistent view for the UI: authenticated is only True together
        with a user record.
        """
        with self._lock:
            user = copy.deepcopy(self.user) if isinstance(self.user, dict) else None
            return {
                "authenticated": bool(self.is_authenticated and user),
                "role": (user or {}).get("role"),
                "user": user,
            }

    def _reset(self) -> None:
        self.user = None
        self.is_authenticated = False
        self.token = None
        self.refresh_token = None
        self.last_activity = None

    # --- Actions ---

    def login(self, email: str, password: str) -> bool:
        self.is_loading = True
        self.error = None
        try:
            result = self.service.login(email, password)
            if result.authenticated:
                with self._lock:
                    self.user = result.user
                    self.is_authenticated = True
                    self.token = result.token
                    self.refresh_token = result.refresh_token
                    self.last_activity = datetime.now().isoformat(timespec="seconds")
                    self._persist()
            else:
                self.error = "Invalid email or password"
                if result.error and result.error != "Invalid credentials":
                    self.error = result.error
            return result.authenticated
        except Exception as e:
            logger.exception("Login failed unexpectedly")
            self.error = str(e) or "Login failed"
            return False
        finally:
            self.is_loading = False

    def logout(self) -> None:
        with self._lock:
            self.is_loading = True
            try:
                self.service.logout()
            except Exception:
                logger.exception("Logout error")
            finally:
                self._reset()
                self.error = None
                self.storage.remove_item(self.storage_key)
                self.is_loading = False

    def refresh_user(self) -> None:
        with self._lock:
            current_user = self.service.get_current_user()
            if self.service.is_authenticated() and current_user:
                self.user = current_user
                self.is_authenticated = True
                self.last_activity = datetime.now().isoformat(timespec="seconds")
                self._persist()
            elif self.is_authenticated or self.user:
                logger.info("Stored session is no longer valid; clearing auth state")
                self._reset()
                self._persist()
            self.is_loading = False

    def update_user(self, **changes) -> None:
        with self._lock:
            if not self.user:
                return
            updated = dict(self.user)
            updated.update(changes)
            self.user = updated
            self.service.save_user(updated)
            self._persist()

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def clear_error(self) -> None:
        self.error = None

    def check_session(self) -> bool:
        """
        Logs out when the store believes it is signed in but the service
        no longer has a valid session. Returns True if it logged out.
        """
        with self._lock:
            if self.is_authenticated and not self.service.is_authenticated():
                logger.warning("Session expired; logging out")
                self.logout()
                return True
            return False

    # --- Getters ---

    def has_role(self, role: str) -> bool:
        return self.service.has_role(role)

    def has_any_role(self, roles: List[str]) -> bool:
        return self.service.has_any_role(roles)

    def has_permission(self, permission: str) -> bool:
        return self.service.has_permission(permission)

    def has_any_permission(self, permissions: List[str]) -> bool:
        return self.service.has_any_permission(permissions)

    def can_access_route(self, required_roles=None, required_permissions=None) -> bool:
        return self.service.can_access_route(required_roles, required_permissions)

    def get_user_menu_items(self) -> List[dict]:
        return self.service.get_user_menu_items()


class SessionWatcher:
    """
    One background thread per process that re-validates every live store
    each `interval` seconds.

    Stores are held weakly: when a browser session ends and Streamlit drops
    its session state, its store is collected and simply stops being checked.
    """

    def __init__(self, interval: float = SESSION_CHECK_SECONDS):
        self.interval = interval
        self._stores = weakref.WeakSet()
        self._stores_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def watch(self, store: AuthStore) -> None:
        with self._stores_lock:
            self._stores.add(store)

    def unwatch(self, store: AuthStore) -> None:
        with self._stores_lock:
            self._stores.discard(store)

    @property
    def watched(self) -> int:
        with self._stores_lock:
            return len(self._stores)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="pms-session-watcher", daemon=True)
        self._thread.start()
        logger.debug(f"Session watcher started (every {self.interval}s)")

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
        self._thread = None

    def check_all(self) -> int:
        """Check every watched store once; returns how many were logged out."""
        with self._stores_lock:
            stores = list(self._stores)
        expired = 0
        for store in stores:
            try:
                if store.check_session():
                    expired += 1
            except Exception:
                logger.exception("Session check failed")
        return expired

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.check_all()
