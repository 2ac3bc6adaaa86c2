# auth/auth_service.py

import copy
import logging
import time
from typing import Iterable, List, Optional

from config import REFRESH_TOKEN_KEY, TOKEN_KEY, USER_KEY

logger = logging.getLogger(__name__)


class AuthResult:
    def __init__(self, authenticated: bool, user: Optional[dict], role: Optional[str],
                 error: Optional[str] = None, token: Optional[str] = None,
                 refresh_token: Optional[str] = None):
        self.authenticated = authenticated
        self.user = user
        self.role = role
        self.error = error
        self.token = token
        self.refresh_token = refresh_token


class AuthService:
    """
    The idea: the app only talks to AuthService.
    Today we back it with the demo accounts in users_local.py.
    Later we swap it to corporate SSO, but keep the same interface.

    Tokens and the signed-in user are written to `storage` under the
    pms_token / pms_refresh_token / pms_user keys.
    """

    def __init__(self, storage, mode="local", login_delay: float = 1.0):
        self.storage = storage
        self.mode = mode
        # 'local' -> check static dict
        # 'sso'   -> call corporate SSO (future)
        self.login_delay = login_delay
        self._current_user = self.storage.get_item(USER_KEY)

    # --- Session state ---

    def get_current_user(self) -> Optional[dict]:
        return copy.deepcopy(self._current_user)

    def is_authenticated(self) -> bool:
        token = self.storage.get_item(TOKEN_KEY)
        return bool(token and self._current_user)

    def save_user(self, user: dict) -> None:
        self.storage.set_item(USER_KEY, user)
        self._current_user = copy.deepcopy(user)

    def _clear_auth_data(self) -> None:
        for key in (USER_KEY, TOKEN_KEY, REFRESH_TOKEN_KEY):
            self.storage.remove_item(key)
        self._current_user = None

    # --- Login / logout ---

    def login(self, email: str, password: str) -> AuthResult:
        if self.mode == "local":
            return self.mock_login(email, password)

        elif self.mode == "sso":
            # future: talk to corporate SSO / JWT / headers
            # for now we just stub it
            return AuthResult(
                authenticated=False,
                user=None,
                role=None,
                error="SSO mode not implemented yet"
            )

        else:
            return AuthResult(
                authenticated=False,
                user=None,
                role=None,
                error=f"Unknown auth mode {self.mode}"
            )

    def mock_login(self, email: str, password: str) -> AuthResult:
        from .users_local import DEMO_PASSWORD, USERS

        found_user = USERS.get((email or "").strip().lower())

        if found_user and password == DEMO_PASSWORD:
            # Simulate the round trip to an identity server
            if self.login_delay > 0:
                time.sleep(self.login_delay)

            stamp = int(time.time() * 1000)
            token = f"mock_token_{stamp}"
            refresh_token = f"mock_refresh_{stamp}"

            self.storage.set_item(TOKEN_KEY, token)
            self.storage.set_item(REFRESH_TOKEN_KEY, refresh_token)
            self.save_user(found_user)

            logger.info(f"Mock login successful: {found_user['name']}")
            return AuthResult(
                authenticated=True,
                user=copy.deepcopy(found_user),
                role=found_user["role"],
                token=token,
                refresh_token=refresh_token,
            )

        logger.warning("Mock login failed: invalid credentials")
        return AuthResult(
            authenticated=False,
            user=None,
            role=None,
            error="Invalid credentials"
        )

    def logout(self) -> None:
        self._clear_auth_data()
        logger.info("Logout successful")

    # --- Role & permission checks ---

    def has_role(self, role: str) -> bool:
        return bool(self._current_user) and self._current_user.get("role") == role

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return bool(self._current_user) and self._current_user.get("role") in list(roles)

    def has_permission(self, permission: str) -> bool:
        if not self._current_user:
            return False
        granted = self._current_user.get("permissions") or []
        return "*" in granted or permission in granted

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return any(self.has_permission(p) for p in permissions)

    def can_access_route(self, required_roles: Optional[List[str]] = None,
                         required_permissions: Optional[List[str]] = None) -> bool:
        if not self.is_authenticated():
            return False
        if required_roles and not self.has_any_role(required_roles):
            return False
        if required_permissions and not self.has_any_permission(required_permissions):
            return False
        return True

    def get_user_menu_items(self) -> List[dict]:
        """The role's quick links (ids match MENU_CONFIG)."""
        from .users_local import ROLE_QUICK_LINKS

        if not self._current_user:
            return []
        return copy.deepcopy(ROLE_QUICK_LINKS.get(self._current_user.get("role"), []))
