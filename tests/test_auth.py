"""Tests for the auth service, the persisted auth store and the session watcher."""
import gc
import threading
import time

import pytest

from auth.auth_service import AuthService
from auth.auth_store import AuthStore, SessionWatcher
from auth.users_local import DEMO_ACCOUNTS, DEMO_PASSWORD
from config import AUTH_STORE_KEY, TOKEN_KEY, USER_KEY


class TestAuthService:

    @pytest.mark.parametrize("account", DEMO_ACCOUNTS, ids=lambda a: a["role"])
    def test_demo_accounts_can_log_in(self, service, account):
        result = service.login(account["email"], DEMO_PASSWORD)
        assert result.authenticated
        assert result.role == account["role"]
        assert result.user["email"] == account["email"]
        assert result.token.startswith("mock_token_")
        assert service.is_authenticated()

    def test_email_is_case_insensitive(self, service):
        assert service.login("  Manager@Company.com ", DEMO_PASSWORD).authenticated

    def test_wrong_password(self, service):
        result = service.login("admin@company.com", "nope")
        assert not result.authenticated
        assert result.error == "Invalid credentials"
        assert not service.is_authenticated()

    def test_unknown_user(self, service):
        assert not service.login("ghost@company.com", DEMO_PASSWORD).authenticated

    def test_sso_mode_is_not_available(self, storage):
        result = AuthService(storage, mode="sso", login_delay=0).login("admin@company.com", DEMO_PASSWORD)
        assert not result.authenticated
        assert result.error == "SSO mode not implemented yet"

    def test_unknown_mode(self, storage):
        result = AuthService(storage, mode="ldap", login_delay=0).login("admin@company.com", DEMO_PASSWORD)
        assert result.error == "Unknown auth mode ldap"

    def test_logout_clears_tokens_and_user(self, service, storage):
        service.login("hr@company.com", DEMO_PASSWORD)
        service.logout()
        assert storage.get_item(TOKEN_KEY) is None
        assert storage.get_item(USER_KEY) is None
        assert service.get_current_user() is None

    def test_permissions(self, service):
        service.login("hr@company.com", DEMO_PASSWORD)
        assert service.has_permission("user.read")
        assert not service.has_permission("system.config")
        assert service.has_any_permission(["system.config", "goal.read"])
        assert service.has_role("HR")
        assert service.has_any_role(["ADMIN", "HR"])

    def test_wildcard_permission(self, service):
        service.login("admin@company.com", DEMO_PASSWORD)
        assert service.has_permission("anything.at.all")

    def test_can_access_route(self, service):
        assert not service.can_access_route()
        service.login("employee@company.com", DEMO_PASSWORD)
        assert service.can_access_route()
        assert service.can_access_route(required_roles=["EMPLOYEE"])
        assert not service.can_access_route(required_roles=["ADMIN", "HR"])
        assert not service.can_access_route(required_permissions=["user.create"])

    def test_menu_items_follow_role(self, service):
        assert service.get_user_menu_items() == []
        service.login("teamlead@company.com", DEMO_PASSWORD)
        ids = [item["id"] for item in service.get_user_menu_items()]
        assert "team-goals" in ids


class TestAuthStore:

    def test_starts_signed_out(self, store):
        assert not store.is_authenticated
        assert store.user is None
        assert not store.is_loading

    def test_login_persists_record(self, store, storage):
        assert store.login("manager@company.com", DEMO_PASSWORD)
        record = storage.get_item(AUTH_STORE_KEY)
        assert record["is_authenticated"] is True
        assert record["user"]["role"] == "MANAGER"
        assert record["token"] == store.token
        assert record["last_activity"]

    def test_failed_login_sets_message(self, store):
        assert not store.login("manager@company.com", "wrong")
        assert store.error == "Invalid email or password"
        assert not store.is_authenticated
        store.clear_error()
        assert store.error is None

    def test_service_error_message_is_kept(self, storage):
        store = AuthStore(AuthService(storage, mode="sso", login_delay=0), storage)
        assert not store.login("admin@company.com", DEMO_PASSWORD)
        assert store.error == "SSO mode not implemented yet"

    def test_unexpected_error_does_not_escape(self, store, monkeypatch):
        def boom(email, password):
            raise RuntimeError("identity server down")

        monkeypatch.setattr(store.service, "login", boom)
        assert store.login("admin@company.com", DEMO_PASSWORD) is False
        assert store.error == "identity server down"
        assert not store.is_loading

    def test_logout_removes_persisted_record(self, store, storage):
        store.login("admin@company.com", DEMO_PASSWORD)
        store.logout()
        assert storage.get_item(AUTH_STORE_KEY) is None
        assert storage.get_item(TOKEN_KEY) is None
        assert not store.is_authenticated
        assert store.user is None

    def test_rehydrates_from_storage(self, storage):
        first = AuthStore(AuthService(storage, login_delay=0), storage)
        first.login("teamlead@company.com", DEMO_PASSWORD)

        second = AuthStore(AuthService(storage, login_delay=0), storage)
        assert second.is_authenticated
        assert second.user["email"] == "teamlead@company.com"
        assert second.token == first.token

    def test_stale_record_is_cleared_on_start(self, storage):
        storage.set_item(AUTH_STORE_KEY, {"user": {"role": "ADMIN"}, "is_authenticated": True, "token": "x"})
        store = AuthStore(AuthService(storage, login_delay=0), storage)
        assert not store.is_authenticated
        assert store.user is None
        assert storage.get_item(AUTH_STORE_KEY)["is_authenticated"] is False

    def test_malformed_record_is_ignored(self, storage):
        storage.set_item(AUTH_STORE_KEY, ["not", "a", "dict"])
        store = AuthStore(AuthService(storage, login_delay=0), storage)
        assert not store.is_authenticated

    def test_update_user_persists(self, store, storage):
        store.login("employee@company.com", DEMO_PASSWORD)
        store.update_user(name="Sarah J.", preferences={"theme": "Dark"})
        assert store.user["name"] == "Sarah J."
        assert storage.get_item(AUTH_STORE_KEY)["user"]["preferences"] == {"theme": "Dark"}
        assert storage.get_item(USER_KEY)["name"] == "Sarah J."

    def test_update_user_when_signed_out_does_nothing(self, store, storage):
        store.update_user(name="Nobody")
        assert store.user is None
        assert storage.get_item(AUTH_STORE_KEY) is None

    def test_check_session_logs_out_when_token_is_gone(self, store, storage):
        store.login("hr@company.com", DEMO_PASSWORD)
        assert store.check_session() is False

        storage.remove_item(TOKEN_KEY)
        assert store.check_session() is True
        assert not store.is_authenticated
        assert storage.get_item(AUTH_STORE_KEY) is None


class TestBrowserIsolation:

    def _store(self, shared, browser_id):
        storage = shared.scoped(browser_id)
        return AuthStore(AuthService(storage, login_delay=0), storage)

    def test_new_browser_is_not_signed_in(self, storage):
        admin = self._store(storage, "browser-aaaa")
        admin.login("admin@company.com", DEMO_PASSWORD)

        visitor = self._store(storage, "browser-bbbb")
        assert not visitor.is_authenticated
        assert visitor.user is None

    def test_one_browser_logging_out_keeps_the_other_signed_in(self, storage):
        a = self._store(storage, "browser-aaaa")
        b = self._store(storage, "browser-bbbb")
        a.login("admin@company.com", DEMO_PASSWORD)
        b.login("employee@company.com", DEMO_PASSWORD)
        b.logout()

        assert a.check_session() is False
        assert a.is_authenticated
        assert a.user["email"] == "admin@company.com"
        assert storage.scoped("browser-aaaa").get_item(AUTH_STORE_KEY)["token"] == a.token

    def test_same_browser_rehydrates_its_own_session(self, storage):
        self._store(storage, "browser-aaaa").login("hr@company.com", DEMO_PASSWORD)
        self._store(storage, "browser-bbbb").login("manager@company.com", DEMO_PASSWORD)

        again = self._store(storage, "browser-aaaa")
        assert again.user["email"] == "hr@company.com"


class TestCurrentSession:

    def test_signed_out(self, store):
        assert store.current_session() == {"authenticated": False, "role": None, "user": None}

    def test_signed_in_returns_a_copy(self, store):
        store.login("teamlead@company.com", DEMO_PASSWORD)
        session = store.current_session()
        assert session["authenticated"]
        assert session["role"] == "TEAMLEAD"
        session["user"]["name"] = "changed"
        assert store.user["name"] != "changed"

    def test_flag_without_user_is_not_authenticated(self, store):
        store.is_authenticated = True
        store.user = None
        assert store.current_session()["authenticated"] is False

    def test_consistent_while_another_thread_logs_in_and_out(self, store):
        stop = threading.Event()

        def churn():
            while not stop.is_set():
                store.login("admin@company.com", DEMO_PASSWORD)
                store.logout()

        worker = threading.Thread(target=churn, daemon=True)
        worker.start()
        try:
            for _ in range(300):
                session = store.current_session()
                if session["authenticated"]:
                    assert session["user"]["email"] == "admin@company.com"
                    assert session["role"] == "ADMIN"
                else:
                    assert session["role"] is None
        finally:
            stop.set()
            worker.join(timeout=5)


class TestSessionWatcher:

    def test_watcher_expires_session(self, store, storage):
        store.login("admin@company.com", DEMO_PASSWORD)
        watcher = SessionWatcher(interval=0.01)
        watcher.watch(store)
        watcher.start()
        try:
            assert watcher.is_running
            storage.remove_item(TOKEN_KEY)
            deadline = time.time() + 2
            while store.is_authenticated and time.time() < deadline:
                time.sleep(0.01)
            assert not store.is_authenticated
        finally:
            watcher.stop(timeout=1)
        assert not watcher.is_running

    def test_start_twice_keeps_one_thread(self):
        watcher = SessionWatcher(interval=10)
        watcher.start()
        thread = watcher._thread
        watcher.start()
        assert watcher._thread is thread
        watcher.stop(timeout=1)
        assert not thread.is_alive()

    def test_check_all_covers_every_store(self, storage):
        watcher = SessionWatcher(interval=10)
        stores = []
        for browser_id in ("browser-aaaa", "browser-bbbb"):
            scoped = storage.scoped(browser_id)
            s = AuthStore(AuthService(scoped, login_delay=0), scoped)
            s.login("manager@company.com", DEMO_PASSWORD)
            watcher.watch(s)
            stores.append(s)

        assert watcher.check_all() == 0
        storage.scoped("browser-bbbb").remove_item(TOKEN_KEY)
        assert watcher.check_all() == 1
        assert stores[0].is_authenticated
        assert not stores[1].is_authenticated

    def test_ended_sessions_are_dropped(self, storage):
        watcher = SessionWatcher(interval=10)
        scoped = storage.scoped("browser-aaaa")
        s = AuthStore(AuthService(scoped, login_delay=0), scoped)
        watcher.watch(s)
        assert watcher.watched == 1

        del s
        gc.collect()
        assert watcher.watched == 0
        assert watcher.check_all() == 0

    def test_unwatch(self, store):
        watcher = SessionWatcher(interval=10)
        watcher.watch(store)
        watcher.unwatch(store)
        assert watcher.watched == 0

    def test_failing_store_does_not_stop_the_others(self, store, monkeypatch):
        def boom():
            raise RuntimeError("storage unavailable")

        store.login("hr@company.com", DEMO_PASSWORD)
        broken = AuthStore(store.service, store.storage)
        monkeypatch.setattr(broken, "check_session", boom)

        watcher = SessionWatcher(interval=10)
        watcher.watch(broken)
        watcher.watch(store)
        store.storage.remove_item(TOKEN_KEY)
        assert watcher.check_all() == 1
        assert not store.is_authenticated
