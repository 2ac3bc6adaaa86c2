import pytest

from auth.auth_service import AuthService
from auth.auth_store import AuthStore
from common.local_storage import LocalStorage


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.db")


@pytest.fixture
def service(storage):
    return AuthService(storage, mode="local", login_delay=0)


@pytest.fixture
def store(service, storage):
    return AuthStore(service, storage)
