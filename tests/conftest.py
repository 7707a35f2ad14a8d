import pytest
from fastapi.testclient import TestClient

from src.application.user_service import UserService, get_user_service
from src.main import app


@pytest.fixture(name="user_service")
def user_service_fixture():
    """A fresh, empty user store per test."""
    return UserService()


@pytest.fixture(name="client")
def client_fixture(user_service: UserService):
    def get_user_service_override():
        return user_service

    app.dependency_overrides[get_user_service] = get_user_service_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
