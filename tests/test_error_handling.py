"""Tests for the global error handlers."""

from fastapi import APIRouter
from fastapi.testclient import TestClient

from src.main import create_app


def test_missing_field_returns_field_errors(client: TestClient):
    response = client.post("/user", json={"lastName": "Lovelace", "age": 36})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Bad Request"
    assert data["detail"] == "Request validation failed"

    error = data["errors"][0]
    assert error["field"] == "firstName"
    assert error["code"] == "missing"
    assert error["message"]


def test_out_of_range_age_returns_field_errors(client: TestClient):
    response = client.post(
        "/user", json={"firstName": "Ada", "lastName": "Lovelace", "age": 200}
    )

    assert response.status_code == 400
    fields = [error["field"] for error in response.json()["errors"]]
    assert fields == ["age"]


def test_domain_validation_error_returns_400(client: TestClient):
    response = client.post(
        "/user", json={"firstName": "   ", "lastName": "Lovelace", "age": 36}
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Bad Request"
    assert data["detail"] == "User first name cannot be empty"


def test_unexpected_error_returns_generic_500():
    broken_router = APIRouter()

    @broken_router.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    client = TestClient(
        create_app(user_router=broken_router), raise_server_exceptions=False
    )

    response = client.get("/user/boom")

    assert response.status_code == 500
    assert response.text == "Something went wrong. Please try again."
    assert "kaboom" not in response.text
