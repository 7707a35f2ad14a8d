"""Tests for the greeting page, health check and catch-all routes."""

import pytest
from fastapi.testclient import TestClient


def test_root_serves_greeting_page(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Hello from AWS Fargate" in response.text
    assert "<title>Blue-Green deployment</title>" in response.text
    assert "cornflowerblue" in response.text


def test_root_ignores_query_string(client: TestClient):
    plain = client.get("/")
    with_query = client.get("/", params={"color": "green"})

    assert with_query.status_code == 200
    assert with_query.content == plain.content


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Healthy!"


def test_health_head_request(client: TestClient):
    response = client.head("/health")

    assert response.status_code == 200


@pytest.mark.parametrize("path", ["/", "/health"])
def test_repeated_requests_are_identical(client: TestClient, path: str):
    responses = [client.get(path) for _ in range(5)]

    first = responses[0]
    for response in responses[1:]:
        assert response.status_code == first.status_code
        assert response.headers["content-type"] == first.headers["content-type"]
        assert response.content == first.content


@pytest.mark.parametrize(
    "path",
    [
        "/nope",
        "/deeply/nested/path",
        "/healthz",
        "/health/extra",
        "/users",
        "/docs",
        "/openapi.json",
        "/redoc",
    ],
)
def test_unknown_get_routes_hit_catch_all(client: TestClient, path: str):
    response = client.get(path)

    assert response.status_code == 200
    assert response.text == "Ooops, no such route"


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_catch_all_accepts_any_method(client: TestClient, method: str):
    response = client.request(method, "/does-not-exist")

    assert response.status_code == 200
    assert response.text == "Ooops, no such route"


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
def test_other_methods_on_known_paths_hit_catch_all(client: TestClient, method: str):
    """Only GET is registered for / and /health; everything else falls through."""
    for path in ("/", "/health"):
        response = client.request(method, path)

        assert response.status_code == 200
        assert response.text == "Ooops, no such route"


def test_health_is_not_intercepted_by_catch_all(client: TestClient):
    response = client.get("/health")

    assert response.text != "Ooops, no such route"
    assert response.text == "Healthy!"


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "PURGE", "MKCOL"])
def test_catch_all_accepts_nonstandard_methods(
    client: TestClient, method: str
):
    response = client.request(method, "/does-not-exist")

    assert response.status_code == 200
    assert response.text == "Ooops, no such route"


def test_catch_all_does_not_shadow_earlier_routes(client: TestClient):
    """Routes registered before the catch-all win for their paths."""
    root = client.get("/")
    users = client.get("/user")
    health = client.get("/health")

    for response in (root, users, health):
        assert response.text != "Ooops, no such route"
    assert "Hello from AWS Fargate" in root.text
    assert users.json() == []
    assert health.text == "Healthy!"
