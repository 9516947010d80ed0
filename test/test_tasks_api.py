from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.api.security import CSRF_COOKIE_NAME, CSRF_HEADER_NAME
from backend_fastapi.main import app
from core.application.task_service import TaskService
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.security.credentials import (
    CredentialChecker,
    Credentials,
    hash_password,
)

AUTH = ("admin", "password123")


@pytest.fixture
def service():
    return TaskService(InMemoryTaskRepository())


@pytest.fixture
def client(service):
    checker = CredentialChecker(
        Credentials(username="admin", password_hash=hash_password("password123", 4))
    )
    app.dependency_overrides[deps.task_service] = lambda: service
    app.dependency_overrides[deps.credential_checker] = lambda: checker
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def csrf(client):
    response = client.get("/api/csrf", auth=AUTH)
    assert response.status_code == 200
    body = response.json()
    assert body["headerName"] == CSRF_HEADER_NAME
    assert client.cookies.get(CSRF_COOKIE_NAME) == body["token"]
    return {CSRF_HEADER_NAME: body["token"]}


def test_end_to_end_scenario(client, csrf):
    created = client.post(
        "/api/tasks", json={"description": "Learn"}, auth=AUTH, headers=csrf
    )
    assert created.status_code == 201
    assert created.json() == {"id": 1, "description": "Learn", "status": "NEW"}

    updated = client.put(
        "/api/tasks/1",
        json={"id": 1, "description": "Learn", "status": "COMPLETED"},
        auth=AUTH,
        headers=csrf,
    )
    assert updated.status_code == 200
    assert updated.json() == {"id": 1, "description": "Learn", "status": "COMPLETED"}

    deleted = client.delete("/api/tasks/1", auth=AUTH, headers=csrf)
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = client.get("/api/tasks/1", auth=AUTH)
    assert missing.status_code == 404
    assert missing.json() == {"status": 404, "message": "Task with id 1 not found"}


def test_list_tasks(client, service):
    service.create_task("Task 1")
    service.create_task("Task 2")

    response = client.get("/api/tasks", auth=AUTH)

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "description": "Task 1", "status": "NEW"},
        {"id": 2, "description": "Task 2", "status": "NEW"},
    ]


def test_get_task(client, service):
    task = service.create_task("Read docs")

    response = client.get(f"/api/tasks/{task.id}", auth=AUTH)

    assert response.status_code == 200
    assert response.json() == {"id": task.id, "description": "Read docs", "status": "NEW"}


def test_create_blank_description_returns_400(client, csrf):
    response = client.post(
        "/api/tasks", json={"description": "   "}, auth=AUTH, headers=csrf
    )

    assert response.status_code == 400
    assert response.json() == {
        "status": 400,
        "message": "Task description cannot be blank",
    }


def test_create_without_description_returns_400(client, csrf):
    response = client.post("/api/tasks", json={}, auth=AUTH, headers=csrf)

    assert response.status_code == 400
    assert response.json()["status"] == 400
    assert "description" in response.json()["message"]


def test_update_missing_task_returns_404(client, csrf):
    response = client.put(
        "/api/tasks/999",
        json={"id": 999, "description": "x", "status": "NEW"},
        auth=AUTH,
        headers=csrf,
    )

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Task with id 999 not found"}


def test_update_blank_description_on_missing_task_returns_400(client, csrf):
    response = client.put(
        "/api/tasks/999",
        json={"id": 999, "description": "", "status": "NEW"},
        auth=AUTH,
        headers=csrf,
    )

    assert response.status_code == 400


def test_update_ignores_body_id(client, service, csrf):
    task = service.create_task("Original")

    response = client.put(
        f"/api/tasks/{task.id}",
        json={"id": 77, "description": "Changed", "status": "REJECTED"},
        auth=AUTH,
        headers=csrf,
    )

    assert response.status_code == 200
    assert response.json() == {"id": task.id, "description": "Changed", "status": "REJECTED"}


def test_update_unknown_status_returns_400(client, service, csrf):
    task = service.create_task("Original")

    response = client.put(
        f"/api/tasks/{task.id}",
        json={"description": "x", "status": "DONE"},
        auth=AUTH,
        headers=csrf,
    )

    assert response.status_code == 400


def test_delete_missing_task_returns_404(client, csrf):
    response = client.delete("/api/tasks/5", auth=AUTH, headers=csrf)

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Task with id 5 not found"}


def test_storage_failure_returns_500(client):
    repo = Mock(spec=TaskRepository)
    repo.find_all.side_effect = RuntimeError("database is locked")
    app.dependency_overrides[deps.task_service] = lambda: TaskService(repo)

    response = client.get("/api/tasks", auth=AUTH)

    assert response.status_code == 500
    assert response.json() == {"status": 500, "message": "Failed to retrieve tasks"}


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/tasks"),
        ("get", "/api/tasks/1"),
        ("get", "/api/csrf"),
    ],
)
def test_requires_authentication(client, method, path):
    response = client.request(method.upper(), path)

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Basic"
    assert response.json()["status"] == 401


def test_wrong_password_returns_401(client):
    response = client.get("/api/tasks", auth=("admin", "wrongpassword"))

    assert response.status_code == 401


def test_write_with_csrf_but_without_credentials_returns_401(client, csrf):
    response = client.post("/api/tasks", json={"description": "x"}, headers=csrf)

    assert response.status_code == 401


def test_post_without_csrf_token_returns_403(client):
    response = client.post("/api/tasks", json={"description": "Test"}, auth=AUTH)

    assert response.status_code == 403
    assert response.json()["status"] == 403


def test_csrf_header_must_match_cookie(client, csrf):
    response = client.delete(
        "/api/tasks/1", auth=AUTH, headers={CSRF_HEADER_NAME: "forged"}
    )

    assert response.status_code == 403


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "UP"}
