import logging
from datetime import datetime
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from fakes import InMemoryTaskRepository
from infrastructure.config import Settings
from infrastructure.container import Container


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    app = create_app(container=Container(repo), settings=Settings())
    return TestClient(app)


@pytest.fixture
def failing_repo():
    repo = Mock(spec=TaskRepository)
    for method in ("insert", "get", "list", "update", "delete"):
        getattr(repo, method).side_effect = ConnectionError("db down")
    return repo


@pytest.fixture
def failing_client(failing_repo):
    app = create_app(container=Container(failing_repo), settings=Settings())
    return TestClient(app)


def _create(client, title="My New Task", description="This is a test task."):
    response = client.post(
        "/api/tasks", json={"title": title, "description": description}
    )
    assert response.status_code == 201
    return response.json()


def _timestamp(value: str) -> datetime:
    # fromisoformat no acepta el sufijo "Z" antes de Python 3.11.
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"


def test_create_task(client):
    body = _create(client)

    assert body["id"] > 0
    assert body["title"] == "My New Task"
    assert body["description"] == "This is a test task."
    assert body["status"] == "pending"
    assert body["created_at"] == body["updated_at"]
    assert set(body) == {
        "id",
        "title",
        "description",
        "status",
        "created_at",
        "updated_at",
    }


def test_create_without_title_is_bad_request(client, repo):
    response = client.post("/api/tasks", json={"description": "sin título"})

    assert response.status_code == 400
    assert response.json()["detail"] == "title is required"
    assert repo.list() == []


def test_create_with_malformed_body_is_bad_request(client):
    response = client.post(
        "/api/tasks",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_list_tasks_newest_first(client):
    assert client.get("/api/tasks").json() == []

    first = _create(client, title="first")
    second = _create(client, title="second")

    response = client.get("/api/tasks")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [second["id"], first["id"]]


def test_get_task(client):
    created = _create(client)

    response = client.get(f"/api/tasks/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/api/tasks/abc", 400),
        ("/api/tasks/0", 400),
        ("/api/tasks/-3", 400),
        ("/api/tasks/99", 404),
    ],
)
def test_get_task_errors(client, path, expected):
    assert client.get(path).status_code == expected


def test_update_status_only(client):
    created = _create(client)

    response = client.put(
        f"/api/tasks/{created['id']}", json={"status": "in_progress"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in_progress"
    assert body["title"] == created["title"]
    assert body["description"] == created["description"]
    assert body["created_at"] == created["created_at"]
    assert _timestamp(body["updated_at"]) > _timestamp(created["updated_at"])


def test_update_with_invalid_status(client):
    created = _create(client)

    response = client.put(f"/api/tasks/{created['id']}", json={"status": "bogus"})

    assert response.status_code == 400
    assert response.json()["detail"] == "invalid status value"
    assert client.get(f"/api/tasks/{created['id']}").json() == created


@pytest.mark.parametrize(
    "path, payload, expected",
    [
        ("/api/tasks/abc", {"title": "x"}, 400),
        ("/api/tasks/1", {"title": 123}, 400),
        ("/api/tasks/0", {"title": "x"}, 400),
        ("/api/tasks/99", {"title": "x"}, 404),
    ],
)
def test_update_errors(client, path, payload, expected):
    assert client.put(path, json=payload).status_code == expected


def test_delete_task(client):
    created = _create(client)

    response = client.delete(f"/api/tasks/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/api/tasks/{created['id']}").status_code == 404
    assert client.delete(f"/api/tasks/{created['id']}").status_code == 404


def test_delete_missing_task(client):
    response = client.delete("/api/tasks/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "task with ID 99 not found"


def test_delete_malformed_id(client):
    assert client.delete("/api/tasks/uno").status_code == 400


@pytest.mark.parametrize(
    "method, path, kwargs",
    [
        ("post", "/api/tasks", {"json": {"title": "x"}}),
        ("get", "/api/tasks", {}),
        ("get", "/api/tasks/1", {}),
        ("put", "/api/tasks/1", {"json": {"title": "x"}}),
        ("delete", "/api/tasks/1", {}),
    ],
)
def test_repository_failures_are_server_errors(failing_client, method, path, kwargs):
    response = getattr(failing_client, method)(path, **kwargs)

    assert response.status_code == 500
    assert "db down" in response.json()["detail"]


def test_existing_task_round_trips_through_update(client, repo):
    stored = repo.insert(Task(title="Inicial", description="d1"))

    response = client.put(
        f"/api/tasks/{stored.id}", json={"title": "Nuevo", "description": ""}
    )

    assert response.json()["title"] == "Nuevo"
    assert response.json()["description"] == "d1"


def test_repository_failure_is_logged_once(failing_client, caplog):
    with caplog.at_level(logging.DEBUG):
        response = failing_client.get("/api/tasks")

    assert response.status_code == 500
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1


@pytest.mark.parametrize("orm", ["peewee", "sqlalchemy"])
def test_in_memory_database_serves_requests(orm):
    settings = Settings(database_url="sqlite:///:memory:", orm=orm)

    # El lifespan construye el contenedor; las rutas corren en threads del pool.
    with TestClient(create_app(settings=settings)) as client:
        created = _create(client, title="x", description="")
        updated = client.put(
            f"/api/tasks/{created['id']}", json={"status": "completed"}
        )

        assert updated.status_code == 200
        assert updated.json()["status"] == "completed"
        assert [t["id"] for t in client.get("/api/tasks").json()] == [created["id"]]
        assert client.delete(f"/api/tasks/{created['id']}").status_code == 204
        assert client.get("/api/tasks").json() == []
