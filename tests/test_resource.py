import json

import pytest

from todoservice.domain import Todo, TodoRepository, TodoService
from todoservice.repository import TodoListRepository
from todoservice.resource import TodoResource, create_app


@pytest.fixture
def repository():
    return TodoListRepository()


@pytest.fixture
def client(repository):
    app = create_app(TodoService(repository))
    return app.test_client()


def add_todos(repository, count):
    count = max(count, 1)
    for i in range(count):
        repository.create_todo(Todo(id=i, title=f"Todo {i}", description="string"))


class FailingRepository(TodoRepository):
    def open(self, connection_string):
        pass

    def get_todos(self):
        raise RuntimeError("boom")

    def create_todo(self, todo):
        raise RuntimeError("boom")

    def get_todo(self, todo_id):
        raise RuntimeError("boom")

    def update_todo(self, todo):
        raise RuntimeError("boom")

    def delete_todo(self, todo_id):
        raise RuntimeError("boom")

    def clear(self):
        pass

    def close(self):
        pass


@pytest.fixture
def failing_client():
    return create_app(TodoService(FailingRepository())).test_client()


def test_empty_table(client):
    response = client.get("/todo")
    assert response.status_code == 200
    assert response.data == b"[]"


def test_get_non_existent_todo(client):
    response = client.get("/todo/11")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Todo not found"


def test_create_todo(client):
    response = client.post(
        "/todo",
        data='{"title":"string", "description": "string"}',
        content_type="application/json",
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["id"] == 1
    assert body["title"] == "string"
    assert body["description"] == "string"


def test_get_todo(client, repository):
    add_todos(repository, 1)
    response = client.get("/todo/1")
    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "title": "Todo 0", "description": "string"}


def test_update_todo(client, repository):
    add_todos(repository, 1)
    orig = client.get("/todo/1").get_json()

    response = client.put(
        "/todo/1",
        data='{"title":"new string", "description": "new string"}',
        content_type="application/json",
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == orig["id"]
    assert body["title"] != orig["title"]
    assert body["description"] != orig["description"]
    assert repository.get_todo(1).title == "new string"


def test_delete_todo(client, repository):
    add_todos(repository, 1)
    assert client.get("/todo/1").status_code == 200
    response = client.delete("/todo/1")
    assert response.status_code == 204
    assert response.data == b""
    assert client.get("/todo/1").status_code == 404


def test_get_todos_lists_created_entries(client, repository):
    add_todos(repository, 2)
    response = client.get("/todo")
    assert response.status_code == 200
    assert response.get_json() == [t.to_dict() for t in repository.get_todos()]


@pytest.mark.parametrize("raw_id", ["abc", "1.5", " 1", "1_0", "99999999999999999999"])
def test_invalid_id_is_bad_request(client, raw_id):
    for method in (client.get, client.delete):
        response = method(f"/todo/{raw_id}")
        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid todo ID"}


def test_invalid_id_on_update_is_bad_request(client):
    response = client.put("/todo/x", data="{}", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid todo ID"}


def test_signed_id_is_accepted(client, repository):
    add_todos(repository, 1)
    assert client.get("/todo/+1").status_code == 200


def test_create_with_invalid_payload(client, repository):
    response = client.post("/todo", data="not json", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == "Invalid request payload"
    assert repository.get_todos() == []


def test_create_with_wrong_field_type(client):
    response = client.post("/todo", data='{"title": 5}', content_type="application/json")
    assert response.status_code == 400


def test_update_with_invalid_payload_leaves_todo(client, repository):
    add_todos(repository, 1)
    response = client.put("/todo/1", data="{", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"id": 0, "title": "", "description": ""}
    assert repository.get_todo(1).title == "Todo 0"


def test_update_missing_todo_is_server_error(client):
    response = client.put(
        "/todo/5", data='{"title": "x"}', content_type="application/json"
    )
    assert response.status_code == 500
    assert response.get_json() == {"error": "Not found"}


def test_delete_missing_todo_is_server_error(client):
    response = client.delete("/todo/5")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Not found"}


def test_service_errors_become_server_errors(failing_client):
    assert failing_client.get("/todo").get_json() == {"error": "boom"}
    assert failing_client.get("/todo").status_code == 500
    assert failing_client.get("/todo/1").status_code == 500
    assert failing_client.delete("/todo/1").status_code == 500
    response = failing_client.post(
        "/todo", data='{"title": "x"}', content_type="application/json"
    )
    assert response.status_code == 500
    assert response.get_json() == {"error": "boom"}


def test_swagger_doc(client):
    response = client.get("/swagger/doc.json")
    assert response.status_code == 200
    spec = json.loads(response.data)
    assert spec["swagger"] == "2.0"
    assert spec["basePath"] == "/"
    assert set(spec["paths"]) == {"/todo", "/todo/{id}"}


def test_swagger_root_redirects_to_index(client):
    response = client.get("/swagger/")
    assert response.status_code == 301
    assert response.headers["Location"].endswith("/swagger/index.html")
    index = client.get("/swagger/index.html")
    assert index.status_code == 200
    assert b"doc.json" in index.data


def test_swagger_unknown_asset(client):
    assert client.get("/swagger/missing.css").status_code == 404


def test_register_routes_on_existing_app(repository):
    from flask import Flask

    app = Flask("custom")
    TodoResource(TodoService(repository)).register_routes(app)
    add_todos(repository, 1)
    response = app.test_client().get("/todo/1")
    assert response.get_json()["title"] == "Todo 0"