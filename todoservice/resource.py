"""HTTP resource that exposes the todo service as a JSON REST API."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, redirect, request

from .domain import NotFoundError, Todo, TodoService
from .openapi import swagger_spec

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_SWAGGER_INDEX = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>OpenAPI for Todo showcase</title>
</head>
<body>
  <h1>OpenAPI for Todo showcase</h1>
  <p>The API description is available as <a href="doc.json">doc.json</a>.</p>
</body>
</html>
"""


def _json_response(status: int, payload: Any) -> Response:
    body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return Response(body, status=status, content_type="application/json; charset=utf-8")


def _error(status: int, message: str) -> Response:
    return _json_response(status, {"error": message})


def _parse_id(raw: str) -> int:
    """Parse a decimal id the way a strict integer parser would, within 64 bits."""
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid id: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"id out of range: {raw!r}")
    return value


def _bind_todo() -> Todo:
    """Decode the request body as a todo; raises ValueError on a bad payload."""
    data = request.get_data()
    try:
        payload = json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValueError("invalid JSON payload") from exc
    if payload is None:
        return Todo()
    return Todo.from_dict(payload)


class TodoResource:
    """REST endpoints for todos under /todo, plus the API description under /swagger."""

    def __init__(self, service: TodoService) -> None:
        self.service = service

    def _get_todos(self) -> Response:
        try:
            todos = self.service.get_todos()
        except Exception as exc:
            return _error(500, str(exc))
        return _json_response(200, [todo.to_dict() for todo in todos])

    def _create_todo(self) -> Response:
        try:
            todo = _bind_todo()
        except ValueError:
            return _json_response(400, "Invalid request payload")
        try:
            self.service.create_todo(todo)
        except Exception as exc:
            return _error(500, str(exc))
        return _json_response(201, todo.to_dict())

    def _get_todo(self, todo_id: str) -> Response:
        try:
            parsed_id = _parse_id(todo_id)
        except ValueError:
            return _error(400, "Invalid todo ID")
        try:
            todo = self.service.get_todo(parsed_id)
        except NotFoundError:
            return _error(404, "Todo not found")
        except Exception as exc:
            return _error(500, str(exc))
        return _json_response(200, todo.to_dict())

    def _update_todo(self, todo_id: str) -> Response:
        try:
            parsed_id = _parse_id(todo_id)
        except ValueError:
            return _error(400, "Invalid todo ID")
        try:
            todo = _bind_todo()
        except ValueError:
            # A failed bind marks the response as a bad request; the empty todo is still sent.
            return _json_response(400, Todo().to_dict())
        todo.id = parsed_id
        try:
            self.service.update_todo(todo)
        except Exception as exc:
            return _error(500, str(exc))
        return _json_response(200, todo.to_dict())

    def _delete_todo(self, todo_id: str) -> Response:
        try:
            parsed_id = _parse_id(todo_id)
        except ValueError:
            return _error(400, "Invalid todo ID")
        try:
            self.service.delete_todo(parsed_id)
        except Exception as exc:
            return _error(500, str(exc))
        return Response(status=204)

    def _swagger(self, asset: str = "") -> Response:
        if asset in ("", "/"):
            return redirect("/swagger/index.html", code=301)
        if asset == "doc.json":
            return _json_response(200, swagger_spec(base_path="/"))
        if asset == "index.html":
            return Response(_SWAGGER_INDEX, status=200, content_type="text/html; charset=utf-8")
        return Response("404 page not found", status=404, content_type="text/plain")

    def register_routes(self, app: Flask) -> None:
        """Register the REST routes and the API description on the given app."""
        app.add_url_rule("/todo", "get_todos", self._get_todos, methods=["GET"])
        app.add_url_rule("/todo", "create_todo", self._create_todo, methods=["POST"])
        app.add_url_rule("/todo/<todo_id>", "get_todo", self._get_todo, methods=["GET"])
        app.add_url_rule("/todo/<todo_id>", "update_todo", self._update_todo, methods=["PUT"])
        app.add_url_rule(
            "/todo/<todo_id>", "delete_todo", self._delete_todo, methods=["DELETE"]
        )
        app.add_url_rule("/swagger/", "swagger_root", self._swagger, methods=["GET"])
        app.add_url_rule(
            "/swagger/<path:asset>", "swagger_asset", self._swagger, methods=["GET"]
        )


def create_app(service: TodoService) -> Flask:
    """Return a Flask app serving the todo API for the given service."""
    app = Flask(__name__)
    TodoResource(service).register_routes(app)
    return app