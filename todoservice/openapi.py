"""Swagger 2.0 description of the todo HTTP API."""

from __future__ import annotations

from typing import Any

JSON = "application/json"
TAGS = ["Todo"]


def _response(description: str) -> dict[str, Any]:
    return {"description": description, "schema": {"type": "string"}}


def _id_parameter() -> dict[str, Any]:
    return {
        "type": "integer",
        "description": "Todo ID",
        "name": "id",
        "in": "path",
        "required": True,
    }


def _operation(
    summary: str,
    responses: dict[str, Any],
    *,
    consumes: bool,
    with_id: bool,
) -> dict[str, Any]:
    operation: dict[str, Any] = {"description": summary}
    if consumes:
        operation["consumes"] = [JSON]
    operation["produces"] = [JSON]
    operation["tags"] = list(TAGS)
    operation["summary"] = summary
    if with_id:
        operation["parameters"] = [_id_parameter()]
    operation["responses"] = responses
    return operation


def _paths() -> dict[str, Any]:
    return {
        "/todo": {
            "get": _operation(
                "Get all todos",
                {
                    "200": {
                        "description": "List of todo",
                        "schema": {"type": "array", "items": {"type": "string"}},
                    },
                    "500": _response("Server error"),
                },
                consumes=True,
                with_id=False,
            ),
            "post": _operation(
                "Create new todo",
                {
                    "201": _response("New todo entry"),
                    "500": _response("Server error"),
                },
                consumes=True,
                with_id=False,
            ),
        },
        "/todo/{id}": {
            "get": _operation(
                "Get todo by id",
                {
                    "200": _response("Todo found"),
                    "404": _response("Todo not found"),
                    "500": _response("Server error"),
                },
                consumes=False,
                with_id=True,
            ),
            "put": _operation(
                "Update todo by id",
                {
                    "200": _response("List of todo"),
                    "400": _response("Bad request"),
                    "500": _response("Server error"),
                },
                consumes=True,
                with_id=True,
            ),
            "delete": _operation(
                "Delete todo by id",
                {
                    "204": _response("Todo updated"),
                    "400": _response("Bad request"),
                    "500": _response("Server error"),
                },
                consumes=False,
                with_id=True,
            ),
        },
    }


def swagger_spec(
    base_path: str = "/",
    host: str = "",
    version: str = "$Id$",
    title: str = "",
    description: str = "",
) -> dict[str, Any]:
    """Return a fresh Swagger 2.0 document for the todo API."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": description,
            "title": title,
            "contact": {},
            "version": version,
        },
        "host": host,
        "basePath": base_path,
        "paths": _paths(),
    }