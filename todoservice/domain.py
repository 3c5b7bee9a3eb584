"""Todo model, repository contract and the service built on top of it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

NOT_FOUND_MESSAGE = "Not found"


class NotFoundError(LookupError):
    """Raised when no todo with the requested id exists."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"invalid value for {key!r}: {value!r}")
    return value


@dataclass
class Todo:
    """A single todo entry."""

    id: int = 0
    title: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of this todo."""
        return {"id": self.id, "title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: Any) -> "Todo":
        """Build a todo from decoded JSON; missing or null fields keep their defaults.

        Raises ValueError when the payload is not an object or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ValueError("todo payload must be a JSON object")
        return cls(
            id=_field(data, "id", int, 0),
            title=_field(data, "title", str, ""),
            description=_field(data, "description", str, ""),
        )

    def __str__(self) -> str:
        return f"ID: {self.id}\nTitle: {self.title}\nDescription: {self.description}"


class TodoRepository(ABC):
    """Storage for todo entries."""

    @abstractmethod
    def open(self, connection_string: str) -> None:
        """Open the connection to the backing store."""

    @abstractmethod
    def get_todos(self) -> list[Todo]:
        """Return all stored todos."""

    @abstractmethod
    def create_todo(self, todo: Todo) -> None:
        """Store a new todo and assign its id to the given todo."""

    @abstractmethod
    def get_todo(self, todo_id: int) -> Todo:
        """Return the todo with the given id or raise NotFoundError."""

    @abstractmethod
    def update_todo(self, todo: Todo) -> None:
        """Update the todo that has the id of the given todo or raise NotFoundError."""

    @abstractmethod
    def delete_todo(self, todo_id: int) -> None:
        """Delete the todo with the given id or raise NotFoundError."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored todo."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection to the backing store."""


class TodoService:
    """Business operations on todos, delegated to a repository."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def get_todos(self) -> list[Todo]:
        return self.repository.get_todos()

    def create_todo(self, todo: Todo) -> None:
        self.repository.create_todo(todo)

    def get_todo(self, todo_id: int) -> Todo:
        return self.repository.get_todo(todo_id)

    def update_todo(self, todo: Todo) -> None:
        self.repository.update_todo(todo)

    def delete_todo(self, todo_id: int) -> None:
        self.repository.delete_todo(todo_id)