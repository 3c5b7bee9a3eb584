"""In-memory todo repository backed by a list."""

from __future__ import annotations

from .domain import NotFoundError, Todo, TodoRepository


class TodoListRepository(TodoRepository):
    """Keeps todos in a list; ids are assigned as the list length plus one."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []
        self._connection_string: str | None = None

    def open(self, connection_string: str) -> None:
        """Remember the connection string; an in-memory store needs no connection."""
        self._connection_string = connection_string

    def get_todos(self) -> list[Todo]:
        return list(self._todos)

    def create_todo(self, todo: Todo) -> None:
        new_todo = Todo(
            id=len(self._todos) + 1,
            title=todo.title,
            description=todo.description,
        )
        todo.id = new_todo.id
        self._todos.append(new_todo)

    def get_todo(self, todo_id: int) -> Todo:
        return self._find(todo_id)

    def update_todo(self, todo: Todo) -> None:
        stored = self._find(todo.id)
        stored.title = todo.title
        stored.description = todo.description

    def delete_todo(self, todo_id: int) -> None:
        self._todos.remove(self._find(todo_id))

    def clear(self) -> None:
        self._todos = []

    def close(self) -> None:
        """Forget the connection string; the stored todos stay available."""
        self._connection_string = None

    def _find(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise NotFoundError()