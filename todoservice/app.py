"""Entry point that wires the todo repository, service and HTTP app together."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from flask import Flask

from .domain import TodoRepository, TodoService
from .repository import TodoListRepository
from .resource import create_app

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

logger = logging.getLogger(__name__)


def build_app(repository: TodoRepository | None = None) -> Flask:
    """Build the Flask app on the given repository, or on a fresh in-memory one."""
    if repository is None:
        repository = TodoListRepository()
    return create_app(TodoService(repository))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the todo REST API.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the HTTP server; returns 1 when the server cannot run."""
    args = _parse_args(argv)
    repository = TodoListRepository()
    try:
        app = build_app(repository)
        try:
            app.run(host=args.host, port=args.port)
        except OSError as exc:
            logger.error("server failed: %s", exc)
            return 1
    finally:
        repository.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())