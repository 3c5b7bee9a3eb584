# todoservice

A small HTTP service for todo entries. The entries are kept in memory and
served as JSON under `/todo`. The service also serves a Swagger 2.0
description of its API under `/swagger/`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
todoservice
```

By default the server listens on `0.0.0.0`, port `8080`. Both can be changed:

```
todoservice --host 127.0.0.1 --port 9000
```

The command runs the Flask development server. It exits with status 1 if the
server cannot start, for example when the port is already in use.

## Endpoints

| Method | Path         | Result                                                            |
|--------|--------------|-------------------------------------------------------------------|
| GET    | `/todo`      | `200` and a list of every todo                                    |
| POST   | `/todo`      | `201` and the new todo, with its assigned `id`                    |
| GET    | `/todo/<id>` | `200` and the todo, or `404` with `{"error": "Todo not found"}`   |
| PUT    | `/todo/<id>` | `200` and the updated todo                                        |
| DELETE | `/todo/<id>` | `204` with an empty body                                          |
| GET    | `/swagger/doc.json`   | `200` and the Swagger 2.0 document                       |
| GET    | `/swagger/index.html` | a short HTML page that links to `doc.json`               |

`/swagger/` redirects to `/swagger/index.html`.

A todo looks like this:

```json
{"id": 1, "title": "Buy milk", "description": "Two litres"}
```

Request bodies are JSON objects. Missing or `null` fields take their
defaults (`0` for `id`, an empty string for `title` and `description`). Any
`id` in a POST body is ignored; the new todo gets an id one higher than the
number of todos currently stored.

Errors:

- An `id` in the path that is not an integer gives `400` with
  `{"error": "Invalid todo ID"}`.
- A POST body that is not valid JSON, is not an object, or has a field of the
  wrong type gives `400` with the JSON string `"Invalid request payload"`.
- A PUT body that cannot be read that way gives `400` with an empty todo.
- PUT or DELETE on an id that does not exist gives `500` with
  `{"error": "Not found"}`.

## Using it from Python

```python
from todoservice.domain import Todo, TodoService
from todoservice.repository import TodoListRepository
from todoservice.resource import create_app

repository = TodoListRepository()
service = TodoService(repository)

todo = Todo(title="Buy milk", description="Two litres")
service.create_todo(todo)
print(todo.id)  # 1

app = create_app(service)
client = app.test_client()
print(client.get("/todo").get_json())
```

The modules:

- `todoservice.domain`: the `Todo` dataclass (with `to_dict()` and
  `Todo.from_dict(data)`), the abstract `TodoRepository`, `TodoService`, and
  `NotFoundError`, which the repository raises for an unknown id.
- `todoservice.repository`: `TodoListRepository`, the in-memory repository.
- `todoservice.resource`: `TodoResource`, whose `register_routes(app)` adds
  the routes to a Flask app, and `create_app(service)`.
- `todoservice.openapi`: `swagger_spec(base_path, host, version, title,
  description)`, which returns the API description as a dictionary.
- `todoservice.app`: `build_app(repository)`, which connects a repository
  (a fresh `TodoListRepository` when none is given), the service and the
  routes in one call, and `main(argv)`, the command above.

## What it does not do

Todos live only in the memory of the running process; nothing is written to
disk or to a database, and every entry is lost when the server stops.
`TodoListRepository.open()` and `close()` only record and forget a
connection string. There is no authentication, and the `/swagger/` page is a
plain link to the JSON document rather than an interactive API browser.