from sqlalchemy import inspect

from tarefas_api.core.error_handlers import first_validation_message
from tarefas_api.database.base import Base
from tarefas_api.database.deps import get_db
from tarefas_api.database.session import engine
from tarefas_api.main import app, run_db_bootstrap


def test_ping(client):
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.json() == {"message": "Pong!"}
    assert response.headers["content-type"] == "application/json; charset=utf-8"


def test_store_failure_becomes_plain_text_500(client):
    def broken_db():
        raise RuntimeError("banco indisponível")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db

    response = client.get("/ping")

    assert response.status_code == 500
    assert response.text == "banco indisponível"


def test_non_object_body_is_rejected(client):
    response = client.post("/users", json=["f001"])

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")


def test_first_validation_message_prefers_rule_message():
    errors = [
        {"loc": ("body", "id"), "msg": "Value error, x", "ctx": {"error": ValueError("'id' deve ser string")}},
        {"loc": ("body", "name"), "msg": "Value error, y", "ctx": {"error": ValueError("'name' deve ser string")}},
    ]

    assert first_validation_message(errors) == "'id' deve ser string"


def test_first_validation_message_without_rule():
    assert first_validation_message([{"loc": ("body",), "msg": "Input should be a valid dictionary"}]) == (
        "Corpo da requisição deve ser um objeto JSON"
    )
    assert first_validation_message([{"loc": ("query", "q"), "msg": "invalid"}]) == "'q': invalid"


def test_db_bootstrap_creates_tables():
    Base.metadata.drop_all(bind=engine)

    run_db_bootstrap()

    assert {"users", "tasks", "users_tasks"} <= set(inspect(engine).get_table_names())
