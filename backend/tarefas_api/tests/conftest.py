import os
import tempfile
from pathlib import Path
from uuid import uuid4

import pytest

TEST_DB_FILE = Path(tempfile.gettempdir()) / f"test_tarefas_api_{uuid4().hex}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE.as_posix()}"
os.environ["DB_BOOTSTRAP_MODE"] = "off"

from fastapi.testclient import TestClient  # noqa: E402

from tarefas_api.database.base import Base  # noqa: E402
from tarefas_api.database.deps import get_db  # noqa: E402
from tarefas_api.database.session import SessionLocal, engine  # noqa: E402
from tarefas_api.main import app  # noqa: E402
from tarefas_api.models import Assignment, Task, User  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    engine.dispose()
    if TEST_DB_FILE.exists():
        TEST_DB_FILE.unlink()
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if TEST_DB_FILE.exists():
            TEST_DB_FILE.unlink()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


def seed_user(db, user_id="f001", name="Ana", email=None, password="Abcd123!") -> User:
    user = User(id=user_id, name=name, email=email or f"{user_id}@test.local", password=password)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def seed_task(db, task_id="t001", title="Estudar", description="Estudar FastAPI") -> Task:
    task = Task(id=task_id, title=title, description=description)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def seed_assignment(db, task_id="t001", user_id="f001") -> Assignment:
    assignment = Assignment(task_id=task_id, user_id=user_id)
    db.add(assignment)
    db.commit()
    return assignment


def count_assignments(db, **filters) -> int:
    db.expire_all()
    return db.query(Assignment).filter_by(**filters).count()
