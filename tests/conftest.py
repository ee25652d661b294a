from __future__ import annotations

import os
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine

from agenda.api.deps import get_db
from agenda.core.config import settings
from agenda.db import session as db_session_module
from agenda.main import app


@pytest.fixture()
def db_engine(tmp_path):
    test_database_url = os.getenv("TEST_DATABASE_URL")
    if not test_database_url:
        db_path = tmp_path / f"test_{uuid.uuid4().hex}.db"
        test_database_url = f"sqlite:///{db_path}"

    connect_args = {"check_same_thread": False} if test_database_url.startswith("sqlite") else {}
    engine = create_engine(test_database_url, connect_args=connect_args)
    db_session_module.register_sqlite_functions(engine)

    SQLModel.metadata.create_all(bind=engine)

    original_engine = db_session_module.engine
    db_session_module.engine = engine

    def override_dependency():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_dependency

    yield engine

    app.dependency_overrides.pop(get_db, None)
    db_session_module.engine = original_engine
    SQLModel.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client(db_engine) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(db_engine) -> Session:
    with Session(db_engine) as session:
        yield session


def contacts_url(*parts: object) -> str:
    suffix = "".join(f"/{part}" for part in parts)
    return f"{settings.api_prefix}/contacts{suffix}"


def contact_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Maria Silva",
        "email": "maria@example.com",
        "phone": "11987654321",
    }
    payload.update(overrides)
    return payload
