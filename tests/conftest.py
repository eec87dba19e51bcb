import os

# settings 가 import 되기 전에 테스트용 환경변수를 고정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["CLASS_OWNER_MODE"] = "caller"
os.environ["DEFAULT_TEACHER_USERNAME"] = "teacher"
os.environ["DEFAULT_TEACHER_PASSWORD"] = "password"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from database.db import Base, SessionLocal, engine
from database.init_db import init_db
from main import app


@pytest.fixture(autouse=True)
def _fresh_store() -> Generator[None, None, None]:
    """
    테스트마다 인메모리 SQLite 스키마를 다시 만들고 기본 교사 계정을 넣는다.
    """
    Base.metadata.drop_all(bind=engine)
    init_db(engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    # with 블록 없이 생성 → startup 이벤트(init_db) 는 위 fixture 가 대신 수행
    return TestClient(app)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def login(client: TestClient, username: str = "teacher", password: str = "password"):
    return client.post("/api/login", json={"username": username, "password": password})


@pytest.fixture
def token(client: TestClient) -> str:
    resp = login(client)
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def class_id(client: TestClient, auth_headers) -> int:
    resp = client.post("/api/classes", json={"name": "Grade 10 English"}, headers=auth_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
