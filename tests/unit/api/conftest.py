import pytest
from fastapi.testclient import TestClient

from roster.api.main import app
from roster.db.connect import get_session_dep, make_session_factory
from roster.db.models import sqlite_engine


@pytest.fixture
def client(tmp_path):
    engine = sqlite_engine(f"sqlite:///{tmp_path}/test.db")
    test_session = make_session_factory(engine)

    def override_get_session():
        with test_session() as session:
            yield session

    app.dependency_overrides[get_session_dep] = override_get_session
    try:
        with TestClient(app) as client:
            client.session_factory = test_session  # type: ignore[attr-defined]
            yield client
    finally:
        app.dependency_overrides.clear()
