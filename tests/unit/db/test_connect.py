import pytest
from sqlalchemy import text

from roster.db import connect


def test_database_uri_defaults_to_db_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("ROSTER_DB_PATH", raising=False)
    monkeypatch.setenv("ROSTER_DB_DIR", str(tmp_path / "data"))
    assert connect.database_uri() == "sqlite:///" + str(tmp_path / "data" / "roster.db")
    assert (tmp_path / "data").is_dir()


def test_database_uri_prefers_argument_over_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ROSTER_DB_PATH", str(tmp_path / "env.db"))
    assert connect.database_uri() == "sqlite:///" + str(tmp_path / "env.db")
    assert connect.database_uri(tmp_path / "arg.db") == "sqlite:///" + str(tmp_path / "arg.db")


def test_as_sqlite_uri_keeps_existing_prefix():
    assert connect.as_sqlite_uri("sqlite:///x.db") == "sqlite:///x.db"
    assert connect.as_sqlite_uri("/tmp/x.db") == "sqlite:////tmp/x.db"


def test_engine_is_shared_per_uri(tmp_path):
    uri = connect.as_sqlite_uri(tmp_path / "shared.db")
    assert connect.engine_for(uri) is connect.engine_for(uri)


def test_get_session_uses_env_path_and_creates_tables(tmp_path, monkeypatch):
    db_file = tmp_path / "env.db"
    monkeypatch.setenv("ROSTER_DB_PATH", str(db_file))

    with connect.get_session() as session:
        tables = session.execute(
            text("SELECT name FROM sqlite_master WHERE type='table'")
        ).scalars().all()

    assert "person" in tables
    assert db_file.exists()


def test_get_session_rolls_back_on_error(tmp_path):
    db_file = tmp_path / "rollback.db"
    insert = text(
        "INSERT INTO person (username, email, phone, created_at, updated_at) "
        "VALUES ('alice', 'a@x.com', '1234567890', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"
    )

    with pytest.raises(RuntimeError):
        with connect.get_session(db_file) as session:
            session.execute(insert)
            raise RuntimeError("boom")

    with connect.get_session(db_file) as session:
        count = session.execute(text("SELECT COUNT(*) FROM person")).scalar_one()
    assert count == 0
