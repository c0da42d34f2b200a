from __future__ import annotations

import pytest
from sqlalchemy import text

from roster_lite.infra.db import session as session_module
from roster_lite.infra.db.config import database_url, sql_echo


@pytest.fixture()
def fresh_session_factory(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the lazy engine at an in-memory database for one test."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.setattr(session_module, "_engine", None)
    monkeypatch.setattr(session_module, "_session_local", None)


def test_database_url_requires_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("true", True), ("ON", True), ("0", False), ("", False)],
)
def test_sql_echo(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("SQL_ECHO", value)

    assert sql_echo() is expected


@pytest.mark.usefixtures("fresh_session_factory")
def test_engine_is_created_once() -> None:
    assert session_module.get_engine() is session_module.get_engine()


@pytest.mark.usefixtures("fresh_session_factory")
def test_get_session_yields_working_session() -> None:
    with session_module.get_session() as session:
        assert session.execute(text("SELECT 1")).scalar() == 1


@pytest.mark.usefixtures("fresh_session_factory")
def test_get_session_reraises_errors() -> None:
    with pytest.raises(ValueError, match="boom"):
        with session_module.get_session():
            raise ValueError("boom")
