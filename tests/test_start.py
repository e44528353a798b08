from sqlalchemy import inspect

from conference.extensions import db
from start import build_app


def test_build_app_creates_tables_when_asked(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("CREATE_TABLES", "1")

    app = build_app()

    with app.app_context():
        tables = inspect(db.engine).get_table_names()
    assert "check_ins" in tables
    assert "users" in tables


def test_build_app_leaves_schema_to_migrations(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.delenv("CREATE_TABLES", raising=False)

    app = build_app()

    with app.app_context():
        assert inspect(db.engine).get_table_names() == []
