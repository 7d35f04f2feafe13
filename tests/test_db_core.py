"""Connection URL resolution and schema versioning."""

import pytest
from sqlmodel import Session, select

from app.db.core import SchemaVersionError, init_db, resolve_url
from app.db.models import SCHEMA_VERSION, SchemaVersion


class TestResolveUrl:
    def test_postgres_scheme_uses_psycopg2(self):
        url = resolve_url("postgres://u:p@localhost:5432/shop")
        assert url == "postgresql+psycopg2://u:p@localhost:5432/shop"

    def test_remote_postgres_requires_ssl(self):
        url = resolve_url("postgresql://u:p@db.example.com/shop")
        assert url.startswith("postgresql+psycopg2://")
        assert url.endswith("?sslmode=require")

    def test_explicit_sslmode_is_kept(self):
        url = resolve_url("postgresql://u:p@db.example.com/shop?sslmode=disable")
        assert "sslmode=disable" in url
        assert "require" not in url

    def test_sqlite_untouched(self):
        assert resolve_url("sqlite:///./products.db") == "sqlite:///./products.db"

    def test_empty_url_raises(self):
        with pytest.raises(RuntimeError):
            resolve_url("")


class TestInitDb:
    def test_records_current_version(self, engine):
        assert init_db(engine) == SCHEMA_VERSION
        with Session(engine) as s:
            rows = s.exec(select(SchemaVersion)).all()
        assert [r.version for r in rows] == [SCHEMA_VERSION]

    def test_is_idempotent(self, engine):
        init_db(engine)
        init_db(engine)
        with Session(engine) as s:
            assert len(s.exec(select(SchemaVersion)).all()) == 1

    def test_older_version_is_bumped(self, engine):
        init_db(engine)
        with Session(engine) as s:
            row = s.exec(select(SchemaVersion)).one()
            row.version = SCHEMA_VERSION - 1
            s.add(row)
            s.commit()

        init_db(engine)
        with Session(engine) as s:
            assert s.exec(select(SchemaVersion)).one().version == SCHEMA_VERSION

    def test_newer_version_is_rejected(self, engine):
        init_db(engine)
        with Session(engine) as s:
            row = s.exec(select(SchemaVersion)).one()
            row.version = SCHEMA_VERSION + 1
            s.add(row)
            s.commit()

        with pytest.raises(SchemaVersionError):
            init_db(engine)
