import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.db.core import init_db, make_engine
from app.main import create_app


@pytest.fixture
def engine(tmp_path):
    """SQLite file store, fresh for each test."""
    eng = make_engine(f"sqlite:///{tmp_path / 'products.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    init_db(engine)
    with Session(engine) as s:
        yield s


@pytest.fixture
def client(engine):
    """TestClient over an app wired to the temporary store."""
    with TestClient(create_app(engine=engine)) as c:
        yield c
