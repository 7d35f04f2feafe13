# app/db/core.py

from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse

from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session, select

from app.config import settings
from app.core.logging import get_logger

log = get_logger("db")

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


class SchemaVersionError(RuntimeError):
    """The store was written by a newer schema than this code knows."""


# ---------------------------------------------------------
# Resolve connection URL
# ---------------------------------------------------------

def resolve_url(raw: str) -> str:
    """
    Normalize a connection string into a SQLAlchemy URL:
    - postgres:// and postgresql:// use the psycopg2 driver
    - remote Postgres hosts get sslmode=require unless already set
    """
    if not raw:
        raise RuntimeError("DefaultConnection is not set")

    url = raw.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)

    if not url.startswith("postgresql"):
        return url

    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    if host not in _LOCAL_HOSTS and "sslmode" not in query:
        query["sslmode"] = "require"
    return urlunparse(parsed._replace(query=urlencode(query)))


def make_engine(raw_url: str = None) -> Engine:
    url = resolve_url(raw_url or settings.database_url)
    log.info("DefaultConnection in use: %s", make_url(url).render_as_string(hide_password=True))

    # SQLite: requests run on worker threads, and its pools take no sizing
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        echo=settings.db_echo,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


# ---------------------------------------------------------
# DB Init + Session
# ---------------------------------------------------------

def init_db(engine: Engine) -> int:
    """
    Create missing tables and record SCHEMA_VERSION. Called at startup
    from app/main.py. Returns the version now recorded in the store.
    """
    from app.db.models import SCHEMA_VERSION, SchemaVersion  # loads table metadata

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        row = session.exec(select(SchemaVersion)).first()
        if row is None:
            session.add(SchemaVersion(version=SCHEMA_VERSION))
        elif row.version > SCHEMA_VERSION:
            raise SchemaVersionError(
                f"database schema v{row.version} is newer than supported v{SCHEMA_VERSION}"
            )
        elif row.version < SCHEMA_VERSION:
            log.info("upgrading schema v%s -> v%s", row.version, SCHEMA_VERSION)
            row.version = SCHEMA_VERSION
            session.add(row)
        session.commit()

    log.info("schema ready (v%s)", SCHEMA_VERSION)
    return SCHEMA_VERSION


def get_session(engine: Engine):
    """
    Yield one session bound to `engine`, closed when the caller is done.
    """
    with Session(engine) as session:
        yield session
