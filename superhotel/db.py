import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

logger = logging.getLogger(__name__)


class Base(MappedAsDataclass, DeclarativeBase):
    pass


_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str) -> Engine:
    """
    Build an engine for the given SQLAlchemy URL.
    - SQLite connections may be used from the worker threads of the web server
    - in-memory SQLite keeps a single shared connection, otherwise every
      session would see its own empty database
    - SQLite enforces foreign keys on every new connection
    """
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    eng = create_engine(url, **kwargs)
    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


def make_sessionmaker(bind: Engine) -> sessionmaker:
    # Entities outlive their session, so keep loaded attributes after commit
    return sessionmaker(bind=bind, autoflush=False, autocommit=False, expire_on_commit=False)


engine = make_engine(settings.DATABASE_URL)


def get_engine() -> Engine:
    return engine


def create_schema(bind: Engine) -> None:
    """Create the guest, room and accommodation tables if they are missing."""
    from . import models  # noqa: F401  registers the mappers on Base

    Base.metadata.create_all(bind)
    logger.info("Schema ensured on %s", bind.url.render_as_string(hide_password=True))


def drop_schema(bind: Engine) -> None:
    from . import models  # noqa: F401

    Base.metadata.drop_all(bind)
    logger.info("Schema dropped on %s", bind.url.render_as_string(hide_password=True))
