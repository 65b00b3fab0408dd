"""Database engine construction and declarative base."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from student_records.core.config import Settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


def create_store_engine(settings: Settings) -> Engine:
    """Create the engine for the configured store.

    Without ``STORE_POOLING`` every checkout opens a fresh DBAPI connection
    and closes it again on release.
    """
    url = make_url(settings.STORE_URL)
    kwargs = {
        "echo": False,
        "pool_pre_ping": True,
    }
    if not settings.STORE_POOLING:
        kwargs["poolclass"] = NullPool
    if url.get_backend_name() == "sqlite":
        # Handlers run on the threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)
