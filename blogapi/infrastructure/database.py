"""
Database engine construction and schema bootstrap.

One engine per application. Repositories open a connection per
operation, so concurrent requests never share a transaction.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from blogapi.infrastructure.blog.tables import metadata

logger = logging.getLogger(__name__)

_IN_MEMORY_DATABASES = (None, "", ":memory:")


def build_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given database URL.

    SQLite needs extra care: connections are shared across threads, an
    in-memory database must live on a single pooled connection, and
    foreign keys are off unless enabled per connection.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        A configured Engine. No connection is opened yet.
    """
    parsed = make_url(url)

    if parsed.get_backend_name() != "sqlite":
        return create_engine(parsed, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if parsed.database in _IN_MEMORY_DATABASES:
        kwargs["poolclass"] = StaticPool

    engine = create_engine(parsed, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create the author, post and comment tables if they are missing."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s).", ", ".join(metadata.tables))
