"""Database connection management."""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


def connect(url: URL) -> Engine:
    """Create an engine for ``url`` and make sure the database answers.

    Raises :class:`DatabaseConnectionError` when the first round-trip fails;
    the engine is disposed before raising.
    """

    safe_url = url.render_as_string(hide_password=True)
    engine = create_engine(url, future=True, pool_pre_ping=True)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseConnectionError(f"could not connect to {safe_url}: {exc}") from exc

    logger.info("Connected to %s", safe_url)
    return engine


def make_session(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
