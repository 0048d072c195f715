"""Persistence of blobs into the ``blobs`` table."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .db import make_session
from .errors import PersistError, SchemaError
from .models import Base, BlobRow
from .schemas import Blob

logger = logging.getLogger(__name__)

INSERT_CONSTRUCTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class BlobRepository:
    """Insert-or-ignore storage for blobs, keyed on the blob id."""

    def __init__(self, engine: Engine) -> None:
        dialect = engine.dialect.name
        if dialect not in INSERT_CONSTRUCTS:
            raise ValueError(f"unsupported database dialect: {dialect}")
        self._engine = engine
        self._insert = INSERT_CONSTRUCTS[dialect]
        self._session_factory = make_session(engine)

    def ensure_schema(self) -> None:
        """Create the ``blobs`` table unless it already exists."""

        try:
            Base.metadata.create_all(self._engine, tables=[BlobRow.__table__], checkfirst=True)
        except SQLAlchemyError as exc:
            raise SchemaError(f"could not create table 'blobs': {exc}") from exc
        logger.info("Table 'blobs' ensured.")

    def save(self, blob: Blob) -> bool:
        """Insert ``blob`` unless a row with the same id exists.

        Returns True when a row was written and False when the id was already
        stored. Existing rows are never updated.
        """

        stmt = (
            self._insert(BlobRow.__table__)
            .values(**blob.to_row())
            .on_conflict_do_nothing(index_elements=["id"])
        )
        with self._session_factory() as session:
            try:
                inserted = session.execute(stmt).rowcount == 1
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                raise PersistError(f"could not save blob {blob.id}: {exc}") from exc
        return inserted

    def get(self, blob_id: int) -> Optional[BlobRow]:
        with self._session_factory() as session:
            return session.get(BlobRow, blob_id)

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(BlobRow))
