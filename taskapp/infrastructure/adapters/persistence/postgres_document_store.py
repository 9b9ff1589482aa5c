"""PostgreSQL document store (SQLAlchemy async).

Implements DocumentStoreProtocol on a single JSONB table:

    documents(collection TEXT, id TEXT, data JSONB, seq BIGSERIAL)

Unique keys from UNIQUE_KEYS are enforced with partial unique expression
indexes, so concurrent duplicate inserts fail at the database instead of
slipping past the application pre-check.

SQL Pattern:
    -- find
    SELECT id, data FROM documents
    WHERE collection = :collection AND data @> CAST(:filters AS JSONB)
    ORDER BY seq

Usage:
    store = PostgresDocumentStore(get_session_factory())
    await store.ensure_schema()
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from taskapp.application.ports.document_store import (
    UNIQUE_KEYS,
    Document,
    DocumentStoreProtocol,
)
from taskapp.domain.errors.store import DuplicateDocumentError, StoreFaultError

logger = get_logger()

TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS documents (
        collection TEXT NOT NULL,
        id TEXT NOT NULL,
        data JSONB NOT NULL,
        seq BIGSERIAL,
        PRIMARY KEY (collection, id)
    )
"""


def unique_index_name(collection: str, key: tuple[str, ...]) -> str:
    return f"uq_{collection}_{'_'.join(key)}"


def unique_index_ddl(collection: str, key: tuple[str, ...]) -> str:
    """Build the partial unique index statement for one unique key."""
    expressions = ", ".join(f"(data->>'{field}')" for field in key)
    return (
        f"CREATE UNIQUE INDEX IF NOT EXISTS {unique_index_name(collection, key)} "
        f"ON documents ({expressions}) WHERE collection = '{collection}'"
    )


def _row_to_document(document_id: str, data: Any) -> Document:
    if isinstance(data, str):
        data = json.loads(data)
    return {**data, "id": document_id}


class PostgresDocumentStore(DocumentStoreProtocol):
    """Document store backed by PostgreSQL JSONB.

    Attributes:
        _session_factory: SQLAlchemy async session factory for DB access.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        unique_keys: Mapping[str, tuple[tuple[str, ...], ...]] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._unique_keys = dict(UNIQUE_KEYS if unique_keys is None else unique_keys)

    async def ensure_schema(self) -> None:
        """Create the documents table and unique indexes if missing."""
        log = logger.bind(component="postgres_document_store")
        async with self._session_factory() as session:
            await session.execute(text(TABLE_DDL))
            for collection, keys in self._unique_keys.items():
                for key in keys:
                    await session.execute(text(unique_index_ddl(collection, key)))
            await session.commit()
        log.info("document_schema_ready", unique_keys=len(self._unique_keys))

    async def get(self, collection: str, document_id: str) -> Document | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    text("""
                        SELECT id, data FROM documents
                        WHERE collection = :collection AND id = :id
                    """),
                    {"collection": collection, "id": document_id},
                )
                row = result.fetchone()
        except SQLAlchemyError as e:
            raise StoreFaultError("get", str(e)) from e
        return _row_to_document(row[0], row[1]) if row else None

    async def get_many(
        self, collection: str, document_ids: Iterable[str]
    ) -> list[Document]:
        ids = list(dict.fromkeys(document_ids))
        if not ids:
            return []
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    text("""
                        SELECT id, data FROM documents
                        WHERE collection = :collection AND id = ANY(:ids)
                        ORDER BY seq
                    """),
                    {"collection": collection, "ids": ids},
                )
                rows = result.fetchall()
        except SQLAlchemyError as e:
            raise StoreFaultError("get_many", str(e)) from e
        return [_row_to_document(row[0], row[1]) for row in rows]

    async def find(
        self, collection: str, filters: Mapping[str, Any]
    ) -> list[Document]:
        data_filters = {field: value for field, value in filters.items() if field != "id"}
        params: dict[str, Any] = {
            "collection": collection,
            "filters": json.dumps(data_filters),
        }
        id_clause = ""
        if "id" in filters:
            id_clause = "AND id = :id"
            params["id"] = filters["id"]

        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    text(f"""
                        SELECT id, data FROM documents
                        WHERE collection = :collection
                          AND data @> CAST(:filters AS JSONB)
                          {id_clause}
                        ORDER BY seq
                    """),
                    params,
                )
                rows = result.fetchall()
        except SQLAlchemyError as e:
            raise StoreFaultError("find", str(e)) from e
        return [_row_to_document(row[0], row[1]) for row in rows]

    async def insert(self, collection: str, fields: Mapping[str, Any]) -> str:
        document_id = uuid4().hex
        data = {key: value for key, value in fields.items() if key != "id"}
        try:
            async with self._session_factory() as session:
                await session.execute(
                    text("""
                        INSERT INTO documents (collection, id, data)
                        VALUES (:collection, :id, CAST(:data AS JSONB))
                    """),
                    {"collection": collection, "id": document_id, "data": json.dumps(data)},
                )
                await session.commit()
        except IntegrityError as e:
            raise self._duplicate_error(collection, e) from e
        except SQLAlchemyError as e:
            raise StoreFaultError("insert", str(e)) from e
        return document_id

    async def update(
        self, collection: str, document_id: str, fields: Mapping[str, Any]
    ) -> Document | None:
        data = {key: value for key, value in fields.items() if key != "id"}
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    text("""
                        UPDATE documents
                        SET data = data || CAST(:data AS JSONB)
                        WHERE collection = :collection AND id = :id
                        RETURNING id, data
                    """),
                    {"collection": collection, "id": document_id, "data": json.dumps(data)},
                )
                row = result.fetchone()
                await session.commit()
        except IntegrityError as e:
            raise self._duplicate_error(collection, e) from e
        except SQLAlchemyError as e:
            raise StoreFaultError("update", str(e)) from e
        return _row_to_document(row[0], row[1]) if row else None

    async def delete(self, collection: str, document_id: str) -> bool:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    text("""
                        DELETE FROM documents
                        WHERE collection = :collection AND id = :id
                    """),
                    {"collection": collection, "id": document_id},
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreFaultError("delete", str(e)) from e
        return bool(result.rowcount)

    def _duplicate_error(
        self, collection: str, error: IntegrityError
    ) -> DuplicateDocumentError | StoreFaultError:
        message = str(error.orig) if error.orig is not None else str(error)
        for key in self._unique_keys.get(collection, ()):
            if unique_index_name(collection, key) in message:
                return DuplicateDocumentError(collection, key)
        return StoreFaultError("write", message)
