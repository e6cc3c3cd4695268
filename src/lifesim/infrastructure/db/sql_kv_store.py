from __future__ import annotations

import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from lifesim.domain.errors import PersistenceError
from lifesim.domain.repositories import KeyValueStore


TABLE_NAME = "kv_store"


def _create_table_sql(dialect: str) -> str:
    if dialect == "mysql":
        return f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                `key` VARCHAR(191) NOT NULL PRIMARY KEY,
                `value` LONGTEXT NOT NULL,
                updated_at BIGINT NOT NULL
            )
        """
    return f"""
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            "key" TEXT NOT NULL PRIMARY KEY,
            "value" TEXT NOT NULL,
            updated_at INTEGER NOT NULL
        )
    """


def _upsert_sql(dialect: str) -> str:
    if dialect == "mysql":
        return f"""
            INSERT INTO {TABLE_NAME} (`key`, `value`, updated_at)
            VALUES (:key, :value, :updated_at)
            ON DUPLICATE KEY UPDATE
                `value` = VALUES(`value`),
                updated_at = VALUES(updated_at)
        """
    return f"""
        INSERT INTO {TABLE_NAME} ("key", "value", updated_at)
        VALUES (:key, :value, :updated_at)
        ON CONFLICT("key") DO UPDATE SET
            "value" = excluded."value",
            updated_at = excluded.updated_at
    """


def _quote(dialect: str, column: str) -> str:
    return f"`{column}`" if dialect == "mysql" else f'"{column}"'


class SqlKeyValueStore(KeyValueStore):
    """Key-value blobs in a single ``kv_store`` table.

    Each write is its own transaction. Any driver or SQL failure surfaces as
    ``PersistenceError`` so callers never depend on SQLAlchemy exceptions.
    """

    def __init__(self, engine: Engine, *, create_schema: bool = True) -> None:
        self.engine = engine
        self.dialect = engine.dialect.name
        self.SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
        if create_schema:
            self.ensure_schema()

    @classmethod
    def from_url(cls, database_url: str, **kwargs) -> "SqlKeyValueStore":
        engine = create_engine(database_url, echo=False, future=True, pool_pre_ping=True)
        return cls(engine, **kwargs)

    def ensure_schema(self) -> None:
        try:
            with self.engine.begin() as conn:
                conn.execute(text(_create_table_sql(self.dialect)))
        except SQLAlchemyError as exc:
            raise PersistenceError(TABLE_NAME, "could not create table") from exc

    def get(self, key: str) -> str | None:
        statement = text(
            f"SELECT {_quote(self.dialect, 'value')} AS value FROM {TABLE_NAME} "
            f"WHERE {_quote(self.dialect, 'key')} = :key"
        )
        try:
            with self.SessionLocal() as session:
                row = session.execute(statement, {"key": str(key)}).first()
        except SQLAlchemyError as exc:
            raise PersistenceError(key, "read failed") from exc
        if row is None:
            return None
        return str(row.value)

    def set(self, key: str, value: str) -> None:
        try:
            with self.SessionLocal.begin() as session:
                session.execute(
                    text(_upsert_sql(self.dialect)),
                    {"key": str(key), "value": str(value), "updated_at": int(time.time())},
                )
        except SQLAlchemyError as exc:
            raise PersistenceError(key, "write failed") from exc

    def delete(self, key: str) -> None:
        statement = text(f"DELETE FROM {TABLE_NAME} WHERE {_quote(self.dialect, 'key')} = :key")
        try:
            with self.SessionLocal.begin() as session:
                session.execute(statement, {"key": str(key)})
        except SQLAlchemyError as exc:
            raise PersistenceError(key, "delete failed") from exc
