"""
SQLAlchemy integration — durable key-value storage in a single table.

Usage:
    match create_storage("sqlite:///storefront.db"):
        case Ok((store, engine)):
            store.set("cart_v1", '{"p1": 2}')
        case Error(e):
            log.warning("storage unavailable: %s", e)
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Engine, String, Text, create_engine, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from kungfu import Result, Ok, Error

from storefront.storage._types import StorageError


# ═══════════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════════


class Base(DeclarativeBase):
    pass


class StoredValue(Base):
    """One row per storage key."""

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════════════


class SQLAlchemyStorage:
    """
    Key-value storage over a SQLAlchemy session factory.

    Writes are upserts (INSERT ... ON CONFLICT DO UPDATE), so the last
    writer wins when two sessions share a database.

    Note: The upsert uses the SQLite dialect.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> Result[str | None, StorageError]:
        try:
            with self._session_factory() as session:
                row = session.execute(
                    select(StoredValue.value).where(StoredValue.key == key)
                ).scalar_one_or_none()
                return Ok(row)
        except Exception as e:
            return Error(StorageError(f"Failed to get {key}: {e}", e))

    def set(self, key: str, value: str) -> Result[None, StorageError]:
        try:
            with self._session_factory() as session:
                now = datetime.now()
                stmt = (
                    sqlite_insert(StoredValue)
                    .values(key=key, value=value, updated_at=now)
                    .on_conflict_do_update(
                        index_elements=["key"],
                        set_={"value": value, "updated_at": now},
                    )
                )
                session.execute(stmt)
                session.commit()
                return Ok(None)
        except Exception as e:
            return Error(StorageError(f"Failed to set {key}: {e}", e))

    def delete(self, key: str) -> Result[bool, StorageError]:
        try:
            with self._session_factory() as session:
                row = session.get(StoredValue, key)
                if row is None:
                    return Ok(False)
                session.delete(row)
                session.commit()
                return Ok(True)
        except Exception as e:
            return Error(StorageError(f"Failed to delete {key}: {e}", e))


# ═══════════════════════════════════════════════════════════════════════════════
# Setup
# ═══════════════════════════════════════════════════════════════════════════════


def create_storage(
    url: str = "sqlite:///:memory:",
) -> Result[tuple[SQLAlchemyStorage, Engine], StorageError]:
    """Create the table if needed and return (storage, engine)."""
    try:
        engine = create_engine(url, echo=False)
    except Exception as e:
        return Error(StorageError(f"Bad storage url {url}: {e}", e))

    try:
        Base.metadata.create_all(engine)
    except Exception as e:
        engine.dispose()
        return Error(StorageError(f"Failed to open storage at {url}: {e}", e))
    return Ok((SQLAlchemyStorage(sessionmaker(engine, expire_on_commit=False)), engine))


__all__ = ("StoredValue", "SQLAlchemyStorage", "create_storage")
