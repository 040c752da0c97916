# This file wraps database access so API services never build engines or sessions themselves.
# One client is created per application, opened at startup and closed at shutdown.
# Services borrow transactional ORM sessions from it through `session()`.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.models import Base


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseClient:
    """SQLAlchemy engine and session factory with an explicit lifecycle."""

    def __init__(self, *, database_url: str) -> None:
        self._database_url = database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("DatabaseClient is not open.")
        return self._engine

    def open(self) -> None:
        if self._engine is not None:
            return

        if self._database_url.startswith("sqlite"):
            engine_kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in self._database_url or self._database_url.rstrip("/") == "sqlite:":
                engine_kwargs["poolclass"] = StaticPool
            engine = create_engine(self._database_url, future=True, **engine_kwargs)
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_engine(self._database_url, pool_pre_ping=True, future=True)

        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on any error."""

        if self._session_factory is None:
            raise RuntimeError("DatabaseClient is not open.")
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def can_connect(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, RuntimeError):
            return False

    def table_exists(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)
