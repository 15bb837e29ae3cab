"""
Embedded relational store.

The whole database lives in an in-memory SQLite connection. Every write is
followed by ``persist()``, which rewrites the snapshot file wholesale; there
is no write-ahead log, so the snapshot is the durability mechanism.

All access goes through one re-entrant lock: two writers interleaving their
statements and snapshots could otherwise lose each other's changes.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MEMORY = ":memory:"
# Column default matching local_timestamp() for rows inserted by raw SQL
LOCAL_NOW_SQL = "(datetime('now','localtime'))"


def local_timestamp() -> str:
    """Server-local wall clock, formatted like SQLite's datetime('now','localtime')."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


class Store:
    def __init__(self, path: Optional[str] = None):
        self.path = None if path in (None, "", MEMORY) else path
        self._lock = threading.RLock()
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(self.engine, "connect", self._on_connect)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.closed = False
        if self.path and os.path.exists(self.path):
            self._load()

    @staticmethod
    def _on_connect(dbapi_connection, connection_record):
        # SQLite's lower() only folds ASCII; registered names are often not
        dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)

    def _load(self) -> None:
        source = sqlite3.connect(self.path)
        try:
            with self._lock:
                raw = self.engine.raw_connection()
                try:
                    source.backup(raw.driver_connection)
                finally:
                    raw.close()
        finally:
            source.close()
        logger.info("Loaded database snapshot from %s", self.path)

    @property
    def persistent(self) -> bool:
        return self.path is not None

    # ------------------------------------------------------------------
    # Raw SQL
    # ------------------------------------------------------------------

    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Runs a read query and returns its rows as dicts."""
        with self._lock, self.engine.connect() as conn:
            result = conn.execute(text(sql), params or {})
            return [dict(row) for row in result.mappings()]

    def run(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        """Runs a write statement, persists, and returns the affected row count."""
        with self._lock:
            with self.engine.begin() as conn:
                result = conn.execute(text(sql), params or {})
                affected = result.rowcount
            self.persist()
            return affected

    def persist(self) -> None:
        """Rewrites the snapshot file from the in-memory database."""
        if not self.path:
            return
        tmp_path = self.path + ".tmp"
        with self._lock:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            target = sqlite3.connect(tmp_path)
            try:
                raw = self.engine.raw_connection()
                try:
                    raw.driver_connection.backup(target)
                finally:
                    raw.close()
            finally:
                target.close()
            os.replace(tmp_path, self.path)
        logger.debug("Persisted database snapshot to %s", self.path)

    # ------------------------------------------------------------------
    # ORM sessions
    # ------------------------------------------------------------------

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Read-only ORM session."""
        with self._lock:
            session = self._session_factory()
            try:
                yield session
            finally:
                session.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """ORM session committed and persisted as one unit, rolled back on error."""
        with self._lock:
            session = self._session_factory()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()
            self.persist()

    def close(self) -> None:
        with self._lock:
            self.engine.dispose()
            self.closed = True
        logger.info("Closed database%s", f" ({self.path})" if self.path else "")
