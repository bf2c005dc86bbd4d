"""
SQLite-backed document store.

Design goals:
- Single-file DB (easy deploy + backup)
- One JSON blob per document, keyed by (collection, doc_id)
- Batches and transactions run inside BEGIN IMMEDIATE, so concurrent writers
  are serialised by SQLite itself
"""

from __future__ import annotations

import json
import sqlite3
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

from src.exceptions import DatabaseError, TransactionError
from src.logging_config import get_logger
from src.store.base import DocumentStore, Transaction, Write, apply_write

logger = get_logger(__name__)

T = TypeVar("T")


def _is_busy(exc: sqlite3.OperationalError) -> bool:
    message = str(exc).lower()
    return "locked" in message or "busy" in message


class SQLiteDocumentStore(DocumentStore):
    def __init__(
        self,
        db_path: str | Path = "data/insights.db",
        *,
        timeout: float = 10.0,
        max_attempts: int = 5,
    ) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.timeout = timeout
        self.max_attempts = max(1, int(max_attempts))
        self._init_db()

    def _conn(self) -> sqlite3.Connection:
        # Autocommit mode: transactions are opened explicitly with BEGIN IMMEDIATE
        conn = sqlite3.connect(str(self.db_path), timeout=self.timeout, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL;")
        conn.execute("PRAGMA synchronous = NORMAL;")
        return conn

    def _init_db(self) -> None:
        try:
            conn = self._conn()
            try:
                conn.executescript(
                    """
                    CREATE TABLE IF NOT EXISTS documents (
                        collection TEXT NOT NULL,
                        doc_id TEXT NOT NULL,
                        data_json TEXT NOT NULL,
                        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
                        updated_at TEXT DEFAULT CURRENT_TIMESTAMP,
                        PRIMARY KEY (collection, doc_id)
                    );
                    """
                )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to initialise document store", operation="init", table="documents") from e

    @staticmethod
    def _select(conn: sqlite3.Connection, collection: str, doc_id: str) -> dict[str, Any] | None:
        row = conn.execute(
            "SELECT data_json FROM documents WHERE collection = ? AND doc_id = ?",
            (collection, doc_id),
        ).fetchone()
        return json.loads(row["data_json"]) if row else None

    def _read(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        try:
            conn = self._conn()
            try:
                return self._select(conn, collection, doc_id)
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to read document", operation="get", table=collection) from e

    def _list(self, collection: str) -> Iterator[tuple[str, dict[str, Any]]]:
        try:
            conn = self._conn()
            try:
                rows = conn.execute(
                    "SELECT doc_id, data_json FROM documents WHERE collection = ? ORDER BY doc_id",
                    (collection,),
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to list collection", operation="list", table=collection) from e
        return iter([(row["doc_id"], json.loads(row["data_json"])) for row in rows])

    def _write_all(self, conn: sqlite3.Connection, writes: list[Write]) -> None:
        """Apply writes on a connection that already holds the write lock."""
        staged: dict[tuple[str, str], dict[str, Any] | None] = {}
        for write in writes:
            key = (write.collection, write.doc_id)
            current = staged[key] if key in staged else self._select(conn, write.collection, write.doc_id)
            staged[key] = apply_write(current, write)

        for (collection, doc_id), data in staged.items():
            if data is None:
                conn.execute("DELETE FROM documents WHERE collection = ? AND doc_id = ?", (collection, doc_id))
                continue
            conn.execute(
                """
                INSERT INTO documents (collection, doc_id, data_json, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(collection, doc_id) DO UPDATE SET
                    data_json=excluded.data_json,
                    updated_at=CURRENT_TIMESTAMP
                """,
                (collection, doc_id, json.dumps(data, ensure_ascii=False)),
            )

    @contextmanager
    def _transaction(self):
        # Errors surface as sqlite3 errors so `_retrying` can tell busy from fatal
        conn = self._conn()
        try:
            conn.execute("BEGIN IMMEDIATE")

            def read(collection: str, doc_id: str) -> dict[str, Any] | None:
                return self._select(conn, collection, doc_id)

            def commit(writes: list[Write]) -> None:
                self._write_all(conn, writes)

            try:
                yield read, commit
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            conn.close()

    def _apply(self, writes: list[Write]) -> None:
        def unit() -> None:
            with self._transaction() as (_read, commit):
                commit(writes)

        self._retrying(unit)

    def run_transaction(self, fn: Callable[[Transaction], T]) -> T:
        """
        Run `fn` in one SQLite write transaction, retrying when the database is busy.

        `fn` may run more than once; it must not have side effects outside the transaction.
        """
        return self._retrying(lambda: DocumentStore.run_transaction(self, fn))

    def _retrying(self, unit: Callable[[], T]) -> T:
        for attempt in range(1, self.max_attempts + 1):
            try:
                return unit()
            except sqlite3.OperationalError as e:
                if not _is_busy(e):
                    raise DatabaseError("Transaction failed", operation="transaction") from e
                logger.warning(
                    "Document store busy, retrying transaction",
                    extra={"attempt": attempt, "max_attempts": self.max_attempts},
                )
                time.sleep(min(0.05 * attempt, 0.5))
            except sqlite3.Error as e:
                raise DatabaseError("Transaction failed", operation="transaction") from e
        raise TransactionError("Document store stayed busy", attempts=self.max_attempts)
