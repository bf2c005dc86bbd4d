"""
In-process document store.

Used by tests and for local development without a database file. State lives
in a dict guarded by one re-entrant lock; a transaction holds the lock for its
whole duration, so transactions are serialised.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from src.store.base import DocumentStore, Write, apply_write


class MemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.commit_count = 0

    def _read(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with self._lock:
            data = self._collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(data) if data is not None else None

    def _list(self, collection: str) -> Iterator[tuple[str, dict[str, Any]]]:
        with self._lock:
            docs = copy.deepcopy(self._collections.get(collection, {}))
        return iter(sorted(docs.items()))

    def _apply(self, writes: list[Write]) -> None:
        with self._lock:
            # Stage against a copy of the touched documents so a failing write leaves nothing behind
            staged: dict[tuple[str, str], dict[str, Any] | None] = {}
            for write in writes:
                key = (write.collection, write.doc_id)
                current = staged[key] if key in staged else self._collections.get(write.collection, {}).get(write.doc_id)
                staged[key] = apply_write(current, write)

            for (collection, doc_id), data in staged.items():
                docs = self._collections.setdefault(collection, {})
                if data is None:
                    docs.pop(doc_id, None)
                else:
                    docs[doc_id] = data
            self.commit_count += 1

    @contextmanager
    def _transaction(self):
        with self._lock:
            yield self._read, self._apply

    def snapshot(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Deep copy of every collection, for tests and debugging."""
        with self._lock:
            return copy.deepcopy(self._collections)
