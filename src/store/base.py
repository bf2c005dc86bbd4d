"""
Document store interface.

A collection-of-documents API with per-document atomic reads/writes, atomic
write batches and read-modify-write transactions. Backends implement a small
set of primitives (`_read`, `_list`, `_apply`, `_transaction`); everything
callers touch (references, batches, transactions) lives here.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Any, TypeVar

from src.exceptions import DocumentNotFoundError, InvalidDocumentIDError, TransactionError

T = TypeVar("T")


@dataclass(frozen=True)
class DocumentSnapshot:
    """Point-in-time view of a single document."""

    collection: str
    id: str
    data: dict[str, Any] | None = None

    @property
    def exists(self) -> bool:
        return self.data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return copy.deepcopy(self.data) if self.data is not None else None

    def get(self, key: str, default: Any = None) -> Any:
        if self.data is None:
            return default
        return copy.deepcopy(self.data.get(key, default))


@dataclass(frozen=True)
class Write:
    """One staged mutation; batches and transactions commit lists of these."""

    op: str  # set | update | delete
    collection: str
    doc_id: str
    data: dict[str, Any] | None = None
    merge: bool = False


def validate_doc_id(collection: str, doc_id: str) -> str:
    if not isinstance(doc_id, str) or not doc_id or "/" in doc_id or doc_id in (".", ".."):
        raise InvalidDocumentIDError(str(doc_id), collection=collection)
    return doc_id


def deep_merge(base: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """Merge `updates` into a copy of `base`; nested dicts merge, everything else replaces."""
    merged = copy.deepcopy(base)
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def apply_write(current: dict[str, Any] | None, write: Write) -> dict[str, Any] | None:
    """
    Return the document body after `write`, or None when the document is removed.

    Raises DocumentNotFoundError for an update against a missing document.
    """
    if write.op == "delete":
        return None
    if write.op == "update":
        if current is None:
            raise DocumentNotFoundError(write.collection, write.doc_id)
        updated = copy.deepcopy(current)
        updated.update(copy.deepcopy(write.data or {}))
        return updated
    if write.op == "set":
        if write.merge and current is not None:
            return deep_merge(current, write.data or {})
        return copy.deepcopy(write.data or {})
    raise ValueError(f"Unknown write operation: {write.op!r}")


class DocumentReference:
    """Address of one document. Operations go straight to the store."""

    def __init__(self, store: DocumentStore, collection: str, doc_id: str) -> None:
        self._store = store
        self.collection = collection
        self.id = validate_doc_id(collection, doc_id)

    @property
    def path(self) -> str:
        return f"{self.collection}/{self.id}"

    def get(self) -> DocumentSnapshot:
        return DocumentSnapshot(self.collection, self.id, self._store._read(self.collection, self.id))

    def set(self, data: Mapping[str, Any], *, merge: bool = False) -> None:
        self._store._apply([Write("set", self.collection, self.id, dict(data), merge)])

    def update(self, data: Mapping[str, Any]) -> None:
        self._store._apply([Write("update", self.collection, self.id, dict(data))])

    def delete(self) -> None:
        self._store._apply([Write("delete", self.collection, self.id)])

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, DocumentReference)
            and other._store is self._store
            and other.path == self.path
        )

    def __hash__(self) -> int:
        return hash((id(self._store), self.path))

    def __repr__(self) -> str:
        return f"DocumentReference({self.path!r})"


class CollectionReference:
    def __init__(self, store: DocumentStore, name: str) -> None:
        if not name or "/" in name:
            raise InvalidDocumentIDError(name, reason="Collection name must be a non-empty string without '/'")
        self._store = store
        self.name = name

    def document(self, doc_id: str) -> DocumentReference:
        return DocumentReference(self._store, self.name, doc_id)

    def stream(self) -> list[DocumentSnapshot]:
        """All documents in the collection. Order is unspecified."""
        return [DocumentSnapshot(self.name, doc_id, data) for doc_id, data in self._store._list(self.name)]

    def is_empty(self) -> bool:
        return not self.stream()


@dataclass
class WriteBatch:
    """Accumulates writes and commits them as one atomic unit."""

    _store: DocumentStore
    _writes: list[Write] = field(default_factory=list)
    _committed: bool = False

    def set(self, ref: DocumentReference, data: Mapping[str, Any], *, merge: bool = False) -> WriteBatch:
        self._writes.append(Write("set", ref.collection, ref.id, dict(data), merge))
        return self

    def update(self, ref: DocumentReference, data: Mapping[str, Any]) -> WriteBatch:
        self._writes.append(Write("update", ref.collection, ref.id, dict(data)))
        return self

    def delete(self, ref: DocumentReference) -> WriteBatch:
        self._writes.append(Write("delete", ref.collection, ref.id))
        return self

    def __len__(self) -> int:
        return len(self._writes)

    def commit(self) -> None:
        if self._committed:
            raise TransactionError("Batch already committed")
        self._committed = True
        if self._writes:
            self._store._apply(list(self._writes))


class Transaction:
    """
    Read-modify-write handle passed to the function given to `run_transaction`.

    Reads see the store as of the transaction; writes are staged and applied
    atomically when the function returns. All reads must come before writes.
    """

    def __init__(self, read: Callable[[str, str], dict[str, Any] | None]) -> None:
        self._read = read
        self._writes: list[Write] = []

    @property
    def writes(self) -> list[Write]:
        return list(self._writes)

    def get(self, ref: DocumentReference) -> DocumentSnapshot:
        if self._writes:
            raise TransactionError("Transactions require all reads to be executed before all writes")
        return DocumentSnapshot(ref.collection, ref.id, self._read(ref.collection, ref.id))

    def set(self, ref: DocumentReference, data: Mapping[str, Any], *, merge: bool = False) -> None:
        self._writes.append(Write("set", ref.collection, ref.id, dict(data), merge))

    def update(self, ref: DocumentReference, data: Mapping[str, Any]) -> None:
        self._writes.append(Write("update", ref.collection, ref.id, dict(data)))

    def delete(self, ref: DocumentReference) -> None:
        self._writes.append(Write("delete", ref.collection, ref.id))


class DocumentStore(ABC):
    """Base class for document store backends."""

    def collection(self, name: str) -> CollectionReference:
        return CollectionReference(self, name)

    def document(self, collection: str, doc_id: str) -> DocumentReference:
        return self.collection(collection).document(doc_id)

    def batch(self) -> WriteBatch:
        return WriteBatch(self)

    def run_transaction(self, fn: Callable[[Transaction], T]) -> T:
        """
        Run `fn(transaction)` and commit its staged writes atomically.

        If `fn` raises, nothing is written and the exception propagates.
        """
        with self._transaction() as (read, commit):
            txn = Transaction(read)
            result = fn(txn)
            commit(txn.writes)
            return result

    def close(self) -> None:
        """Release backend resources. Default: nothing to release."""

    @abstractmethod
    def _read(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return a copy of the document body, or None."""

    @abstractmethod
    def _list(self, collection: str) -> Iterator[tuple[str, dict[str, Any]]]:
        """Yield (doc_id, body) for every document in `collection`."""

    @abstractmethod
    def _apply(self, writes: list[Write]) -> None:
        """Apply all writes atomically: all of them land or none do."""

    @abstractmethod
    def _transaction(
        self,
    ) -> AbstractContextManager[
        tuple[Callable[[str, str], dict[str, Any] | None], Callable[[list[Write]], None]]
    ]:
        """
        Context yielding (read, commit) bound to one isolated unit of work.

        Leaving the context with an exception must discard everything.
        """
