"""
Document store backends.
"""

from __future__ import annotations

from src.store.base import (
    CollectionReference,
    DocumentReference,
    DocumentSnapshot,
    DocumentStore,
    Transaction,
    WriteBatch,
)
from src.store.memory import MemoryDocumentStore
from src.store.sqlite import SQLiteDocumentStore

__all__ = [
    "CollectionReference",
    "DocumentReference",
    "DocumentSnapshot",
    "DocumentStore",
    "MemoryDocumentStore",
    "SQLiteDocumentStore",
    "Transaction",
    "WriteBatch",
]
