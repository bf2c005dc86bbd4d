"""
AI FinTech Insights - Data Store
================================
Opens the configured document store and seeds it.

Supports two backends:
- SQLite (default): single file, survives restarts
- Memory: process-local, for tests and quick local runs

Set INSIGHTS_STORE_BACKEND=memory in environment to use the in-memory backend.

Seeding is an explicit start-up step (`seed_store`), idempotent, and never
runs as a side effect of a read.
"""

from __future__ import annotations

import threading
from pathlib import Path

from src.config import Settings, settings
from src.exceptions import ConfigurationError
from src.logging_config import PerformanceTracker, get_logger
from src.repository import AgentRepo, CategoryRepo, InsightRepo
from src.store import DocumentStore, MemoryDocumentStore, SQLiteDocumentStore

logger = get_logger(__name__)

_lock = threading.Lock()
_store: DocumentStore | None = None


def open_store(
    *,
    backend: str | None = None,
    path: Path | None = None,
    config: Settings | None = None,
) -> DocumentStore:
    """Create a new store for `backend` (defaults from settings)."""
    cfg = config or settings
    backend = (backend or cfg.store_backend).lower()

    if backend == "memory":
        logger.info("Using in-memory document store")
        return MemoryDocumentStore()
    if backend == "sqlite":
        db_path = path or cfg.store_path
        logger.info("Using SQLite document store", extra={"db_path": str(db_path)})
        return SQLiteDocumentStore(
            db_path,
            timeout=cfg.store_timeout_seconds,
            max_attempts=cfg.transaction_max_attempts,
        )
    raise ConfigurationError(f"Unknown document store backend {backend!r}", setting_name="INSIGHTS_STORE_BACKEND")


def get_store() -> DocumentStore:
    """
    Get the process-wide store.

    Thread-safe: uses double-checked locking pattern.
    """
    global _store
    if _store is None:
        with _lock:
            if _store is None:
                _store = open_store()
    return _store


def reset_store() -> None:
    """Drop the process-wide store (tests, settings reloads)."""
    global _store
    with _lock:
        if _store is not None:
            _store.close()
        _store = None


def seed_store(store: DocumentStore) -> dict[str, bool]:
    """
    Populate every empty collection with its seed data.

    Safe to call on every start-up: collections that already hold documents
    are left untouched. Returns which collections were seeded.
    """
    with PerformanceTracker("seed_store"):
        seeded = {
            "agents": AgentRepo(store).seed(),
            "insights": InsightRepo(store).seed(),
            "categories": CategoryRepo(store).seed(),
        }
    if any(seeded.values()):
        logger.info("Database seeded", extra={"seeded": seeded})
    else:
        logger.debug("Seed skipped, collections already populated")
    return seeded
