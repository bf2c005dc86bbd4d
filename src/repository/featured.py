"""
Featured agents: one ordered list of agent ids in `app_config/featured_agent`.
"""

from __future__ import annotations

from src.config import APP_CONFIG_COLLECTION, FEATURED_AGENT_DOC
from src.logging_config import get_logger
from src.store import DocumentReference, DocumentStore, Transaction

logger = get_logger(__name__)


class FeaturedRepo:
    """
    Reads and writes the featured-agent list.

    Duplicates and dangling ids are not prevented; ids are only removed when
    the agent they point to is deleted (see `AgentRepo.delete`).
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    @property
    def ref(self) -> DocumentReference:
        return self.store.document(APP_CONFIG_COLLECTION, FEATURED_AGENT_DOC)

    def set_featured(self, agent_ids: list[str]) -> None:
        self.ref.set({"agent_ids": list(agent_ids)})
        logger.info("Featured agents updated", extra={"agent_ids": list(agent_ids)})

    def get_featured_ids(self) -> list[str]:
        snap = self.ref.get()
        if not snap.exists:
            return []
        return list(snap.get("agent_ids") or [])

    def remove_in_transaction(self, txn: Transaction, agent_id: str) -> bool:
        """
        Stage removal of `agent_id` from the featured list inside `txn`.

        Only reads through `txn`, so it must run before the caller stages any
        write. Returns True when an update was staged.
        """
        snap = txn.get(self.ref)
        if not snap.exists:
            return False
        featured_ids = list(snap.get("agent_ids") or [])
        if agent_id not in featured_ids:
            return False
        txn.update(self.ref, {"agent_ids": [fid for fid in featured_ids if fid != agent_id]})
        return True
