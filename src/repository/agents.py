"""
Agent catalog repository.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src import seed_data
from src.config import AGENTS_COLLECTION
from src.exceptions import MissingRequiredFieldError
from src.logging_config import get_logger, log_event
from src.repository.featured import FeaturedRepo
from src.slug import slugify
from src.store import DocumentSnapshot, DocumentStore, Transaction

logger = get_logger(__name__)


def _to_agent(snap: DocumentSnapshot) -> dict[str, Any]:
    return {"id": snap.id, **(snap.to_dict() or {})}


def _body(data: Mapping[str, Any]) -> dict[str, Any]:
    # The id is the document key, never part of the stored body
    return {k: v for k, v in data.items() if k != "id"}


def sort_agents(agents: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(agents, key=lambda a: ((a.get("name") or "").lower(), a.get("id") or ""))


class AgentRepo:
    """
    CRUD over the `agents` collection.

    Ids are slugs of the agent name at creation time. Colliding slugs are not
    detected: the later write replaces the earlier document.
    """

    def __init__(self, store: DocumentStore, featured: FeaturedRepo | None = None) -> None:
        self.store = store
        self.featured = featured or FeaturedRepo(store)

    @property
    def collection(self):
        return self.store.collection(AGENTS_COLLECTION)

    def seed(self, agents: list[dict[str, Any]] | None = None) -> bool:
        """Write the seed agents in one batch if the collection is empty. Returns True if seeded."""
        if not self.collection.is_empty():
            return False

        initial = seed_data.AGENTS if agents is None else agents
        batch = self.store.batch()
        for agent in initial:
            batch.set(self.collection.document(agent["id"]), _body(agent))
        batch.commit()
        log_event("collection_seeded", collection=AGENTS_COLLECTION, count=len(initial))
        return True

    def list(self) -> list[dict[str, Any]]:
        """All agents, sorted by name (case-insensitive)."""
        return sort_agents([_to_agent(snap) for snap in self.collection.stream()])

    def get_by_id(self, agent_id: str) -> dict[str, Any] | None:
        snap = self.collection.document(agent_id).get()
        return _to_agent(snap) if snap.exists else None

    def add(self, data: Mapping[str, Any]) -> dict[str, Any]:
        name = data.get("name")
        if not isinstance(name, str):
            raise MissingRequiredFieldError("name")

        agent_id = slugify(name)
        body = _body(data)
        if not body.get("logo_url"):
            body.pop("logo_url", None)

        self.collection.document(agent_id).set(body)
        logger.info("Agent added", extra={"agent_id": agent_id})
        return {"id": agent_id, **body}

    def update(self, agent_id: str, data: Mapping[str, Any]) -> None:
        """Replace the stored agent with `data`. Fields missing from `data` are dropped."""
        self.collection.document(agent_id).set(_body(data))
        logger.info("Agent updated", extra={"agent_id": agent_id})

    def delete(self, agent_id: str) -> None:
        """Delete the agent and drop it from the featured list, atomically."""
        was_featured = self.store.run_transaction(lambda txn: self._delete_in_transaction(txn, agent_id))
        logger.info("Agent deleted", extra={"agent_id": agent_id, "was_featured": was_featured})

    def _delete_in_transaction(self, txn: Transaction, agent_id: str) -> bool:
        was_featured = self.featured.remove_in_transaction(txn, agent_id)
        txn.delete(self.collection.document(agent_id))
        return was_featured
