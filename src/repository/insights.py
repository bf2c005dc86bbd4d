"""
Insight (article) repository.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src import seed_data
from src.config import INSIGHTS_COLLECTION
from src.exceptions import MissingRequiredFieldError
from src.logging_config import get_logger, log_event
from src.slug import slugify
from src.store import DocumentSnapshot, DocumentStore

logger = get_logger(__name__)


def _to_insight(snap: DocumentSnapshot) -> dict[str, Any]:
    return {"id": snap.id, **(snap.to_dict() or {})}


def _body(data: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k != "id"}


class InsightRepo:
    """
    CRUD over the `insights` collection, keyed by the slug of the title.

    Unlike agents, `update` merges into the stored document.
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    @property
    def collection(self):
        return self.store.collection(INSIGHTS_COLLECTION)

    def seed(self, insights: list[dict[str, Any]] | None = None) -> bool:
        if not self.collection.is_empty():
            return False

        initial = seed_data.INSIGHTS if insights is None else insights
        batch = self.store.batch()
        for insight in initial:
            batch.set(self.collection.document(insight["id"]), _body(insight))
        batch.commit()
        log_event("collection_seeded", collection=INSIGHTS_COLLECTION, count=len(initial))
        return True

    def list(self) -> list[dict[str, Any]]:
        insights = [_to_insight(snap) for snap in self.collection.stream()]
        return sorted(insights, key=lambda i: ((i.get("title") or "").lower(), i["id"]))

    def get_by_id(self, insight_id: str) -> dict[str, Any] | None:
        snap = self.collection.document(insight_id).get()
        return _to_insight(snap) if snap.exists else None

    def add(self, data: Mapping[str, Any]) -> dict[str, Any]:
        title = data.get("title")
        if not isinstance(title, str):
            raise MissingRequiredFieldError("title")

        insight_id = slugify(title)
        body = _body(data)
        self.collection.document(insight_id).set(body)
        logger.info("Insight added", extra={"insight_id": insight_id})
        return {"id": insight_id, **body}

    def update(self, insight_id: str, data: Mapping[str, Any]) -> None:
        """Merge `data` into the stored insight; absent fields are kept."""
        self.collection.document(insight_id).set(_body(data), merge=True)
        logger.info("Insight updated", extra={"insight_id": insight_id})

    def delete(self, insight_id: str) -> None:
        self.collection.document(insight_id).delete()
        logger.info("Insight deleted", extra={"insight_id": insight_id})
