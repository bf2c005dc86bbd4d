"""
Category repository: one document per category, body `{"name": ...}`.
"""

from __future__ import annotations

from typing import Any

from src import seed_data
from src.config import CATEGORIES_COLLECTION
from src.exceptions import ValidationError
from src.logging_config import get_logger, log_event
from src.slug import slugify
from src.store import DocumentStore

logger = get_logger(__name__)


class CategoryRepo:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    @property
    def collection(self):
        return self.store.collection(CATEGORIES_COLLECTION)

    def seed(self, categories: list[dict[str, str]] | None = None) -> bool:
        if not self.collection.is_empty():
            return False

        initial = seed_data.CATEGORIES if categories is None else categories
        batch = self.store.batch()
        for category in initial:
            # Seed ids are pre-assigned, not derived from the name
            batch.set(self.collection.document(category["id"]), {"name": category["name"]})
        batch.commit()
        log_event("collection_seeded", collection=CATEGORIES_COLLECTION, count=len(initial))
        return True

    def list(self) -> list[str]:
        """Category names, ascending."""
        return sorted(str(snap.get("name")) for snap in self.collection.stream())

    def list_entries(self) -> list[dict[str, Any]]:
        entries = [{"id": snap.id, "name": snap.get("name")} for snap in self.collection.stream()]
        return sorted(entries, key=lambda c: (str(c["name"]), c["id"]))

    def add(self, name: str) -> dict[str, Any]:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name must not be empty", field="name")
        category_id = slugify(name)
        self.collection.document(category_id).set({"name": name})
        logger.info("Category added", extra={"category_id": category_id})
        return {"id": category_id, "name": name}

    def delete(self, category_id: str) -> None:
        """Remove the category document. Agents keep their category tags."""
        self.collection.document(category_id).delete()
        logger.info("Category deleted", extra={"category_id": category_id})
