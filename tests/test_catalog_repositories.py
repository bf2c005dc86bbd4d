"""
Tests for CategoryRepo and FeaturedRepo.
"""

import pytest

from src import seed_data
from src.exceptions import InvalidDocumentIDError, ValidationError
from src.repository import CategoryRepo, FeaturedRepo


class TestCategoryRepo:
    def test_empty_list(self, store):
        assert CategoryRepo(store).list() == []

    def test_seed_uses_preassigned_ids(self, store):
        repo = CategoryRepo(store)
        assert repo.seed() is True
        ids = sorted(s.id for s in store.collection("categories").stream())
        assert ids == sorted(c["id"] for c in seed_data.CATEGORIES)
        assert repo.list() == sorted(c["name"] for c in seed_data.CATEGORIES)

    def test_seed_is_idempotent(self, store):
        repo = CategoryRepo(store)
        repo.seed()
        repo.add("Payments")
        assert repo.seed() is False
        assert len(repo.list()) == len(seed_data.CATEGORIES) + 1

    def test_list_sorted_ascending(self, store):
        repo = CategoryRepo(store)
        for name in ("Trading", "Accounting", "Tax"):
            repo.add(name)
        assert repo.list() == ["Accounting", "Tax", "Trading"]

    def test_add_and_delete(self, store):
        repo = CategoryRepo(store)
        entry = repo.add("  Wealth Management ")
        assert entry == {"id": "wealth-management", "name": "Wealth Management"}
        assert repo.list_entries() == [entry]
        repo.delete(entry["id"])
        assert repo.list_entries() == []

    def test_add_blank_name_rejected(self, store):
        with pytest.raises(ValidationError):
            CategoryRepo(store).add("   ")

    def test_add_name_without_slug_characters(self, store):
        with pytest.raises(InvalidDocumentIDError):
            CategoryRepo(store).add("???")


class TestFeaturedRepo:
    def test_missing_record_returns_empty_list(self, store):
        assert FeaturedRepo(store).get_featured_ids() == []

    def test_set_keeps_order(self, store):
        repo = FeaturedRepo(store)
        repo.set_featured(["c", "a", "b"])
        assert repo.get_featured_ids() == ["c", "a", "b"]

    def test_set_overwrites(self, store):
        repo = FeaturedRepo(store)
        repo.set_featured(["a", "b"])
        repo.set_featured(["z"])
        assert repo.get_featured_ids() == ["z"]

    def test_set_empty_list(self, store):
        repo = FeaturedRepo(store)
        repo.set_featured(["a"])
        repo.set_featured([])
        assert repo.get_featured_ids() == []
        assert store.document("app_config", "featured_agent").get().exists

    def test_remove_in_transaction_stages_update(self, store):
        repo = FeaturedRepo(store)
        repo.set_featured(["a", "b"])
        staged = store.run_transaction(lambda txn: repo.remove_in_transaction(txn, "a"))
        assert staged is True
        assert repo.get_featured_ids() == ["b"]

    def test_remove_in_transaction_absent_id(self, store):
        repo = FeaturedRepo(store)
        repo.set_featured(["b"])
        staged = store.run_transaction(lambda txn: repo.remove_in_transaction(txn, "a"))
        assert staged is False
        assert repo.get_featured_ids() == ["b"]
