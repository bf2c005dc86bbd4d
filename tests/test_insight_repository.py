"""
Tests for InsightRepo, including the merge-vs-replace update asymmetry with agents.
"""

import pytest

from src import seed_data
from src.exceptions import MissingRequiredFieldError
from src.repository import AgentRepo, InsightRepo


@pytest.fixture
def repo(store) -> InsightRepo:
    return InsightRepo(store)


def test_add_uses_title_slug(repo, insight_payload):
    insight = repo.add(insight_payload)
    assert insight == {"id": "agents-in-the-back-office", **insight_payload}
    assert repo.get_by_id("agents-in-the-back-office") == insight


def test_add_requires_title(repo):
    with pytest.raises(MissingRequiredFieldError):
        repo.add({"summary": "untitled"})


def test_get_missing_returns_none(repo):
    assert repo.get_by_id("nope") is None


def test_list_sorted_by_title(repo):
    for title in ("zeta notes", "Alpha Report", "mid year"):
        repo.add({"title": title})
    assert [i["title"] for i in repo.list()] == ["Alpha Report", "mid year", "zeta notes"]


def test_seed_then_list(repo):
    assert repo.seed() is True
    assert repo.seed() is False
    expected = sorted(seed_data.INSIGHTS, key=lambda i: i["title"].lower())
    assert repo.list() == expected


def test_delete(repo, insight_payload):
    insight = repo.add(insight_payload)
    repo.delete(insight["id"])
    assert repo.get_by_id(insight["id"]) is None


def test_delete_missing_is_noop(repo):
    repo.delete("never-existed")
    assert repo.list() == []


class TestUpdateSemantics:
    def test_insight_update_preserves_absent_fields(self, repo, insight_payload):
        insight = repo.add(insight_payload)
        repo.update(insight["id"], {"summary": "Rewritten"})
        assert repo.get_by_id(insight["id"]) == {**insight, "summary": "Rewritten"}

    def test_agent_update_drops_absent_fields(self, store, agent_payload):
        agents = AgentRepo(store)
        agent = agents.add(agent_payload)
        agents.update(agent["id"], {"description": "Rewritten"})
        assert agents.get_by_id(agent["id"]) == {"id": agent["id"], "description": "Rewritten"}

    def test_insight_update_ignores_id_in_payload(self, repo, insight_payload):
        insight = repo.add(insight_payload)
        repo.update(insight["id"], {"id": "other", "author": "New Author"})
        assert repo.get_by_id(insight["id"])["author"] == "New Author"
        assert repo.get_by_id("other") is None
