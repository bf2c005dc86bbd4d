"""
Tests for the agent list filter (src.search).
"""

import copy

from src.search import filter_agents, matches_category, matches_query


def _names(agents):
    return [a["name"] for a in agents]


class TestFilterAgents:
    def test_category_only(self, sample_agents):
        assert _names(filter_agents(sample_agents, category="fin")) == ["Alpha"]

    def test_query_any_case_with_all_categories(self, sample_agents):
        for query in ("acme", "ACME", "AcMe"):
            assert _names(filter_agents(sample_agents, query=query, category="all")) == ["Alpha"]

    def test_no_match(self, sample_agents):
        assert filter_agents(sample_agents, query="zzz") == []

    def test_defaults_return_everything_in_order(self, sample_agents):
        assert filter_agents(sample_agents) == sample_agents

    def test_category_and_query_are_conjunctive(self, sample_agents):
        assert filter_agents(sample_agents, query="globex", category="fin") == []
        assert _names(filter_agents(sample_agents, query="globex", category="tax")) == ["Beta"]

    def test_query_matches_description(self, sample_agents):
        assert _names(filter_agents(sample_agents, query="Y")) == ["Beta"]

    def test_unknown_category(self, sample_agents):
        assert filter_agents(sample_agents, category="crypto") == []

    def test_input_not_mutated(self, sample_agents):
        before = copy.deepcopy(sample_agents)
        filter_agents(sample_agents, query="a", category="fin")
        assert sample_agents == before


class TestMatchers:
    def test_category_membership_is_exact(self):
        agent = {"category": ["Financial Planning"]}
        assert matches_category(agent, "Financial Planning")
        assert not matches_category(agent, "Financial")
        assert not matches_category(agent, "financial planning")

    def test_missing_fields_do_not_break_matching(self):
        agent = {"name": "Solo"}
        assert matches_query(agent, "solo")
        assert not matches_category(agent, "tax")
        assert matches_category(agent, "all")

    def test_empty_or_missing_category_matches_nothing(self, sample_agents):
        assert filter_agents(sample_agents, category="") == []
        assert filter_agents(sample_agents, category=None) == []
