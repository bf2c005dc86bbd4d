"""
AI FinTech Insights - Agent List Filter
=======================================
Narrows an already-fetched agent list by category and free text.

No store access and no caching: the view is recomputed from the full list
every time either criterion changes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from src.config import ALL_CATEGORIES

_TEXT_FIELDS = ("name", "description", "company")


def matches_category(agent: dict[str, Any], category: str | None) -> bool:
    """Exact membership in the agent's categories; only "all" matches every agent."""
    if category == ALL_CATEGORIES:
        return True
    return category in (agent.get("category") or [])


def matches_query(agent: dict[str, Any], query: str | None) -> bool:
    """Case-insensitive substring match on name, description or company."""
    needle = (query or "").lower()
    return any(needle in str(agent.get(field) or "").lower() for field in _TEXT_FIELDS)


def filter_agents(
    agents: Iterable[dict[str, Any]],
    *,
    query: str | None = "",
    category: str | None = ALL_CATEGORIES,
) -> list[dict[str, Any]]:
    """
    Return the agents matching both the category and the text query, in input order.

    Args:
        agents: Agents as returned by `AgentRepo.list()`.
        query: Free text; empty matches everything.
        category: A category name, or "all".
    """
    return [a for a in agents if matches_category(a, category) and matches_query(a, query)]
