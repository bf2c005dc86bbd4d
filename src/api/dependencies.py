"""
Dependency helpers for API routes.

These are kept as simple functions (not FastAPI Depends) because the app
already uses request.app.state for its stateful components.
"""

from __future__ import annotations

from fastapi import Request

from src.api.state import AppState
from src.data_store import get_store
from src.repository import AgentRepo, CategoryRepo, FeaturedRepo, InsightRepo


def get_state(request: Request) -> AppState:
    state = getattr(request.app.state, "state", None)
    if state is None:
        state = AppState(store=get_store())
        request.app.state.state = state
    return state


def get_agent_repo(request: Request) -> AgentRepo:
    return get_state(request).agents


def get_insight_repo(request: Request) -> InsightRepo:
    return get_state(request).insights


def get_category_repo(request: Request) -> CategoryRepo:
    return get_state(request).categories


def get_featured_repo(request: Request) -> FeaturedRepo:
    return get_state(request).featured
