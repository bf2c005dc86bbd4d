"""
Agent catalog routes: public listing/detail and admin CRUD.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, Response, status

from src.api.dependencies import get_agent_repo
from src.api.models import AgentListResponse, AgentPayload
from src.config import ALL_CATEGORIES
from src.exceptions import AgentNotFoundError
from src.logging_config import get_logger
from src.search import filter_agents

logger = get_logger(__name__)

router = APIRouter(prefix="/v1", tags=["agents"])
admin_router = APIRouter(prefix="/v1/admin", tags=["admin"])


@router.get("/agents", response_model=AgentListResponse)
def list_agents(
    request: Request,
    response: Response,
    q: str = Query(default="", max_length=200),
    category: str = Query(default=ALL_CATEGORIES, max_length=100),
) -> dict:
    agents = get_agent_repo(request).list()
    items = filter_agents(agents, query=q, category=category)
    response.headers["Cache-Control"] = "no-store"
    return {"total": len(items), "items": items}


@router.get("/agents/{agent_id}")
def get_agent(agent_id: str, request: Request, response: Response) -> dict:
    agent = get_agent_repo(request).get_by_id(agent_id)
    if agent is None:
        raise AgentNotFoundError(agent_id)
    response.headers["Cache-Control"] = "no-store"
    return agent


@admin_router.post("/agents", status_code=status.HTTP_201_CREATED)
def create_agent(payload: AgentPayload, request: Request) -> dict:
    return get_agent_repo(request).add(payload.to_document())


@admin_router.put("/agents/{agent_id}")
def replace_agent(agent_id: str, payload: AgentPayload, request: Request) -> dict:
    repo = get_agent_repo(request)
    repo.update(agent_id, payload.to_document())
    return repo.get_by_id(agent_id)


@admin_router.delete("/agents/{agent_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_agent(agent_id: str, request: Request) -> Response:
    get_agent_repo(request).delete(agent_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
