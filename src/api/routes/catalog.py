"""
Categories and featured agents.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from src.api.dependencies import get_agent_repo, get_category_repo, get_featured_repo
from src.api.models import CategoryEntry, CategoryPayload, FeaturedPayload, FeaturedResponse

router = APIRouter(prefix="/v1", tags=["catalog"])
admin_router = APIRouter(prefix="/v1/admin", tags=["admin"])


def _featured_response(request: Request) -> dict:
    agent_ids = get_featured_repo(request).get_featured_ids()
    agents = get_agent_repo(request)
    items = []
    for agent_id in agent_ids:
        agent = agents.get_by_id(agent_id)
        if agent is not None:
            items.append(agent)
    return {"agent_ids": agent_ids, "items": items}


@router.get("/categories")
def list_categories(request: Request, response: Response) -> list[str]:
    response.headers["Cache-Control"] = "no-store"
    return get_category_repo(request).list()


@router.get("/featured", response_model=FeaturedResponse)
def featured_agents(request: Request, response: Response) -> dict:
    response.headers["Cache-Control"] = "no-store"
    return _featured_response(request)


@admin_router.get("/featured", response_model=FeaturedResponse)
def get_featured(request: Request) -> dict:
    return _featured_response(request)


@admin_router.put("/featured", response_model=FeaturedResponse)
def set_featured(payload: FeaturedPayload, request: Request) -> dict:
    get_featured_repo(request).set_featured(payload.agent_ids)
    return _featured_response(request)


@admin_router.get("/categories", response_model=list[CategoryEntry])
def list_category_entries(request: Request) -> list[dict]:
    return get_category_repo(request).list_entries()


@admin_router.post("/categories", response_model=CategoryEntry, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryPayload, request: Request) -> dict:
    return get_category_repo(request).add(payload.name)


@admin_router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: str, request: Request) -> Response:
    get_category_repo(request).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
