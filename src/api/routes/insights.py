"""
Insight (article) routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from src.api.dependencies import get_insight_repo
from src.api.models import InsightListResponse, InsightPatch, InsightPayload
from src.exceptions import InsightNotFoundError

router = APIRouter(prefix="/v1", tags=["insights"])
admin_router = APIRouter(prefix="/v1/admin", tags=["admin"])


@router.get("/insights", response_model=InsightListResponse)
def list_insights(request: Request, response: Response) -> dict:
    items = get_insight_repo(request).list()
    response.headers["Cache-Control"] = "no-store"
    return {"total": len(items), "items": items}


@router.get("/insights/{insight_id}")
def get_insight(insight_id: str, request: Request, response: Response) -> dict:
    insight = get_insight_repo(request).get_by_id(insight_id)
    if insight is None:
        raise InsightNotFoundError(insight_id)
    response.headers["Cache-Control"] = "no-store"
    return insight


@admin_router.post("/insights", status_code=status.HTTP_201_CREATED)
def create_insight(payload: InsightPayload, request: Request) -> dict:
    return get_insight_repo(request).add(payload.to_document())


@admin_router.patch("/insights/{insight_id}")
def update_insight(insight_id: str, payload: InsightPatch, request: Request) -> dict:
    repo = get_insight_repo(request)
    repo.update(insight_id, payload.to_document())
    return repo.get_by_id(insight_id)


@admin_router.delete("/insights/{insight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_insight(insight_id: str, request: Request) -> Response:
    get_insight_repo(request).delete(insight_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
