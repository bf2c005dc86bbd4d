"""
Pydantic models for API requests and responses.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# =============================================================================
# Request Models
# =============================================================================


class AgentPayload(BaseModel):
    """Agent body for create and full-replace update."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "examples": [
                {
                    "name": "Ledgerly",
                    "description": "Reconciles bank feeds against the general ledger.",
                    "company": "Ledgerly Labs",
                    "category": ["Accounting"],
                    "logo_url": "https://placehold.co/128x128?text=L",
                    "website_url": "https://example.com/ledgerly",
                    "pricing": "freemium",
                    "features": ["Bank reconciliation"],
                }
            ]
        },
    )

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    company: str = Field(default="", max_length=200)
    category: list[str] = Field(default_factory=list, description="Category names")
    logo_url: str | None = Field(default=None, max_length=2000)
    website_url: str | None = Field(default=None, max_length=2000)
    pricing: str | None = Field(default=None, max_length=40)
    features: list[str] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class InsightPayload(BaseModel):
    """Insight body for create."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1, max_length=300)
    summary: str = Field(default="", max_length=2000)
    content: str = Field(default="", max_length=100_000)
    author: str = Field(default="", max_length=200)
    published_at: str | None = Field(default=None, max_length=40, description="ISO date")
    image_url: str | None = Field(default=None, max_length=2000)
    tags: list[str] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class InsightPatch(BaseModel):
    """Partial insight body; only the fields sent are merged into the stored insight."""

    model_config = ConfigDict(extra="allow")

    title: str | None = Field(default=None, min_length=1, max_length=300)
    summary: str | None = Field(default=None, max_length=2000)
    content: str | None = Field(default=None, max_length=100_000)
    author: str | None = Field(default=None, max_length=200)
    published_at: str | None = Field(default=None, max_length=40)
    image_url: str | None = Field(default=None, max_length=2000)
    tags: list[str] | None = None

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class FeaturedPayload(BaseModel):
    agent_ids: list[str] = Field(default_factory=list, max_length=50)


class CategoryPayload(BaseModel):
    name: str = Field(min_length=1, max_length=100)


# =============================================================================
# Response Models
# =============================================================================


class AgentListResponse(BaseModel):
    total: int
    items: list[dict[str, Any]]


class InsightListResponse(BaseModel):
    total: int
    items: list[dict[str, Any]]


class FeaturedResponse(BaseModel):
    agent_ids: list[str]
    items: list[dict[str, Any]]


class CategoryEntry(BaseModel):
    id: str
    name: str
