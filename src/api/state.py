from __future__ import annotations

from dataclasses import dataclass, field

from src.repository import AgentRepo, CategoryRepo, FeaturedRepo, InsightRepo
from src.store import DocumentStore


@dataclass
class AppState:
    store: DocumentStore
    agents: AgentRepo = field(init=False)
    insights: InsightRepo = field(init=False)
    categories: CategoryRepo = field(init=False)
    featured: FeaturedRepo = field(init=False)

    def __post_init__(self) -> None:
        self.featured = FeaturedRepo(self.store)
        self.agents = AgentRepo(self.store, featured=self.featured)
        self.insights = InsightRepo(self.store)
        self.categories = CategoryRepo(self.store)
