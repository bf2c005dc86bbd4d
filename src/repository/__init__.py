"""
Repository module for catalog persistence.
"""

from __future__ import annotations

from src.repository.agents import AgentRepo
from src.repository.categories import CategoryRepo
from src.repository.featured import FeaturedRepo
from src.repository.insights import InsightRepo

__all__ = ["AgentRepo", "CategoryRepo", "FeaturedRepo", "InsightRepo"]
