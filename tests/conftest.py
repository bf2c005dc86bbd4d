"""
Pytest configuration and shared fixtures for catalog tests.
"""

from pathlib import Path
from typing import Any, Dict

import pytest

# Add repo root to path for `src` imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.store import MemoryDocumentStore, SQLiteDocumentStore  # noqa: E402


@pytest.fixture
def memory_store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def sqlite_store(tmp_path: Path) -> SQLiteDocumentStore:
    return SQLiteDocumentStore(tmp_path / "insights.db")


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path: Path):
    """Every store-level test runs against both backends."""
    if request.param == "memory":
        return MemoryDocumentStore()
    return SQLiteDocumentStore(tmp_path / "insights.db")


@pytest.fixture
def sample_agents() -> list[Dict[str, Any]]:
    """Two agents used by the filter scenarios."""
    return [
        {
            "id": "alpha",
            "name": "Alpha",
            "description": "x",
            "company": "Acme",
            "category": ["fin"],
        },
        {
            "id": "beta",
            "name": "Beta",
            "description": "y",
            "company": "Globex",
            "category": ["tax"],
        },
    ]


@pytest.fixture
def agent_payload() -> Dict[str, Any]:
    return {
        "name": "Ledger Bot 3000",
        "description": "Closes the books while you sleep",
        "company": "Acme Finance",
        "category": ["Accounting"],
        "logo_url": "https://example.com/logo.png",
        "pricing": "paid",
    }


@pytest.fixture
def insight_payload() -> Dict[str, Any]:
    return {
        "title": "Agents in the Back Office",
        "summary": "Where automation pays off",
        "content": "Long form body",
        "author": "Sam Doe",
        "published_at": "2024-06-01",
        "tags": ["Operations"],
    }
