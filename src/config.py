"""
AI FinTech Insights - Configuration Management
==============================================
Centralized configuration with environment variable support.

Usage:
    from src.config import settings

    backend = settings.store_backend
    db_path = settings.store_path
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

_STORE_BACKENDS = {"sqlite", "memory"}


@dataclass
class Settings:
    """Application settings with environment variable overrides."""

    # Document store
    store_backend: str = "sqlite"  # sqlite | memory
    store_path: Path = field(default_factory=lambda: Path("data/insights.db"))
    store_timeout_seconds: float = 10.0
    transaction_max_attempts: int = 5

    # Seeding runs once at start-up, never inside a read
    seed_on_startup: bool = True

    # CORS configuration
    # Set CORS_ALLOW_ORIGINS to a comma-separated list of allowed origins.
    # "*" allows every origin (development only).
    cors_allow_origins: set[str] = field(
        default_factory=lambda: {
            "http://localhost",
            "http://localhost:3000",
            "http://127.0.0.1",
            "http://127.0.0.1:3000",
        }
    )
    cors_allow_credentials: bool = False
    cors_max_age: int = 600  # 10 minutes

    # Reverse proxy / client IP extraction
    trust_proxy_headers: bool = False
    trusted_proxy_ips: set[str] = field(default_factory=set)

    # Site
    site_base_url: str = "https://ai-fintech-insights.com"
    site_name: str = "AI FinTech Insights"

    # Feature flags
    enable_admin_routes: bool = True
    debug_mode: bool = False

    def __post_init__(self):
        """Load overrides from environment variables."""
        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load configuration from environment variables."""
        # Store
        if backend := os.environ.get("INSIGHTS_STORE_BACKEND", "").strip().lower():
            if backend not in _STORE_BACKENDS:
                logger.warning("Unknown INSIGHTS_STORE_BACKEND %r, keeping %r", backend, self.store_backend)
            else:
                self.store_backend = backend
        if store_path := os.environ.get("INSIGHTS_STORE_PATH"):
            self.store_path = Path(store_path)
        if timeout := os.environ.get("INSIGHTS_STORE_TIMEOUT"):
            self.store_timeout_seconds = float(timeout)
        if attempts := os.environ.get("TRANSACTION_MAX_ATTEMPTS"):
            self.transaction_max_attempts = max(1, int(attempts))

        if os.environ.get("SEED_ON_STARTUP", "").lower() in ("0", "false", "no"):
            self.seed_on_startup = False

        # CORS configuration
        if cors_origins := os.environ.get("CORS_ALLOW_ORIGINS", "").strip():
            if cors_origins == "*":
                logger.warning(
                    "CORS_ALLOW_ORIGINS set to '*' - allowing all origins. " "This should only be used in development."
                )
                self.cors_allow_origins = {"*"}
            else:
                self.cors_allow_origins = {origin.strip() for origin in cors_origins.split(",") if origin.strip()}
        if cors_max_age := os.environ.get("CORS_MAX_AGE"):
            self.cors_max_age = int(cors_max_age)

        # Reverse proxy / headers
        if os.environ.get("TRUST_PROXY_HEADERS", "").lower() in ("1", "true", "yes"):
            self.trust_proxy_headers = True
        if trusted := os.environ.get("TRUSTED_PROXY_IPS", "").strip():
            self.trusted_proxy_ips = {ip.strip() for ip in trusted.split(",") if ip.strip()}

        # Site
        if base_url := os.environ.get("SITE_BASE_URL"):
            self.site_base_url = base_url

        # Feature flags
        if os.environ.get("DISABLE_ADMIN_ROUTES", "").lower() in ("1", "true"):
            self.enable_admin_routes = False
        if os.environ.get("DEBUG", "").lower() in ("1", "true"):
            self.debug_mode = True


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
        if _settings.debug_mode:
            logger.info("Settings loaded with debug mode enabled")
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from environment."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience alias
settings = get_settings()


# Collection layout
AGENTS_COLLECTION = "agents"
INSIGHTS_COLLECTION = "insights"
CATEGORIES_COLLECTION = "categories"
APP_CONFIG_COLLECTION = "app_config"
FEATURED_AGENT_DOC = "featured_agent"

# Category selector value matching every agent
ALL_CATEGORIES = "all"
