"""
Tests for src.config module.

Covers:
- Settings initialization
- Environment variable overrides
- Default values
- Constants
"""

import os
from pathlib import Path
from unittest import mock


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self):
        """Test that default values are set correctly."""
        from src.config import Settings

        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.store_backend == "sqlite"
        assert settings.store_path == Path("data/insights.db")
        assert settings.store_timeout_seconds == 10.0
        assert settings.transaction_max_attempts == 5
        assert settings.seed_on_startup is True
        assert settings.site_name == "AI FinTech Insights"
        assert settings.enable_admin_routes is True
        assert settings.debug_mode is False
        assert "http://localhost:3000" in settings.cors_allow_origins

    def test_env_override_store(self):
        """Test environment variable overrides for the document store."""
        from src.config import Settings

        env = {
            "INSIGHTS_STORE_BACKEND": "Memory",
            "INSIGHTS_STORE_PATH": "/custom/catalog.db",
            "INSIGHTS_STORE_TIMEOUT": "2.5",
            "TRANSACTION_MAX_ATTEMPTS": "9",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.store_backend == "memory"
        assert settings.store_path == Path("/custom/catalog.db")
        assert settings.store_timeout_seconds == 2.5
        assert settings.transaction_max_attempts == 9

    def test_unknown_backend_keeps_default(self):
        from src.config import Settings

        with mock.patch.dict(os.environ, {"INSIGHTS_STORE_BACKEND": "firestore"}, clear=True):
            settings = Settings()

        assert settings.store_backend == "sqlite"

    def test_transaction_attempts_floor(self):
        from src.config import Settings

        with mock.patch.dict(os.environ, {"TRANSACTION_MAX_ATTEMPTS": "0"}, clear=True):
            settings = Settings()

        assert settings.transaction_max_attempts == 1

    def test_seed_on_startup_can_be_disabled(self):
        from src.config import Settings

        for value in ("0", "false", "NO"):
            with mock.patch.dict(os.environ, {"SEED_ON_STARTUP": value}, clear=True):
                assert Settings().seed_on_startup is False

    def test_cors_origins_list(self):
        from src.config import Settings

        env = {"CORS_ALLOW_ORIGINS": "https://a.example, https://b.example,", "CORS_MAX_AGE": "60"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.cors_allow_origins == {"https://a.example", "https://b.example"}
        assert settings.cors_max_age == 60

    def test_cors_wildcard(self):
        from src.config import Settings

        with mock.patch.dict(os.environ, {"CORS_ALLOW_ORIGINS": "*"}, clear=True):
            settings = Settings()

        assert settings.cors_allow_origins == {"*"}

    def test_proxy_settings(self):
        from src.config import Settings

        env = {"TRUST_PROXY_HEADERS": "true", "TRUSTED_PROXY_IPS": "10.0.0.1, 10.0.0.2"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.trust_proxy_headers is True
        assert settings.trusted_proxy_ips == {"10.0.0.1", "10.0.0.2"}

    def test_feature_flags(self):
        from src.config import Settings

        env = {"DISABLE_ADMIN_ROUTES": "1", "DEBUG": "true", "SITE_BASE_URL": "https://staging.example"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.enable_admin_routes is False
        assert settings.debug_mode is True
        assert settings.site_base_url == "https://staging.example"


class TestSettingsSingleton:
    def test_get_settings_returns_same_instance(self):
        from src.config import get_settings

        assert get_settings() is get_settings()

    def test_reload_settings_reads_environment(self):
        from src import config

        original = config.get_settings()
        try:
            with mock.patch.dict(os.environ, {"INSIGHTS_STORE_BACKEND": "memory"}, clear=True):
                reloaded = config.reload_settings()
            assert reloaded is not original
            assert reloaded.store_backend == "memory"
            assert config.get_settings() is reloaded
        finally:
            config._settings = original


class TestConstants:
    def test_collection_layout(self):
        from src import config

        assert config.AGENTS_COLLECTION == "agents"
        assert config.INSIGHTS_COLLECTION == "insights"
        assert config.CATEGORIES_COLLECTION == "categories"
        assert config.APP_CONFIG_COLLECTION == "app_config"
        assert config.FEATURED_AGENT_DOC == "featured_agent"
        assert config.ALL_CATEGORIES == "all"
