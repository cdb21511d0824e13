"""
Unit tests for bloglist.core.config
"""
import os
from unittest.mock import patch

from bloglist.core.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.app_env == "development"
        assert settings.database_name == "bloglist"
        assert settings.port == 3003
        assert settings.bcrypt_rounds == 10
        assert settings.cors_origins == ["*"]

    def test_test_env_uses_test_database(self, mock_env):
        settings = Settings()
        assert settings.is_test is True
        assert settings.database_name == "bloglist_test"

    def test_env_overrides(self):
        env = {
            "MONGO_URI": "mongodb://db:27017",
            "MONGO_DB_NAME": "blogs_prod",
            "APP_ENV": "Production",
            "PORT": "8080",
            "CORS_ORIGINS": "http://localhost:5173, http://localhost:3000",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://db:27017"
        assert settings.app_env == "production"
        assert settings.database_name == "blogs_prod"
        assert settings.port == 8080
        assert settings.cors_origins == ["http://localhost:5173", "http://localhost:3000"]
