# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Runtime environment ("development", "production" or "test")
        self.app_env: Final[str] = os.getenv("APP_ENV", "development").lower()
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "bloglist")
        self.test_mongo_database_name: Final[str] = os.getenv("TEST_MONGO_DB_NAME", "bloglist_test")
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3003"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Logging / Security
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))
    
    @property
    def is_test(self) -> bool:
        return self.app_env == "test"
    
    @property
    def database_name(self) -> str:
        """Database to connect to; tests never share the development database"""
        if self.is_test:
            return self.test_mongo_database_name
        return self.mongo_database_name


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
