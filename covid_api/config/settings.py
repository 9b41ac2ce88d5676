"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///covid19.db")
    DATABASE_POOL_SIZE: int = int(os.getenv("DATABASE_POOL_SIZE", "10"))
    # Per-statement timeout (PostgreSQL only); 0 disables it
    DATABASE_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DATABASE_STATEMENT_TIMEOUT_MS", "30000"))
    DB_CREATE_TABLES: bool = os.getenv("DB_CREATE_TABLES", "true").lower() == "true"
    STORAGE_TYPE: str = os.getenv("STORAGE_TYPE", "sql")

    # Server
    PORT: int = int(os.getenv("PORT", "5551"))

    # Cross-origin access (comma separated origins, "*" for any)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Rate Limiting
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_DEFAULT: str = os.getenv("RATELIMIT_DEFAULT", "1000 per hour;100 per minute")

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    TESTING: bool = False
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    ENV_NAME: str = "base"

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = [
            ("DATABASE_URL", cls.DATABASE_URL),
        ]

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        if cls.STORAGE_TYPE.lower() not in ("sql", "memory"):
            raise ValueError(f"Unsupported STORAGE_TYPE: {cls.STORAGE_TYPE}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    ENV_NAME = "development"


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    ENV_NAME = "production"

    @classmethod
    def validate(cls) -> None:
        super().validate()
        if cls.DATABASE_URL.startswith("sqlite"):
            raise ValueError("DATABASE_URL must point at a server database in production")


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    ENV_NAME = "testing"
    DATABASE_URL = "sqlite://"
    DATABASE_STATEMENT_TIMEOUT_MS = 0
    STORAGE_TYPE = "memory"
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URL = "memory://"
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
