"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Redis document store
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CATALOG_KEY_PREFIX: str = os.getenv("CATALOG_KEY_PREFIX", "catalog:")

    # HTTP
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    # Catalog browsing
    SEARCH_DEBOUNCE_SECONDS: float = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.3"))
    DEFAULT_PRICE_MIN: float = float(os.getenv("DEFAULT_PRICE_MIN", "0"))
    DEFAULT_PRICE_MAX: float = float(os.getenv("DEFAULT_PRICE_MAX", "500000"))
    LOAD_MORE_THRESHOLD: int = int(os.getenv("LOAD_MORE_THRESHOLD", "8"))

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Origins allowed to call the API from a browser."""
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
