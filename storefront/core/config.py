"""Storefront Client Configuration"""

from typing import Optional
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False

    # Backend
    backend_base_url: str = "http://localhost:8001"
    request_timeout: float = 30.0

    # Caching: default lifetime for short-lived query results (orders,
    # account). Catalog and cart entries only expire through invalidation.
    query_cache_ttl: float = 30.0

    # Assets
    asset_base_url: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
