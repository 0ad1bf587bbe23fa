"""
Storefront Configuration
Central place to configure which catalog backend to use and how the
fixture backend behaves. Change the backend here without modifying service code
"""
from enum import Enum
from pydantic_settings import BaseSettings
from typing import Dict, Optional

class CatalogProvider(str, Enum):
    """Catalog Backend Options"""
    FIXTURE = "fixture"      # Static in-memory sample data
    REMOTE = "remote"        # External HTTP catalog service

class Settings(BaseSettings):
    """Application Settings"""

    # ============================================
    # CATALOG BACKEND SELECTION
    # ============================================

    CATALOG_BACKEND: CatalogProvider = CatalogProvider.FIXTURE

    # Base URL of the remote catalog service (requests go to {BACKEND_URL}{API_PREFIX})
    BACKEND_URL: Optional[str] = "http://localhost:8000"
    API_PREFIX: str = "/api"

    # ============================================
    # FIXTURE LATENCY (milliseconds)
    # ============================================

    FIXTURE_SEARCH_DELAY_MS: int = 300
    FIXTURE_READ_DELAY_MS: int = 200      # shops, products, shop details
    FIXTURE_CATEGORIES_DELAY_MS: int = 100
    FIXTURE_LOGIN_DELAY_MS: int = 500
    FIXTURE_WRITE_DELAY_MS: int = 300

    # ============================================
    # APPLICATION SETTINGS
    # ============================================

    APP_NAME: str = "Sector-17 Storefront"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

# Global settings instance
settings = Settings()

def fixture_delays() -> Dict[str, int]:
    """Per-operation artificial latency for the fixture backend"""
    return {
        "search": settings.FIXTURE_SEARCH_DELAY_MS,
        "read": settings.FIXTURE_READ_DELAY_MS,
        "categories": settings.FIXTURE_CATEGORIES_DELAY_MS,
        "login": settings.FIXTURE_LOGIN_DELAY_MS,
        "write": settings.FIXTURE_WRITE_DELAY_MS,
    }

# Helper function to get current provider info
def get_provider_info() -> dict:
    """Get current catalog backend configuration"""
    return {
        "catalog_backend": settings.CATALOG_BACKEND.value,
        "backend_url": settings.BACKEND_URL if settings.CATALOG_BACKEND == CatalogProvider.REMOTE else None,
        "fixture_delays_ms": fixture_delays() if settings.CATALOG_BACKEND == CatalogProvider.FIXTURE else None,
    }
