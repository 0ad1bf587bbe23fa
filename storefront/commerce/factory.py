"""
Catalog Backend Factory
Provides unified interface to catalog backends (fixture, remote)
Enables easy switching between providers
"""
from typing import Optional
import logging

from storefront.config import settings, CatalogProvider
from storefront.commerce.interface import CatalogBackend
from storefront.commerce.fixture_backend import FixtureBackend
from storefront.commerce.remote_backend import RemoteBackend

logger = logging.getLogger(__name__)

class CatalogFactory:
    """Factory for creating catalog backend instances"""

    @staticmethod
    def create_backend(provider: Optional[CatalogProvider] = None) -> CatalogBackend:
        """
        Create catalog backend instance

        Args:
            provider: Catalog provider (defaults to settings.CATALOG_BACKEND)

        Returns:
            CatalogBackend instance
        """
        if provider is None:
            provider = settings.CATALOG_BACKEND

        if provider == CatalogProvider.FIXTURE:
            return FixtureBackend()
        elif provider == CatalogProvider.REMOTE:
            return RemoteBackend()
        else:
            raise ValueError(f"Unsupported catalog provider: {provider}")

# Singleton instance
_catalog_backend: Optional[CatalogBackend] = None

def get_catalog_backend() -> CatalogBackend:
    """
    Get or create catalog backend instance
    This is the main entry point for catalog operations
    """
    global _catalog_backend
    if _catalog_backend is None:
        _catalog_backend = CatalogFactory.create_backend()
        logger.info("Using %s catalog backend", _catalog_backend.provider)
    return _catalog_backend

def reset_catalog_backend() -> None:
    """Drop the cached backend so the next call rebuilds it from settings"""
    global _catalog_backend
    _catalog_backend = None

async def close_catalog_backend() -> None:
    """Close the cached backend, if any, and drop it"""
    global _catalog_backend
    if _catalog_backend is not None:
        backend, _catalog_backend = _catalog_backend, None
        await backend.aclose()
        logger.info("Closed %s catalog backend", backend.provider)
