"""
Catalog Backend Interface
Abstract base classes for catalog providers (fixture, remote HTTP service)
"""
from abc import ABC, abstractmethod
from typing import Optional

from storefront.commerce.models import (
    AdminSession,
    Envelope,
    FilterSet,
    ProductInput,
    ShopInput,
)

class CatalogReader(ABC):
    """Read side of a catalog backend"""

    @abstractmethod
    async def search_products(
        self,
        query: str = "",
        filters: Optional[FilterSet] = None
    ) -> Envelope:
        """
        Search products

        Args:
            query: Free text matched against name, shop name and description
            filters: Optional category, shop and price filters

        Returns:
            Envelope whose data is the list of matching products
        """
        pass

    @abstractmethod
    async def get_shops(self) -> Envelope:
        """Envelope with every shop"""
        pass

    @abstractmethod
    async def get_shop_by_id(self, shop_id: str) -> Envelope:
        """
        Get a shop and its products

        Returns:
            Envelope with {"shop", "products"}. An unknown id is still a
            success, with no shop and an empty product list
        """
        pass

    @abstractmethod
    async def get_categories(self) -> Envelope:
        pass

    @abstractmethod
    async def get_products(self) -> Envelope:
        pass

    @abstractmethod
    async def admin_login(self, email: str, password: str) -> Envelope:
        """
        Check admin credentials

        Returns:
            Envelope with {"token", "email"} on success, or an error
            message and no data on failure
        """
        pass

class CatalogWriter(ABC):
    """
    Admin side of a catalog backend

    The session is passed through to the backend as-is; backends that
    talk to a service send its token as a bearer credential.
    """

    @abstractmethod
    async def add_shop(self, shop: ShopInput, session: Optional[AdminSession] = None) -> Envelope:
        pass

    @abstractmethod
    async def update_shop(
        self,
        shop_id: str,
        shop: ShopInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        pass

    @abstractmethod
    async def delete_shop(self, shop_id: str, session: Optional[AdminSession] = None) -> Envelope:
        pass

    @abstractmethod
    async def add_product(self, product: ProductInput, session: Optional[AdminSession] = None) -> Envelope:
        pass

    @abstractmethod
    async def update_product(
        self,
        product_id: str,
        product: ProductInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        pass

    @abstractmethod
    async def delete_product(self, product_id: str, session: Optional[AdminSession] = None) -> Envelope:
        pass

class CatalogBackend(CatalogReader, CatalogWriter):
    """Abstract interface for catalog backends"""

    provider: str = "unknown"

    async def aclose(self) -> None:
        """Release connections or other resources held by the backend"""
        pass
