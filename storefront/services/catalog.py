"""
Catalog gateway
Single entry point for catalog reads and admin writes, over whichever
backend strategy is injected
"""
from typing import Any, Optional, Sequence
import asyncio
import logging

from storefront.commerce.factory import get_catalog_backend
from storefront.commerce.interface import CatalogBackend
from storefront.commerce.models import (
    AdminSession,
    DashboardStats,
    Envelope,
    FilterSet,
    ProductInput,
    ShopInput,
)

logger = logging.getLogger(__name__)

def _field(record: Any, name: str) -> Any:
    # Remote backends hand back plain dicts, the fixture hands back models
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)

def with_shop_name(product: ProductInput, shops: Sequence[Any]) -> ProductInput:
    """
    Copy the owning shop's current name onto a product about to be written

    An unknown shop_id leaves shop_name empty.
    """
    shop_name = ""
    for shop in shops:
        if _field(shop, "id") == product.shop_id:
            shop_name = _field(shop, "name") or ""
            break
    return product.model_copy(update={"shop_name": shop_name})

class CatalogGateway:
    def __init__(self, backend: CatalogBackend):
        self.backend = backend

    @property
    def provider(self) -> str:
        return self.backend.provider

    async def search_products(self, query: str = "", filters: Optional[FilterSet] = None) -> Envelope:
        logger.debug("search_products query=%r filters=%s", query, filters)
        return await self.backend.search_products(query, filters)

    async def get_shops(self) -> Envelope:
        return await self.backend.get_shops()

    async def get_shop_by_id(self, shop_id: str) -> Envelope:
        logger.debug("get_shop_by_id %s", shop_id)
        return await self.backend.get_shop_by_id(shop_id)

    async def get_categories(self) -> Envelope:
        return await self.backend.get_categories()

    async def get_products(self) -> Envelope:
        return await self.backend.get_products()

    async def admin_login(self, email: str, password: str) -> Envelope:
        result = await self.backend.admin_login(email, password)
        logger.info("Admin login for %s: %s", email, "ok" if result.success else "rejected")
        return result

    async def open_session(self, email: str, password: str) -> Optional[AdminSession]:
        """Log in and return the session to pass to admin writes, or None if rejected"""
        result = await self.admin_login(email, password)
        if not result.success:
            return None
        return AdminSession.from_login(result.data)

    async def add_shop(self, shop: ShopInput, session: Optional[AdminSession] = None) -> Envelope:
        logger.debug("add_shop %s", shop.name)
        return await self.backend.add_shop(shop, session)

    async def update_shop(self, shop_id: str, shop: ShopInput, session: Optional[AdminSession] = None) -> Envelope:
        # Products keep their old shop_name after a rename
        logger.debug("update_shop %s", shop_id)
        return await self.backend.update_shop(shop_id, shop, session)

    async def delete_shop(self, shop_id: str, session: Optional[AdminSession] = None) -> Envelope:
        logger.debug("delete_shop %s", shop_id)
        return await self.backend.delete_shop(shop_id, session)

    async def add_product(self, product: ProductInput, session: Optional[AdminSession] = None) -> Envelope:
        shops = await self.backend.get_shops()
        if not shops.success:
            logger.warning("add_product %s aborted, shops unavailable: %s", product.name, shops.error)
            return shops
        product = with_shop_name(product, shops.data or [])
        logger.debug("add_product %s (shop %s)", product.name, product.shop_id)
        return await self.backend.add_product(product, session)

    async def update_product(
        self,
        product_id: str,
        product: ProductInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        shops = await self.backend.get_shops()
        if not shops.success:
            logger.warning("update_product %s aborted, shops unavailable: %s", product_id, shops.error)
            return shops
        product = with_shop_name(product, shops.data or [])
        logger.debug("update_product %s (shop %s)", product_id, product.shop_id)
        return await self.backend.update_product(product_id, product, session)

    async def delete_product(self, product_id: str, session: Optional[AdminSession] = None) -> Envelope:
        logger.debug("delete_product %s", product_id)
        return await self.backend.delete_product(product_id, session)

    async def get_dashboard_stats(self) -> Envelope:
        """Counts of shops, products and categories for the admin dashboard"""
        shops, products, categories = await asyncio.gather(
            self.backend.get_shops(),
            self.backend.get_products(),
            self.backend.get_categories(),
        )
        for result in (shops, products, categories):
            if not result.success:
                return result
        stats = DashboardStats(
            total_shops=len(shops.data or []),
            total_products=len(products.data or []),
            categories=len(categories.data or []),
        )
        return Envelope.ok(stats)

# Singleton instance
_catalog_gateway: Optional[CatalogGateway] = None

def get_catalog_gateway() -> CatalogGateway:
    """Get or create the gateway over the configured backend"""
    global _catalog_gateway
    if _catalog_gateway is None:
        _catalog_gateway = CatalogGateway(get_catalog_backend())
    return _catalog_gateway

def reset_catalog_gateway() -> None:
    global _catalog_gateway
    _catalog_gateway = None
