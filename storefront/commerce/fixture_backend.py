"""
Fixture Catalog Backend Implementation
Implements CatalogBackend over the static sample catalog, with an
artificial delay on every call to emulate network latency
"""
from typing import Awaitable, Callable, Dict, Iterable, List, Optional
import asyncio
import logging
import time
from pydantic import BaseModel

from storefront.config import fixture_delays
from storefront.commerce import mock_data
from storefront.commerce.interface import CatalogBackend
from storefront.commerce.models import (
    AdminSession,
    Category,
    Envelope,
    FilterSet,
    LoginResult,
    Product,
    ProductInput,
    Shop,
    ShopDetails,
    ShopInput,
)
from storefront.services.products import find_shop, products_for_shop, search_products

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

def _timestamp_id() -> str:
    """Milliseconds since the epoch, as a string"""
    return str(int(time.time() * 1000))

def _copies(records: Iterable[BaseModel]) -> list:
    return [record.model_copy(deep=True) for record in records]

class FixtureBackend(CatalogBackend):
    """
    Read-through backend over in-memory sample data

    Writes are simulated: they echo the submitted record back and leave
    the sample collections untouched, so a fresh read never sees them.
    """

    provider = "fixture"

    def __init__(
        self,
        shops: Optional[List[Shop]] = None,
        products: Optional[List[Product]] = None,
        categories: Optional[List[Category]] = None,
        admin_users: Optional[List[Dict[str, str]]] = None,
        delays: Optional[Dict[str, int]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.shops = shops if shops is not None else mock_data.SHOPS
        self.products = products if products is not None else mock_data.PRODUCTS
        self.categories = categories if categories is not None else mock_data.CATEGORIES
        self.admin_users = admin_users if admin_users is not None else mock_data.ADMIN_USERS
        self.delays = delays if delays is not None else fixture_delays()
        self._sleep = sleep

    async def _delay(self, kind: str) -> None:
        ms = self.delays.get(kind, 0)
        if ms > 0:
            await self._sleep(ms / 1000)

    async def search_products(
        self,
        query: str = "",
        filters: Optional[FilterSet] = None
    ) -> Envelope:
        await self._delay("search")
        return Envelope.ok(_copies(search_products(self.products, query, filters)))

    async def get_shops(self) -> Envelope:
        await self._delay("read")
        return Envelope.ok(_copies(self.shops))

    async def get_shop_by_id(self, shop_id: str) -> Envelope:
        await self._delay("read")
        shop = find_shop(self.shops, shop_id)
        details = ShopDetails(
            shop=shop.model_copy(deep=True) if shop is not None else None,
            products=_copies(products_for_shop(self.products, shop_id)),
        )
        return Envelope.ok(details)

    async def get_categories(self) -> Envelope:
        await self._delay("categories")
        return Envelope.ok(_copies(self.categories))

    async def get_products(self) -> Envelope:
        await self._delay("read")
        return Envelope.ok(_copies(self.products))

    async def admin_login(self, email: str, password: str) -> Envelope:
        await self._delay("login")
        for user in self.admin_users:
            if user["email"] == email and user["password"] == password:
                return Envelope.ok(LoginResult(token=f"mock_jwt_token_{_timestamp_id()}", email=user["email"]))
        logger.info("Rejected admin login for %s", email)
        return Envelope.fail(INVALID_CREDENTIALS)

    async def add_shop(self, shop: ShopInput, session: Optional[AdminSession] = None) -> Envelope:
        await self._delay("write")
        return Envelope.ok(Shop(id=_timestamp_id(), **shop.model_dump()))

    async def update_shop(
        self,
        shop_id: str,
        shop: ShopInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        await self._delay("write")
        return Envelope.ok(Shop(id=shop_id, **shop.model_dump()))

    async def delete_shop(self, shop_id: str, session: Optional[AdminSession] = None) -> Envelope:
        await self._delay("write")
        return Envelope.ok()

    async def add_product(self, product: ProductInput, session: Optional[AdminSession] = None) -> Envelope:
        await self._delay("write")
        return Envelope.ok(Product(id=_timestamp_id(), **product.model_dump()))

    async def update_product(
        self,
        product_id: str,
        product: ProductInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        await self._delay("write")
        return Envelope.ok(Product(id=product_id, **product.model_dump()))

    async def delete_product(self, product_id: str, session: Optional[AdminSession] = None) -> Envelope:
        await self._delay("write")
        return Envelope.ok()
