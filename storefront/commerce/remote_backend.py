"""
Remote Catalog Backend Implementation
Implements CatalogBackend by forwarding every call to an HTTP catalog service
"""
from typing import Any, Dict, Optional
import logging
import httpx

from storefront.config import settings
from storefront.commerce.interface import CatalogBackend
from storefront.commerce.models import (
    AdminSession,
    Envelope,
    FilterSet,
    ProductInput,
    ShopInput,
)
from storefront.services.products import ALL

logger = logging.getLogger(__name__)

def _number(value: float) -> Any:
    return int(value) if float(value).is_integer() else value

def search_params(query: str = "", filters: Optional[FilterSet] = None) -> Dict[str, Any]:
    """Query-string parameters for a product search"""
    params: Dict[str, Any] = {}
    if query:
        params["q"] = query
    if filters is None:
        return params
    if filters.category and filters.category != ALL:
        params["category"] = filters.category
    if filters.shop and filters.shop != ALL:
        params["shop"] = filters.shop
    if filters.min_price is not None:
        params["minPrice"] = _number(filters.min_price)
    if filters.max_price is not None:
        params["maxPrice"] = _number(filters.max_price)
    return params

class RemoteBackend(CatalogBackend):
    """
    HTTP implementation of CatalogBackend

    The service's own {success, data, error} body is returned as-is.
    Nothing is retried, no timeout is applied and the body is not
    validated; transport and decoding errors reach the caller.
    """

    provider = "remote"

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        if base_url is None:
            base_url = f"{settings.BACKEND_URL}{settings.API_PREFIX}"
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=None)

    async def aclose(self) -> None:
        await self.client.aclose()

    def _auth_headers(self, session: Optional[AdminSession]) -> Dict[str, str]:
        if session is None:
            return {}
        return {"Authorization": f"Bearer {session.token}"}

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        response = await self.client.request(
            method,
            url,
            params=params,
            json=json,
            headers=self._auth_headers(session),
        )
        return Envelope.model_construct(**response.json())

    async def search_products(
        self,
        query: str = "",
        filters: Optional[FilterSet] = None
    ) -> Envelope:
        return await self._request("GET", "/products/search", params=search_params(query, filters))

    async def get_shops(self) -> Envelope:
        return await self._request("GET", "/shops")

    async def get_shop_by_id(self, shop_id: str) -> Envelope:
        return await self._request("GET", f"/shops/{shop_id}")

    async def get_categories(self) -> Envelope:
        return await self._request("GET", "/categories")

    async def get_products(self) -> Envelope:
        return await self._request("GET", "/products")

    async def admin_login(self, email: str, password: str) -> Envelope:
        return await self._request("POST", "/auth/login", json={"email": email, "password": password})

    async def add_shop(self, shop: ShopInput, session: Optional[AdminSession] = None) -> Envelope:
        return await self._request("POST", "/shops", json=shop.model_dump(), session=session)

    async def update_shop(
        self,
        shop_id: str,
        shop: ShopInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        return await self._request("PUT", f"/shops/{shop_id}", json=shop.model_dump(), session=session)

    async def delete_shop(self, shop_id: str, session: Optional[AdminSession] = None) -> Envelope:
        return await self._request("DELETE", f"/shops/{shop_id}", session=session)

    async def add_product(self, product: ProductInput, session: Optional[AdminSession] = None) -> Envelope:
        return await self._request("POST", "/products", json=product.model_dump(), session=session)

    async def update_product(
        self,
        product_id: str,
        product: ProductInput,
        session: Optional[AdminSession] = None
    ) -> Envelope:
        return await self._request("PUT", f"/products/{product_id}", json=product.model_dump(), session=session)

    async def delete_product(self, product_id: str, session: Optional[AdminSession] = None) -> Envelope:
        return await self._request("DELETE", f"/products/{product_id}", session=session)
