"""
Product API Endpoints
Handles product search and admin product management via the catalog gateway
Works with any catalog backend (fixture or remote)
"""
from fastapi import APIRouter, Depends
from typing import Optional

from storefront.api.auth import require_session
from storefront.commerce.models import AdminSession, FilterSet, ProductInput
from storefront.services.catalog import CatalogGateway, get_catalog_gateway

router = APIRouter(prefix="/api/products", tags=["products"])

@router.get("/search")
async def search_products(
    q: str = "",
    category: str = "all",
    shop: str = "all",
    minPrice: Optional[float] = None,
    maxPrice: Optional[float] = None,
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    """
    Search products by free text, category, shop and price range
    Omitted price bounds impose no constraint
    """
    filters = FilterSet(category=category, shop=shop, min_price=minPrice, max_price=maxPrice)
    result = await gateway.search_products(q, filters)
    return result.to_wire()

@router.get("")
async def list_products(gateway: CatalogGateway = Depends(get_catalog_gateway)):
    """List every product"""
    result = await gateway.get_products()
    return result.to_wire()

@router.post("")
async def add_product(
    product: ProductInput,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.add_product(product, session)
    return result.to_wire()

@router.put("/{product_id}")
async def update_product(
    product_id: str,
    product: ProductInput,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.update_product(product_id, product, session)
    return result.to_wire()

@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.delete_product(product_id, session)
    return result.to_wire()
