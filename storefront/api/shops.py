"""
Shop API Endpoints
Shop listing, shop details and admin shop management
"""
from fastapi import APIRouter, Depends

from storefront.api.auth import require_session
from storefront.commerce.models import AdminSession, ShopInput
from storefront.services.catalog import CatalogGateway, get_catalog_gateway

router = APIRouter(prefix="/api/shops", tags=["shops"])

@router.get("")
async def list_shops(gateway: CatalogGateway = Depends(get_catalog_gateway)):
    result = await gateway.get_shops()
    return result.to_wire()

@router.get("/{shop_id}")
async def get_shop(shop_id: str, gateway: CatalogGateway = Depends(get_catalog_gateway)):
    """
    Get shop details and its products
    An unknown id answers success with no shop and an empty product list
    """
    result = await gateway.get_shop_by_id(shop_id)
    return result.to_wire()

@router.post("")
async def add_shop(
    shop: ShopInput,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.add_shop(shop, session)
    return result.to_wire()

@router.put("/{shop_id}")
async def update_shop(
    shop_id: str,
    shop: ShopInput,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.update_shop(shop_id, shop, session)
    return result.to_wire()

@router.delete("/{shop_id}")
async def delete_shop(
    shop_id: str,
    session: AdminSession = Depends(require_session),
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    result = await gateway.delete_shop(shop_id, session)
    return result.to_wire()
