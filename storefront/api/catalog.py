"""
Catalog API Endpoints
Category enumeration for filters and admin dashboard counts
"""
from fastapi import APIRouter, Depends

from storefront.api.auth import require_session
from storefront.services.catalog import CatalogGateway, get_catalog_gateway

router = APIRouter(prefix="/api", tags=["catalog"])

@router.get("/categories")
async def list_categories(gateway: CatalogGateway = Depends(get_catalog_gateway)):
    result = await gateway.get_categories()
    return result.to_wire()

@router.get("/admin/stats", dependencies=[Depends(require_session)])
async def dashboard_stats(
    gateway: CatalogGateway = Depends(get_catalog_gateway)
):
    """Totals shown on the admin dashboard"""
    result = await gateway.get_dashboard_stats()
    return result.to_wire()
