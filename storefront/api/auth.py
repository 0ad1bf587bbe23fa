"""
Admin Authentication API Endpoints
Login and the bearer credential required by admin routes
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from typing import Optional

from storefront.commerce.models import AdminSession
from storefront.services.catalog import CatalogGateway, get_catalog_gateway

router = APIRouter(prefix="/api/auth", tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)

class LoginRequest(BaseModel):
    email: str
    password: str

def require_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> AdminSession:
    """
    Admin routes need a bearer token. The token is passed on to the
    catalog backend untouched; it is not verified here.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return AdminSession(token=credentials.credentials)

@router.post("/login")
async def login(request: LoginRequest, gateway: CatalogGateway = Depends(get_catalog_gateway)):
    """Exchange admin credentials for a session token"""
    result = await gateway.admin_login(request.email, request.password)
    if not result.success:
        return JSONResponse(status_code=401, content=result.to_wire())
    return result.to_wire()
