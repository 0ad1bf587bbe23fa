"""
Sector-17 Storefront - FastAPI Backend
Shop and product catalog with search, filters and admin management
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from storefront.config import settings, get_provider_info
from storefront.commerce.factory import close_catalog_backend
from storefront.commerce.models import Envelope
from storefront.api.auth import router as auth_router
from storefront.api.catalog import router as catalog_router
from storefront.api.products import router as products_router
from storefront.api.shops import router as shops_router
from storefront.services.catalog import reset_catalog_gateway

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # The remote backend keeps an HTTP connection pool open until shutdown
    reset_catalog_gateway()
    await close_catalog_backend()

app = FastAPI(
    title="Sector-17 Storefront API",
    description="Browsable directory of shops and products in Sector-17, Chandigarh",
    version="1.0.0",
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(products_router)
app.include_router(shops_router)
app.include_router(catalog_router)
app.include_router(auth_router)

# Errors leave the API as failure envelopes, like every other response
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=Envelope.fail(str(exc.detail)).to_wire(),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
    return JSONResponse(
        status_code=422,
        content=Envelope.fail(f"Invalid request: {fields}").to_wire(),
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=Envelope.fail("Internal server error").to_wire(),
    )

@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "status": "ready",
        "features": [
            "Product search with category, shop and price filters",
            "Shop details",
            "Admin shop and product management",
        ],
        "providers": get_provider_info()
    }

@app.get("/health")
async def health_check():
    """Health check endpoint - simple and fast"""
    return {
        "status": "healthy",
        "catalog_backend": settings.CATALOG_BACKEND.value,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
