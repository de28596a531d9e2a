"""
Quote Shipping Service

Reads and selects the shipping method of shopping carts (quotes).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .core.config import ENV_FILE, settings
from .core.errors import ShippingError
from .routes import products_router, cart_router, shipping_methods_router

# Load environment variables
load_dotenv(ENV_FILE)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Quote Shipping Service starting up...")
    logger.info(
        f"Carriers: flatrate={'on' if settings.flatrate.active else 'off'}, "
        f"freeshipping={'on' if settings.freeshipping.active else 'off'}"
    )
    yield
    logger.info("Quote Shipping Service shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Shipping method selection for shopping carts",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShippingError)
async def shipping_error_handler(request: Request, exc: ShippingError):
    """Render service errors with their kind"""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.kind.value}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
    )


# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(shipping_methods_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Quote Shipping API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "carts": "/api/carts",
            "shipping_methods": "/api/carts/{cart_id}/shipping-methods",
            "selected_shipping_method": "/api/carts/{cart_id}/selected-shipping-method",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "quote-shipping"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quote_shipping.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
