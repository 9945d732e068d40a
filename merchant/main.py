"""
Mock Merchant Application

A simulated storefront backend. Owns the authoritative catalog, carts,
orders, roles and profiles behind the storefront client's HTTP contract.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .config import MerchantSettings, get_merchant_settings
from .database import CartDatabase, OrderDatabase, ProductDatabase, UserDatabase
from .routes import (
    products_router,
    cart_router,
    checkout_router,
    orders_router,
    account_router,
    auth_router,
)
from .security.auth import AuthenticationMiddleware, TokenIssuer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings: MerchantSettings = app.state.settings
    logger.info("Mock Merchant starting up...")
    logger.info(f"Catalog: {len(app.state.product_db.products)} products")
    logger.info(f"Admin users: {settings.admin_user_ids or 'none'}")
    yield
    logger.info("Mock Merchant shutting down...")


def create_app(settings: Optional[MerchantSettings] = None) -> FastAPI:
    """Build a merchant app with its own in-memory state"""
    settings = settings or get_merchant_settings()

    app = FastAPI(
        title="Mock Merchant",
        description="Simulated storefront backend",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.product_db = ProductDatabase(seed=settings.seed_catalog)
    app.state.cart_db = CartDatabase()
    app.state.order_db = OrderDatabase()
    app.state.user_db = UserDatabase(admin_users=settings.admin_user_ids)
    app.state.token_issuer = TokenIssuer(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Caller identity middleware
    app.add_middleware(AuthenticationMiddleware, issuer=app.state.token_issuer)

    # Include API routers
    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(orders_router)
    app.include_router(account_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "mock-merchant"}

    return app


if __name__ == "__main__":
    import uvicorn

    # Load environment variables
    load_dotenv()

    settings = get_merchant_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
    )
