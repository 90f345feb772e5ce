"""
E-commerce Cart API - Main FastAPI Application

Single entry point for cart, item and user routes.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecommerce import __version__
from ecommerce.logging import get_logger
from ecommerce.routers import cart_router, items_router, users_router
from ecommerce.routers.deps import init_repositories, reset_repositories

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    await init_repositories()
    yield
    # Shutdown
    reset_repositories()
    logger.info("Repositories released")


app = FastAPI(
    title="E-commerce Cart API",
    description="Cart management for the e-commerce backend",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router)
app.include_router(items_router)
app.include_router(users_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "ecommerce-cart"}
