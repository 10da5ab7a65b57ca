"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, claims, comments, friends, items, price_alerts, wishlists
from src.config import get_settings
from src.logging_config import configure_logging
from src.services.errors import WishlistError

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info("Starting wishlist API (%s)", settings.environment)
    yield


app = FastAPI(
    title="Wishlist API",
    description="Shareable wishlists with claims, purchase proofs and price alerts",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(WishlistError)
async def wishlist_error_handler(request: Request, exc: WishlistError):
    """Map domain errors to JSON error responses."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Register routers
app.include_router(auth.router)
app.include_router(wishlists.router)
app.include_router(items.router)
app.include_router(claims.router)
app.include_router(price_alerts.router)
app.include_router(friends.router)
app.include_router(comments.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
