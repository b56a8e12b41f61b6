"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging import configure_logging
from modules.carts.routes import router as carts_router
from modules.notifications.routes import router as notifications_router
from modules.orders.routes import router as orders_router
from modules.payments.routes import router as payments_router
from modules.products.routes import router as products_router
from modules.users.routes import router as users_router

from .dependencies import ServiceContainer
from .errors import register_error_handlers
from .middleware.logging import RequestLoggingMiddleware
from .middleware.metrics import HTTPMetrics, MetricsMiddleware
from .routes import health, metrics

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s (%s) on %s:%s", settings.app_name, settings.env, settings.host, settings.port)
    yield
    app.state.container.close()
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; loaded from the
            environment when omitted.

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="E-commerce backend: users, catalog, carts, orders, payments and notifications",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = ServiceContainer(settings)
    app.state.metrics = HTTPMetrics()

    # Middleware added last runs first: CORS, then metrics, then request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(MetricsMiddleware, metrics=app.state.metrics, path_prefix=API_PREFIX)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(metrics.router, tags=["metrics"])
    app.include_router(users_router, prefix=f"{API_PREFIX}/users", tags=["users"])
    app.include_router(products_router, prefix=f"{API_PREFIX}/products", tags=["products"])
    app.include_router(carts_router, prefix=f"{API_PREFIX}/carts", tags=["carts"])
    app.include_router(orders_router, prefix=f"{API_PREFIX}/orders", tags=["orders"])
    app.include_router(payments_router, prefix=f"{API_PREFIX}/payments", tags=["payments"])
    app.include_router(notifications_router, prefix=f"{API_PREFIX}/notifications", tags=["notifications"])

    return app


# Application instance for uvicorn
app = create_app()
