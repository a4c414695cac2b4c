"""Products API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductsApiError -> flat JSON bodies ({"message"} / {"errors"})
    - CORS restricted to the single configured frontend origin (from settings)
    - Database initialized on startup via lifespan; a failed connection is logged,
      not fatal

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Middleware order (outermost first): request logging -> origin gate -> CORS
    - Swagger UI served by FastAPI at /docs from the route metadata
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from products_api.api.error_handlers import register_error_handlers
from products_api.api.middleware import OriginGateMiddleware, RequestLoggingMiddleware
from products_api.api.routes import health, products
from products_api.config import get_settings
from products_api.infrastructure.database import close_db, connect_db, init_db
from products_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await connect_db(auto_create=settings.database_auto_create)
    logger.info("Products API started")
    yield
    await close_db()
    logger.info("Products API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="API docs for products",
    openapi_tags=[
        {"name": "Products", "description": "API operations related to products"},
    ],
    docs_url="/docs",
    lifespan=lifespan,
)

# Added innermost first: CORS, then the origin gate, then access logging
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(OriginGateMiddleware, allowed_origin=settings.frontend_url)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(products.router)

register_error_handlers(app)
