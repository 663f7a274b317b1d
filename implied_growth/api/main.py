"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from implied_growth.api.errors import request_validation_handler
from implied_growth.api.middleware import RequestIDMiddleware, MetricsMiddleware
from implied_growth.api.v1 import growth, pricing
from implied_growth.infrastructure.observability.logging import setup_logging
from implied_growth.config import settings

# Setup structured logging
setup_logging()


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Implied Growth Calculator",
        description="Implied dividend growth and cash-flow projection under the constant-growth model",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Every 422 carries {"detail": {"errors": {field: message}}}
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "model_variant": settings.model_variant.value,
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(growth.router, prefix="/v1", tags=["growth"])
    app.include_router(pricing.router, prefix="/v1", tags=["pricing"])

    return app


app = create_app()
