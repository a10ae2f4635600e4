"""
FastAPI application factory for the password validation service.

Creates and configures the FastAPI application with all routers and middleware.
"""

import logging
from contextlib import asynccontextmanager

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.password import router as password_router
from src.api.schemas import HealthResponse
from src.config.logging import setup_logging
from src.config.settings import get_settings
from src.lib.health import build_health_payload
from src.lib.metrics import metrics_endpoint
from src.middleware.error_handler import (
    ErrorHandlerMiddleware,
    http_exception_handler,
    request_validation_exception_handler,
)
from src.middleware.request_logging import RequestLoggingMiddleware
from src.middleware.validation_metrics import ValidationMetricsMiddleware
from src.validators.password import get_password_validator

API_PREFIX = "/api/v1"

DESCRIPTION = """
Validates passwords against a fixed set of security rules:

- At least 9 characters (configurable)
- At least one digit
- At least one lowercase letter
- At least one uppercase letter
- At least one special character (`!@#$%^&*()-+` by default)
- No repeated characters and no whitespace
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting password validation API")

    # Build the shared rule set now so misconfiguration fails at startup
    validator = get_password_validator()
    logger.info(f"Password validation API ready with {len(validator.rules)} rules")
    yield

    logger.info("Password validation API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    settings = get_settings()
    debug = settings.app.ENVIRONMENT in ("development", "testing")

    app = FastAPI(
        title="Password Validator API",
        description=DESCRIPTION,
        version=settings.app.APP_VERSION,
        lifespan=lifespan,
        debug=debug,
    )

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Add middleware in reverse order (last added is first executed)
    # 1. Validation metrics (closest to the routes, covers body decoding)
    app.add_middleware(ValidationMetricsMiddleware, paths=(f"{API_PREFIX}/validate-password",))

    # 2. Error handling middleware
    app.add_middleware(ErrorHandlerMiddleware)

    # 3. Request logging, sees the status produced by the error handler
    app.add_middleware(RequestLoggingMiddleware)

    # 4. CORS middleware (outermost)
    cors_origins = ["*"] if debug else settings.app.CORS_ORIGINS.split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(password_router, prefix=API_PREFIX)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check():
        return build_health_payload()

    if settings.metrics.METRICS_ENABLED:
        app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False)

    return app


# Create the app instance
app = create_app()

if __name__ == "__main__":
    import uvicorn
    app_settings = get_settings().app
    uvicorn.run(app, host=app_settings.HOST, port=app_settings.PORT)
