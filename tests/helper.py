"""Helper methods for HTTP-level tests using the unified settings layer."""

import os

from fastapi import FastAPI

from src.config.settings import get_settings, reset_settings
from src.validators.password import reset_password_validator

VALID_PASSWORD = "AbTp9!fok"
VALIDATE_URL = "/api/v1/validate-password"


async def create_test_app() -> FastAPI:
    """
    Create a FastAPI test application from the current environment.

    Settings and the shared validator are rebuilt first, so overrides applied
    through the ``test_env_override`` fixture take effect.

    Returns:
        FastAPI: The app instance
    """
    os.environ.setdefault("ENVIRONMENT", "testing")

    reset_settings()
    reset_password_validator()
    settings = get_settings()
    if not settings.is_testing:
        raise RuntimeError("create_test_app must run with ENVIRONMENT=testing")

    from src.main import create_app
    return create_app()
