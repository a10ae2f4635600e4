"""
Shared pytest configuration and fixtures for password validator tests.

This module provides test environment setup, fixtures, and utilities
used across unit, integration and contract tests.
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from dotenv import load_dotenv

from src.config.settings import get_settings, reset_settings
from src.validators.password import reset_password_validator

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

# Variables a developer's .env may set that would change rule behaviour under test
POLICY_VARIABLES = (
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_SPECIAL_CHARS",
    "PASSWORD_LENGTH_UNIT",
    "PASSWORD_REJECT_EMPTY",
    "PASSWORD_MAX_REQUEST_LENGTH",
)


def pytest_configure(config):
    """
    Configure pytest environment before tests run.

    This function:
    1. Loads test-specific environment variables from .env.test (if exists)
    2. Forces the testing environment and quiet logging
    3. Clears password policy overrides so tests see the default rule set
    """
    env_test_file = PROJECT_ROOT / ".env.test"
    if env_test_file.exists():
        load_dotenv(env_test_file, override=True)

    os.environ["ENVIRONMENT"] = "testing"
    os.environ.setdefault("LOG_LEVEL", "WARNING")
    os.environ.setdefault("LOG_CONSOLE_ENABLED", "false")
    os.environ.setdefault("LOG_FILE_ENABLED", "false")

    for name in POLICY_VARIABLES:
        os.environ.pop(name, None)

    reset_settings()
    reset_password_validator()


@pytest.fixture(autouse=True, scope="function")
def fresh_validator():
    """Give each test a validator built from the current settings."""
    settings = get_settings()
    if not settings.is_testing:
        raise RuntimeError("Tests must run in testing environment configuration")

    reset_password_validator()
    yield
    reset_password_validator()


@pytest.fixture(scope="function")
def test_env_override() -> Generator[dict, None, None]:
    """
    Fixture to temporarily override environment variables for a single test.

    Usage:
        def test_something(test_env_override):
            test_env_override["PASSWORD_REJECT_EMPTY"] = "true"
            # Your test code here
            # Environment will be restored after test
    """
    original_env = os.environ.copy()

    class EnvOverrides(dict):
        def __setitem__(self, key, value):  # type: ignore[override]
            super().__setitem__(key, value)
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = str(value)
            reset_settings()
            reset_password_validator()

    overrides: dict = EnvOverrides()

    yield overrides

    os.environ.clear()
    os.environ.update(original_env)
    reset_settings()
    reset_password_validator()


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/contract/* -> @pytest.mark.contract
    """
    for item in items:
        test_path = Path(item.fspath)

        if "unit" in test_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in test_path.parts:
            item.add_marker(pytest.mark.integration)
        elif "contract" in test_path.parts:
            item.add_marker(pytest.mark.contract)
