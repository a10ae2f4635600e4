"""Contract tests for GET /metrics"""

import pytest
from httpx import AsyncClient, ASGITransport

from tests.helper import create_test_app, VALIDATE_URL


@pytest.mark.asyncio
async def test_metrics_exposes_validation_series():
    """After a validation, every password metric family is exported."""
    app = await create_test_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post(VALIDATE_URL, json={"password": "aa"})
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        text = response.text
        assert 'password_validation_requests_total{result="invalid"}' in text
        assert 'password_validation_errors_total{rule="no_duplicates"}' in text
        assert "password_validation_duration_seconds_bucket" in text
        assert "password_validation_in_progress" in text


@pytest.mark.asyncio
async def test_metrics_can_be_disabled(test_env_override):
    """METRICS_ENABLED=false removes the endpoint."""
    test_env_override["METRICS_ENABLED"] = "false"
    app = await create_test_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/metrics")

        assert response.status_code == 404
