from datetime import datetime, timezone
from typing import Any, Dict

from src.config.settings import get_settings


APP_START_TIME = datetime.now(timezone.utc)


def get_uptime_seconds() -> float:
    return (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()


def get_start_time_iso() -> str:
    return APP_START_TIME.isoformat()


def build_health_payload() -> Dict[str, Any]:
    """Static liveness payload; the service has no downstream dependencies to probe."""
    app_settings = get_settings().app
    return {
        "status": "healthy",
        "service": app_settings.APP_NAME,
        "version": app_settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(get_uptime_seconds(), 2),
        "started_at": get_start_time_iso(),
    }
