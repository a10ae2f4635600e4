"""
Prometheus metrics for password validation.

Metrics are fed from validation results by the HTTP layer; the validation
engine itself never touches them.
"""

import time
from contextlib import contextmanager
from typing import Iterable, Iterator

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

# ============= METRICS DEFINITIONS =============

validation_requests_total = Counter(
    'password_validation_requests_total',
    'Total number of password validation requests',
    ['result']
)

validation_errors_total = Counter(
    'password_validation_errors_total',
    'Total number of validation errors by rule',
    ['rule']
)

validation_duration_seconds = Histogram(
    'password_validation_duration_seconds',
    'Duration of password validation requests in seconds'
)

validation_in_progress = Gauge(
    'password_validation_in_progress',
    'Number of password validations currently in progress'
)

# First match wins. Repeat and whitespace messages also contain "characters"
_RULE_KEYWORDS = (
    ("repeated", "no_duplicates"),
    ("whitespace", "no_whitespace"),
    ("special character", "special_char"),
    ("characters", "min_length"),
    ("digit", "digit"),
    ("lowercase", "lowercase"),
    ("uppercase", "uppercase"),
)

# ============= METRIC HELPERS =============


def classify_violation(message: str) -> str:
    """Map a violation message to the rule label used in metrics."""
    for keyword, rule in _RULE_KEYWORDS:
        if keyword in message:
            return rule
    return "unknown"


def record_validation(is_valid: bool, errors: Iterable[str]) -> None:
    """Count a validation outcome and each violation it carried."""
    if is_valid:
        validation_requests_total.labels(result="valid").inc()
        return

    validation_requests_total.labels(result="invalid").inc()
    for message in errors:
        validation_errors_total.labels(rule=classify_violation(message)).inc()


@contextmanager
def track_validation_request() -> Iterator[None]:
    """Track in-flight count and latency of one validation request."""
    start_time = time.perf_counter()
    validation_in_progress.inc()
    try:
        yield
    finally:
        validation_in_progress.dec()
        validation_duration_seconds.observe(time.perf_counter() - start_time)

# ============= METRICS ENDPOINT =============


async def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint"""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
