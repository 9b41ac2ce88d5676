"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from covid_api.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
api_requests_total = Counter(
    'covid_api_requests_total',
    'Total number of API requests',
    ['method', 'endpoint', 'status']
)

api_request_duration = Histogram(
    'covid_api_request_duration_seconds',
    'Time spent processing API requests',
    ['endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)

storage_operations_total = Counter(
    'covid_api_storage_operations_total',
    'Total number of repository operations',
    ['operation', 'status']
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics endpoint.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS):
        return

    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    logger.info("Prometheus metrics enabled at /metrics")


def track_api_request(endpoint: str):
    """
    Decorator to track API request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                response = f(*args, **kwargs)
            except Exception:
                api_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

            status_code = response[1] if isinstance(response, tuple) else 200
            api_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            api_request_duration.labels(endpoint=endpoint).observe(
                time.time() - start_time
            )
            return response

        return wrapper
    return decorator


def track_storage_operation(operation: str, success: bool):
    """
    Track repository operation metrics.

    Args:
        operation: Operation name (e.g., 'save_country', 'update_province')
        success: Whether the operation succeeded
    """
    status = "success" if success else "error"
    storage_operations_total.labels(operation=operation, status=status).inc()
