"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from autocheckin.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
reservations_ingested_total = Counter(
    'autocheckin_reservations_ingested_total',
    'Total number of reservation ingestion attempts',
    ['outcome']
)

retrieval_duration = Histogram(
    'autocheckin_retrieval_duration_seconds',
    'Time spent retrieving reservations from the airline',
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0]
)

checkins_scheduled_total = Counter(
    'autocheckin_checkins_scheduled_total',
    'Total number of check-in jobs scheduled',
    ['direction']
)

http_requests_total = Counter(
    'autocheckin_http_requests_total',
    'Total number of API requests',
    ['method', 'endpoint', 'status']
)

http_request_duration = Histogram(
    'autocheckin_http_request_duration_seconds',
    'Time spent processing API requests',
    ['endpoint']
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics endpoint.
    
    Args:
        app: Flask application instance
    """
    if not Config.ENABLE_METRICS:
        return
    
    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}
    
    logger.info("Prometheus metrics enabled at /metrics")


def track_request(endpoint: str):
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
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise
            
            status_code = response[1] if isinstance(response, tuple) else 200
            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            http_request_duration.labels(endpoint=endpoint).observe(time.time() - start_time)
            return response
        return wrapper
    return decorator


def track_ingestion(outcome: str) -> None:
    """
    Track the outcome of one ingestion attempt.
    
    Args:
        outcome: "created" or the failing error class name
    """
    try:
        if Config.ENABLE_METRICS:
            reservations_ingested_total.labels(outcome=outcome).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track ingestion metrics: {e}")


def track_retrieval_duration(seconds: float) -> None:
    try:
        if Config.ENABLE_METRICS:
            retrieval_duration.observe(seconds)
    except Exception as e:
        logger.debug(f"Failed to track retrieval metrics: {e}")


def track_checkin_scheduled(direction: str) -> None:
    try:
        if Config.ENABLE_METRICS:
            checkins_scheduled_total.labels(direction=direction).inc()
    except Exception as e:
        logger.debug(f"Failed to track scheduling metrics: {e}")
