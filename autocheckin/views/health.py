"""Health check endpoints."""
import logging
from flask import Blueprint, current_app, jsonify
from autocheckin.infrastructure.redis_client import RedisClientFactory

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """Basic health check endpoint."""
    return jsonify({
        "status": "healthy",
        "service": "autocheckin"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks dependencies).
    
    Redis is only checked when reservations are stored there.
    """
    checks = {"overall": False}
    
    if current_app.config.get("RESERVATION_STORAGE_TYPE", "redis").lower() == "redis":
        try:
            redis_client = RedisClientFactory.get_client()
            checks["redis"] = bool(redis_client and redis_client.ping())
        except Exception as e:
            _logger.error(f"Redis health check failed: {e}")
            checks["redis"] = False
    
    checks["overall"] = all(value for key, value in checks.items() if key != "overall")
    status_code = 200 if checks["overall"] else 503
    
    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """Liveness check endpoint (for Kubernetes)."""
    return jsonify({
        "status": "alive",
        "service": "autocheckin"
    }), 200
