"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask import request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from autocheckin.config.settings import Config


def get_limiter_key() -> str:
    """
    Rate limit key: the confirmation number being looked up, else the client IP.
    """
    if request.method == "POST" and request.is_json:
        body = request.get_json(silent=True) or {}
        confirmation_number = body.get("confirmation_number") if isinstance(body, dict) else None
        if confirmation_number:
            return f"rate_limit:reservation:{str(confirmation_number).upper()}"
    return get_remote_address()


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.
    
    Args:
        app: Flask application instance
        
    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED", Config.RATELIMIT_ENABLED):
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )
    
    try:
        return Limiter(
            get_limiter_key,
            app=app,
            default_limits=["500 per hour", "50 per minute"],
            storage_uri=Config.RATELIMIT_STORAGE_URL,
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter: {e}, using memory storage")
        return Limiter(
            get_limiter_key,
            app=app,
            default_limits=["500 per hour", "50 per minute"],
            storage_uri="memory://"
        )
