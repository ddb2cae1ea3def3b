"""Flask application factory for the reservation check-in service."""
import logging
import sys
from typing import Optional

from flask import Flask, jsonify

from autocheckin.config.settings import get_config


def create_app(config_class=None, service_container=None) -> Flask:
    """
    Create and configure Flask application.
    
    Args:
        config_class: Optional configuration class (for testing)
        service_container: Optional pre-built service container (for testing)
        
    Returns:
        Configured Flask application
    """
    from autocheckin.infrastructure.service_container import ServiceContainer
    from autocheckin.middleware.error_handler import init_error_handlers
    from autocheckin.middleware.monitoring import register_metrics_middleware
    from autocheckin.middleware.rate_limiter import create_rate_limiter
    from autocheckin.views import health_blueprint, reservations_blueprint
    
    config = config_class or get_config()
    _configure_logging(config.DEBUG)
    _logger = logging.getLogger(__name__)
    
    app = Flask(__name__)
    app.config.from_object(config)
    
    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")
    
    app.register_blueprint(reservations_blueprint)
    app.register_blueprint(health_blueprint)
    
    @app.route("/", methods=["GET"])
    def root():
        """Root endpoint."""
        return jsonify({
            "status": "ok",
            "service": "autocheckin",
            "message": "Service is running"
        }), 200
    
    app.config['limiter'] = create_rate_limiter(app)
    if app.config.get("ENABLE_METRICS"):
        register_metrics_middleware(app)
    init_error_handlers(app)
    
    # Collaborators are created lazily on first use
    app.config['service_container'] = service_container or ServiceContainer(config)
    
    _logger.info(f"Application ready - routes: {[str(rule) for rule in app.url_map.iter_rules()]}")
    return app


def _configure_logging(debug: Optional[bool] = False) -> None:
    """Configure application logging to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )
