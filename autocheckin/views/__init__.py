"""API views."""
from autocheckin.views.reservations import reservations_blueprint
from autocheckin.views.health import health_blueprint

__all__ = ["reservations_blueprint", "health_blueprint"]
