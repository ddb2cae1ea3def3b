"""Celery application factory following Factory Pattern."""
import sys
import logging
from celery import Celery
from autocheckin.config.settings import Config

# Configure logging for Celery to use stdout
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)

# Check-in jobs wait up to a few weeks in the broker before their eta
CHECKIN_VISIBILITY_TIMEOUT = 60 * 60 * 24 * 45


def create_celery_app(app=None) -> Celery:
    """
    Create and configure Celery application.
    
    Args:
        app: Optional Flask app instance
        
    Returns:
        Configured Celery instance
    """
    celery = Celery(
        "autocheckin",
        broker=Config.CELERY_BROKER_URL,
        backend=Config.CELERY_RESULT_BACKEND,
        include=["autocheckin.tasks.notification_tasks"]
    )
    
    celery.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        task_track_started=True,
        task_time_limit=300,  # 5 minutes
        task_soft_time_limit=240,  # 4 minutes
        worker_prefetch_multiplier=1,
        task_acks_late=True,
        task_reject_on_worker_lost=True,
        task_ignore_result=True,
        broker_transport_options={"visibility_timeout": CHECKIN_VISIBILITY_TIMEOUT},
        worker_log_format='[%(asctime)s: %(levelname)s/%(processName)s] %(message)s',
        worker_task_log_format='[%(asctime)s: %(levelname)s/%(processName)s][%(task_name)s(%(task_id)s)] %(message)s',
        worker_hijack_root_logger=False,
    )
    
    # Update config from Flask app if provided
    if app:
        celery.conf.update(app.config)
    
    return celery


# Create default Celery instance
celery_app = create_celery_app()
