"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""
    
    # Load environment variables
    load_dotenv()
    
    # Southwest reservation retrieval
    SOUTHWEST_API_BASE_URL: str = os.getenv(
        "SOUTHWEST_API_BASE_URL", "https://mobile.southwest.com/api/mobile-air-booking"
    )
    SOUTHWEST_API_KEY: Optional[str] = os.getenv("SOUTHWEST_API_KEY")
    RETRIEVAL_TIMEOUT_SECONDS: int = int(os.getenv("RETRIEVAL_TIMEOUT_SECONDS", "10"))
    
    # Collaborator selection
    RESERVATION_CLIENT: str = os.getenv("RESERVATION_CLIENT", "southwest")
    RESERVATION_STORAGE_TYPE: str = os.getenv("RESERVATION_STORAGE_TYPE", "redis")
    NOTIFIER_TYPE: str = os.getenv("NOTIFIER_TYPE", "celery")
    
    # Check-in timing policy (owned by the execution worker)
    CHECKIN_OPEN_HOURS: int = int(os.getenv("CHECKIN_OPEN_HOURS", "24"))
    CHECKIN_OFFSET_SECONDS: int = int(os.getenv("CHECKIN_OFFSET_SECONDS", "0"))
    CHECKIN_TASK_NAME: str = os.getenv("CHECKIN_TASK_NAME", "autocheckin.execute_checkin")
    
    # WhatsApp API Configuration (reservation notifications)
    ACCESS_TOKEN: Optional[str] = os.getenv("ACCESS_TOKEN")
    PHONE_NUMBER_ID: Optional[str] = os.getenv("PHONE_NUMBER_ID")
    VERSION: str = os.getenv("VERSION", "v18.0")
    
    # Redis Configuration
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    
    # Celery Configuration
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")
    
    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    
    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"
    
    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    
    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = []
        if cls.RESERVATION_CLIENT.lower() == "southwest":
            required_vars.append(("SOUTHWEST_API_KEY", cls.SOUTHWEST_API_KEY))
        if cls.NOTIFIER_TYPE.lower() in ("celery", "sync"):
            required_vars.append(("ACCESS_TOKEN", cls.ACCESS_TOKEN))
            required_vars.append(("PHONE_NUMBER_ID", cls.PHONE_NUMBER_ID))
        
        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    RESERVATION_CLIENT = "mock"
    RESERVATION_STORAGE_TYPE = "memory"
    NOTIFIER_TYPE = "none"
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()
    
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    
    return config_map.get(env, DevelopmentConfig)
