"""
Consumer Service configuration
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the consumer service directory path
CONSUMER_SERVICE_DIR = Path(__file__).parent.parent.parent
ENV_FILE = CONSUMER_SERVICE_DIR / ".env"


class ConsumerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Consumer Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    SERVICE_NAME: str = "consumer-service"

    # Upstream supplier service
    SUPPLIER_SERVICE_URL: str = "http://localhost:8080"
    SUPPLIER_REQUEST_TIMEOUT: float = 10.0  # seconds

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_HEADERS: List[str] = ["*"]


# Create a singleton instance
_settings_instance = None


def get_settings() -> ConsumerSettings:
    """Get settings singleton instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = ConsumerSettings()
    return _settings_instance
