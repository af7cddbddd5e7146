"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Storage
    products_file: str = "data/products.json"

    # Admin authentication
    admin_username: str = "admin"
    admin_password: str = "admin123"
    session_secret: str = "dev-session-secret-change-in-production"
    session_ttl_seconds: int = 60 * 60 * 24
    session_cookie_name: str = "adminAuth"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
