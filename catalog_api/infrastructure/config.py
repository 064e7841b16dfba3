"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "1.0.0"
    service_name: str = "catalog-api"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Authentication (empty means no token configured: writes are rejected)
    api_token: str = ""

    # Catalog
    seed_catalog: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
