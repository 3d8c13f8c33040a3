"""Application Configuration

Type-safe configuration using Pydantic Settings for environment variable handling.
Deployment metadata (service name, version, environment) lives here and nowhere
else; the health domain receives it as an immutable ServiceInfo value.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # =============================================================================
    # APPLICATION
    # =============================================================================

    app_name: str = Field(default="Testing App", min_length=1, alias="APP_NAME")
    app_version: str = Field(default="1.0.0", min_length=1, alias="APP_VERSION")
    app_description: str = Field(default="Health check service", alias="APP_DESCRIPTION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # =============================================================================
    # API CONFIGURATION
    # =============================================================================

    api_version: str = Field(default="1.0", alias="API_VERSION")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8080, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # CORS Settings
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    cors_credentials: bool = Field(default=True, alias="CORS_CREDENTIALS")
    cors_methods: str = Field(default="GET,POST,PUT,DELETE,PATCH,OPTIONS", alias="CORS_METHODS")
    cors_headers: str = Field(default="*", alias="CORS_HEADERS")
    cors_max_age: int = Field(default=3600, alias="CORS_MAX_AGE")

    # =============================================================================
    # HEALTH REPORTING
    # =============================================================================

    health_uptime: str = Field(default="Available since startup", min_length=1, alias="HEALTH_UPTIME")
    health_ok_message: str = Field(default="All systems operational", min_length=1, alias="HEALTH_OK_MESSAGE")

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.model_validate({})


settings = get_settings()
