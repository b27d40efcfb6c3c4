"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every router.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Explicit SQLAlchemy URL. Takes precedence over postgres_*.
        database_echo: Log every SQL statement (development only).

    The postgres_* values are used to build a DSN when DATABASE_URL is unset,
    which suits Docker Compose and local setups.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "UserHub"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    database_echo: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "userhub"

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL DSN from the postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
