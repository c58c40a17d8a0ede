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
        debug: Enable debug mode (interactive docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: Explicit SQLAlchemy URL. Wins over the postgres_* values.
        database_echo: Log every SQL statement.
        create_schema_on_startup: Create missing tables when the app starts.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Limit applied to every route.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Blog API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: Optional[str] = None
    database_echo: bool = False
    create_schema_on_startup: bool = True
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "blog"

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. PostgreSQL URL built from the postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
