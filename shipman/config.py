import os

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _libpq_url(driver: str) -> str:
    """DSN assembled from the libpq PG* variables, for deployments that set no DATABASE_URL."""
    user = os.environ.get("PGUSER", "shipman")
    password = os.environ.get("PGPASSWORD")
    host = os.environ.get("PGHOST", "localhost")
    port = os.environ.get("PGPORT", "5432")
    database = os.environ.get("PGDATABASE", "shipman")
    credentials = f"{user}:{password}" if password else user
    return f"{driver}://{credentials}@{host}:{port}/{database}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database; empty means "derive from PG*"
    database_url: str = ""
    database_url_sync: str = ""

    # Connection pool: 5 idle + 10 overflow = 15 open connections
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_recycle_seconds: int = 7200
    db_pool_timeout_seconds: float = 30.0

    # Deadlines (seconds)
    statement_timeout_seconds: float = 30.0
    health_check_timeout_seconds: float = 5.0

    # Application
    environment: str = "development"
    http_addr: str = ""
    http_host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    # Rate limiting
    rate_limit_default: str = "120/minute"

    @model_validator(mode="after")
    def _fill_derived(self) -> "Settings":
        if not self.database_url:
            self.database_url = _libpq_url("postgresql+asyncpg")
        if not self.database_url_sync:
            self.database_url_sync = _libpq_url("postgresql")
        if self.http_addr:
            host, _, port = self.http_addr.rpartition(":")
            self.http_host = host or self.http_host
            self.port = int(port)
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
