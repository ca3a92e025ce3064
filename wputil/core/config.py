"""
Centralized configuration management.

- Database and cache credentials come from environment variables or `.env`
- Centralize configuration in this module
- Do not spread os.getenv calls all over the codebase
- Do not log secrets or environment values
"""
from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


def _split_csv(raw: str) -> frozenset[str]:
    return frozenset(x.strip() for x in raw.split(",") if x.strip())


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # --- Postgres ---
    PG_HOST: str = Field(default="localhost", description="PostgreSQL host")
    PG_PORT: int = Field(default=5432, description="PostgreSQL port")
    PG_DB: str = Field(default="wordpress", description="PostgreSQL database name")
    PG_USER: str = Field(default="wordpress", description="PostgreSQL user")
    PG_PASSWORD: str | None = Field(default=None, description="PostgreSQL password")
    PG_SSLMODE: str = Field(default="prefer", description="PostgreSQL SSL mode (require/prefer/disable)")
    PG_SCHEMA: str = Field(default="public", description="PostgreSQL search_path")
    PG_POOL_MIN: int = Field(default=1, description="Minimum pooled connections")
    PG_POOL_MAX: int = Field(default=10, description="Maximum pooled connections")

    # --- Redis/Valkey ---
    REDIS_HOST: str = Field(default="localhost", description="Redis host")
    REDIS_PORT: int = Field(default=6379, description="Redis port")
    REDIS_DB: int = Field(default=0, description="Redis logical database")
    REDIS_PASSWORD: str | None = Field(default=None, description="Redis password")
    REDIS_SSL: str = Field(default="false", description="Redis SSL enabled (true/false)")

    # --- Tables ---
    DB_TABLE_PREFIX: str = Field(default="wp_", description="Prefix prepended to every table name")
    POSTS_ID_COLUMN: str = Field(default="id", description="Primary key column of the posts table (\"ID\" for a quoted-identifier schema)")
    ALLOWED_TABLES: str = Field(default="", description="Tables get_var_from_table may read (comma-separated, empty = any)")
    ALLOWED_COLUMNS: str = Field(default="", description="Columns get_var_from_table may read (comma-separated, empty = any)")

    # --- Cache ---
    CACHE_NAMESPACE: str = Field(default="wputil:", description="Prefix for every cache key")
    SLUG_CACHE_TTL: int = Field(default=0, description="Seconds a slug lookup stays cached (0 = no expiry)")

    # --- Logging ---
    LOG_LEVEL: str = Field(default="INFO", description="Log level for the wputil logger")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def allowed_tables(self) -> frozenset[str]:
        return _split_csv(self.ALLOWED_TABLES)

    @property
    def allowed_columns(self) -> frozenset[str]:
        return _split_csv(self.ALLOWED_COLUMNS)

    @property
    def redis_ssl(self) -> bool:
        return self.REDIS_SSL.lower() in ("1", "true", "yes")


settings = Settings()
