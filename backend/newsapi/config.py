"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Driver-less URLs as handed out by most Postgres hosts
_PLAIN_POSTGRES_SCHEMES = ("postgres://", "postgresql://")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    read_buffer_size: int = 1024
    max_connections: int = 64

    # PostgreSQL
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 5
    db_pool_timeout: float = 30.0

    # IMDb scraper
    imdb_url: str = "https://www.imdb.com/chart/top/"
    imdb_title_selector: str = "h3.ipc-title__text"
    imdb_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    scrape_limit: int = 10
    scrape_timeout_seconds: float = 30.0

    @property
    def async_database_url(self) -> str:
        """Database URL with an async driver, for create_async_engine."""
        for scheme in _PLAIN_POSTGRES_SCHEMES:
            if self.database_url.startswith(scheme):
                return "postgresql+asyncpg://" + self.database_url[len(scheme):]
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite (used in tests)."""
        return self.async_database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
