from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Shop Floor Progress API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # MongoDB settings
    mongodb_url: str = "mongodb://localhost:27017/shopfloor"
    mongodb_database: str = "shopfloor"

    # CORS settings
    cors_origins: str = "http://localhost:3000"

    # Manager dashboard
    upcoming_shipments_limit: int = 5

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
