"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./wishlist.db")

    # Redis (Celery broker/result backend)
    redis_url: str = Field(default="redis://localhost:6379/0")
    celery_task_always_eager: bool = Field(default=False)

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # Wishlists
    price_history_limit: int = Field(default=30, ge=2)
    share_link_max_attempts: int = Field(default=100, ge=1)

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
