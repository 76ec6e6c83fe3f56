from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Recipe Box API"

    # Database
    # Any SQLAlchemy URL works; SQLite is the local default.
    database_url: str = "sqlite:///./recipebox.db"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # Local development identity, used only when the identity provider
    # headers are absent (see recipebox.auth)
    dev_user_id: str = ""
    dev_user_name: str = "Dev User"
    dev_user_email: str = ""

    # Note: Authentication handled by the identity provider in front of the app

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
