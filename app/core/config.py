"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Pitchside - football player and scout profiles"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Pitchside team"]
    PROJECT_URL: str = "https://github.com/pitchside/pitchside-api"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Full SQLAlchemy URL, takes precedence over the parts above (e.g. "sqlite://")
    DATABASE_URI: Optional[str] = None

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Media storage
    MEDIA_ROOT: str = "media"
    MEDIA_BASE_URL: str = "http://localhost:8000/media"
    MEDIA_BUCKET: str = "avatars"

    # Directory listings
    DIRECTORY_DEFAULT_LIMIT: int = 10
    DIRECTORY_MAX_LIMIT: int = 100

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy connection URL."""
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
