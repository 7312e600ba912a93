"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./events.db"
    SQL_ECHO: bool = False
    AUTH_SECRET: str = "insecure-development-secret-change-me-0123456789"
    AUTH_ALGORITHM: str = "HS256"
    AUTH_TOKEN_EXPIRES_MINUTES: int = 60
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
