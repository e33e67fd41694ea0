# jobly/core/config.py
import os
from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "Jobly"
    env: str = "local"

    # Database (PostgreSQL in production, e.g. postgresql+psycopg://user:pw@host/jobly)
    DATABASE_URL: str = "sqlite:///./jobly.db"
    DB_ECHO: bool = False

    # =========================
    # Auth
    # =========================
    JWT_SECRET_KEY: str = "dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES_MINUTES: int = 60

    # Single configured admin; /auth/token issues admin tokens for these credentials only
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"

    # Comma separated list, e.g. "http://localhost:3000,https://jobly.example.com"
    CORS_ALLOW_ORIGINS: str | None = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
