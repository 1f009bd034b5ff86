# app/core/config.py
import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from .env"""

    # === Database ===
    DATABASE_URL: str = "postgresql+asyncpg://hr:hr@localhost:5432/hr"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO: bool = False

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure database URL is safe for current environment"""
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env == "production" and "localhost" in v:
            raise ValueError("Production environment cannot use localhost database!")
        return v

    # === API ===
    PROJECT_NAME: str = "HR Service"
    API_PREFIX: str = "/api/v1"

    # === CORS ===
    ALLOWED_ORIGINS: List[str] = ["*"]
    ALLOWED_METHODS: List[str] = ["*"]
    ALLOWED_HEADERS: List[str] = ["*"]

    # === Startup ===
    CREATE_TABLES_ON_STARTUP: bool = True
    SEED_SAMPLE_DATA: bool = False

    # === System ===
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Create a global settings instance
settings = Settings()
