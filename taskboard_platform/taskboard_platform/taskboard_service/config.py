"""
Configuration management for the Taskboard service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


DEFAULT_JWT_SECRET = "change-this-secret-in-prod"


class Settings(BaseSettings):
    """Taskboard service configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None
    # Allows the built-in JWT secret; never enable in production
    DEV_MODE: bool = False

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./taskboard.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Token Configuration
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"

    # Password hashing (passlib scheme names, first one is used for new hashes)
    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET
