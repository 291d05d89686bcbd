"""
Configuration management for the FastAPI application.
Uses Pydantic Settings for environment variable management.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Antique Store API"
    API_VERSION: str = "0.1.0"
    API_DESCRIPTION: str = "Backend API for the antique store catalog, gallery and CMS"

    # CORS Configuration
    # Logged at startup; the middleware itself allows all origins
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Database Configuration
    # Empty means in-memory SQLite (development only)
    DATABASE_URL: str = ""
    DATABASE_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = False

    # Store settings fallbacks applied when the settings row is first written
    DEFAULT_STORE_NAME: str = "Antique Store"
    DEFAULT_CONTACT_EMAIL: str = "info@antiquestore.com"

    # Rate limit for public contact form submissions (slowapi syntax)
    CONTACT_FORM_RATE_LIMIT: str = "5/minute"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env that aren't defined in Settings


# Global settings instance
settings = Settings()
