from pydantic_settings import BaseSettings
from functools import lru_cache
import os

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    app_name: str = "Resume Builder API"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = "INFO"

    # Database - supports both SQLite (local) and PostgreSQL (production)
    database_url: str = "sqlite+aiosqlite:///./resume_builder.db"

    # Security - MUST be set via environment variables in production
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:5173,http://localhost:5174"

    # AI/LLM Configuration
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float = 0.2
    gemini_max_output_tokens: int = 256

    class Config:
        env_file = ".env"
        extra = "ignore"
        # Make field names case-insensitive for environment variables
        case_sensitive = False

    def get_cors_origins(self) -> list:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def validate_startup(settings: Settings) -> None:
    """
    Check the settings the process cannot run without.

    Called once from the application lifespan so a missing Gemini key
    stops the server at boot instead of failing every AI request.
    """
    if not settings.gemini_api_key.strip():
        raise ConfigurationError("Missing GEMINI_API_KEY in environment")
    if not settings.gemini_model.strip():
        raise ConfigurationError("Missing GEMINI_MODEL in environment")
