"""
Configuration settings for the Fitness Coach backend.
Uses pydantic-settings for type-safe environment variable management.
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Info
    app_name: str = "Fitness Coach API"
    app_version: str = "1.0.0"
    git_commit: Optional[str] = None  # Git commit hash from environment
    build_date: Optional[str] = None  # Build timestamp from environment
    debug: bool = False
    log_level: str = "INFO"

    # Dev server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS - a single origin value stamped on every response
    cors_allow_origin: str = Field(
        default="*",
        validation_alias="CORS_ALLOW_ORIGIN"
    )

    # OpenAI
    openai_api_key: Optional[str] = None
    # Optional model id from env (e.g., model_id=gpt-4o)
    model_id: Optional[str] = None
    llm_timeout_seconds: float = 60.0
    llm_max_tool_steps: int = 6

    # Agent used by /api/chat when the request names none
    default_agent: str = "bodyAgent"

    # Pydantic v2 settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars so unexpected keys don't crash
    )


# Global settings instance
settings = Settings()
