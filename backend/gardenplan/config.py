"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    gemini_api_key: str = ""
    gardenplan_env: str = "development"
    gardenplan_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    plan_max_tokens: int = 4096

    # Image generation
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    imagen_model: str = "imagen-4.0-generate-001"
    image_edit_model: str = "gemini-2.5-flash-image"
    request_timeout_s: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
