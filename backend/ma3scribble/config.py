"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # HTTP
    http_api_host: str = "0.0.0.0"
    http_api_port: int = 8080
    cors_origins: list[str] = ["*"]

    # Tracing
    potrace_filename: str = "potrace"
    trace_timeout_seconds: float = 120.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
