"""counterqueue settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_host: str = "0.0.0.0"
    api_port: int = 8020
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "COUNTERQUEUE_"
        extra = "ignore"


settings = Settings()
