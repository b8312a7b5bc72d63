import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration sourced from environment variables."""

    app_title: str = "NewsVerify Content Verification Service"
    app_description: str = "Fingerprint cache lookup with heuristic fallback for news content"
    version: str = "1.0.0"

    store_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    redis_key_prefix: str = "newsverify"
    redis_socket_timeout: float = 5.0
    verified_articles_path: str | None = None

    # When True a store outage during lookup fails the request instead of
    # falling through to the heuristic classifier.
    strict_cache_lookup: bool = False

    cors_origins: str = "*"
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "case_sensitive": False,
    }

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_log_level(self) -> int:
        """Root log level for the service"""
        return logging.DEBUG if self.debug else logging.INFO


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()
