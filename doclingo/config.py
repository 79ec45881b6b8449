"""
Library configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Translation settings loaded from environment."""

    # ==========================================================================
    # Languages
    # ==========================================================================

    default_language: str = "en"

    # ==========================================================================
    # Engine
    # ==========================================================================

    max_depth: int = 10
    max_concurrency: int = 8  # <= 0 means unbounded

    # 0 keeps the cache unbounded / never expiring
    cache_max_size: int = 0
    cache_ttl_seconds: float = 0.0

    # ==========================================================================
    # Providers
    # ==========================================================================

    # Which backend to use: "google" or "llm"
    translation_provider: str = "google"

    # Google Translate (public web endpoint)
    google_translate_url: str = "https://translate.googleapis.com/translate_a/single"
    google_timeout_seconds: float = 10.0
    google_max_retries: int = 3

    # LLM via DSPy. Gemini accepts either google_api_key or gemini_api_key.
    # All variables carry the DOCLINGO_ prefix, e.g. DOCLINGO_GEMINI_API_KEY.
    llm_provider: str = "gemini"
    llm_model: str = ""
    google_api_key: str = ""
    gemini_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # ==========================================================================
    # Logging
    # ==========================================================================

    log_level: str = "INFO"

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def concurrency_limit(self) -> int | None:
        return self.max_concurrency if self.max_concurrency > 0 else None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "DOCLINGO_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a basic log format for command-line entry points."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
