"""
Translation backends.

All providers implement TranslationProvider and raise ProviderError on
failure; the engine never sees backend-specific exceptions.
"""

from __future__ import annotations

from doclingo.config import Settings
from doclingo.providers.base import ProviderError, TranslationProvider
from doclingo.providers.google import GoogleTranslateProvider


def create_provider(settings: Settings) -> TranslationProvider:
    """Build the provider named by ``settings.translation_provider``."""
    name = settings.translation_provider.lower()

    if name == "google":
        return GoogleTranslateProvider(
            url=settings.google_translate_url,
            timeout=settings.google_timeout_seconds,
            max_retries=settings.google_max_retries,
        )

    if name == "llm":
        # DSPy is heavy to import; only load it when selected
        from doclingo.providers.llm import LLMTranslationProvider, get_lm

        return LLMTranslationProvider(get_lm(settings))

    raise ValueError(f"Unknown translation provider: {settings.translation_provider}")


__all__ = [
    "ProviderError",
    "TranslationProvider",
    "GoogleTranslateProvider",
    "create_provider",
]
