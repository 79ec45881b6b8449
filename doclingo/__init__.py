"""
doclingo - cache-backed translation of JSON-shaped documents.

Design:
1. Walk any document (dicts, lists, scalars) and translate only the
   strings that read like natural language
2. Leave IDs, URLs, numbers, dates and technical keys alone
3. Cache every translation by (source, target, text)
4. Never fail a whole document because one string could not be translated

Usage:
    from doclingo import translate, translate_batch

    # Whole API response
    forecast_hi = await translate(forecast, target="hi")

    # Batch
    labels_ta = await translate_batch(["Sunny", "Cloudy"], target="ta")

    # Explicit engine with your own provider and cache
    engine = TranslationEngine(GoogleTranslateProvider(), TranslationCache())
"""

from doclingo.cache import CacheKey, TranslationCache
from doclingo.classifier import should_translate
from doclingo.config import Settings, get_settings
from doclingo.engine import (
    TranslationEngine,
    TranslationStats,
    build_engine,
    get_engine,
    reset_engine,
    translate,
    translate_batch,
    translate_fields,
    translate_text,
)
from doclingo.keys import SKIP_KEYS, should_skip_key
from doclingo.languages import (
    Language,
    SUPPORTED_LANGUAGES,
    get_language_name,
    is_supported,
    normalize_language_code,
)
from doclingo.providers import (
    GoogleTranslateProvider,
    ProviderError,
    TranslationProvider,
    create_provider,
)

__all__ = [
    # Engine
    "TranslationEngine",
    "TranslationStats",
    "build_engine",
    "get_engine",
    "reset_engine",
    "translate",
    "translate_text",
    "translate_batch",
    "translate_fields",
    # Building blocks
    "should_translate",
    "should_skip_key",
    "SKIP_KEYS",
    "CacheKey",
    "TranslationCache",
    # Providers
    "TranslationProvider",
    "ProviderError",
    "GoogleTranslateProvider",
    "create_provider",
    # Configuration
    "Settings",
    "get_settings",
    # Language utilities
    "Language",
    "SUPPORTED_LANGUAGES",
    "get_language_name",
    "is_supported",
    "normalize_language_code",
]
