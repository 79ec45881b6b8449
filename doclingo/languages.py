"""
Supported languages and utilities.

The catalog is informational: unknown codes are never rejected, they are
handed to the provider verbatim.
"""

from enum import Enum


class Language(str, Enum):
    """Languages offered in the language picker."""

    EN = "en"      # English (default)

    # === Indian languages ===
    HI = "hi"      # Hindi
    TA = "ta"      # Tamil
    TE = "te"      # Telugu
    KN = "kn"      # Kannada
    ML = "ml"      # Malayalam
    MR = "mr"      # Marathi
    BN = "bn"      # Bengali
    GU = "gu"      # Gujarati
    PA = "pa"      # Punjabi

    # === International ===
    ES = "es"      # Spanish
    FR = "fr"      # French
    DE = "de"      # German
    ZH = "zh"      # Chinese
    JA = "ja"      # Japanese


# Human-readable names
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
    "kn": "Kannada",
    "ml": "Malayalam",
    "mr": "Marathi",
    "bn": "Bengali",
    "gu": "Gujarati",
    "pa": "Punjabi",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "zh": "Chinese",
    "ja": "Japanese",
}


# Catalog code -> code understood by the translation backend.
# Identity today; kept separate so a backend with different codes
# (e.g. "zh-CN") only needs this table changed.
PROVIDER_CODES: dict[str, str] = {code: code for code in LANGUAGE_NAMES}


SUPPORTED_LANGUAGES = list(Language)


# =============================================================================
# Utilities
# =============================================================================


def language_value(code: str | Language) -> str:
    """Plain string value of a code or Language member."""
    return code.value if isinstance(code, Language) else str(code)


def get_language_name(code: str | Language) -> str:
    """Get human-readable language name."""
    code = language_value(code)
    return LANGUAGE_NAMES.get(code.lower(), code)


def normalize_language_code(code: str | Language) -> str:
    """Normalize language code to standard form."""
    code = language_value(code).lower().strip()

    # Handle English names of the catalog languages
    variants = {
        "english": "en",
        "hindi": "hi",
        "tamil": "ta",
        "telugu": "te",
        "kannada": "kn",
        "malayalam": "ml",
        "marathi": "mr",
        "bengali": "bn",
        "bangla": "bn",
        "gujarati": "gu",
        "punjabi": "pa",
        "spanish": "es",
        "french": "fr",
        "german": "de",
        "chinese": "zh",
        "japanese": "ja",
    }

    return variants.get(code, code)


def provider_language_code(code: str | Language) -> str:
    """Backend code for a language, passing unknown codes through."""
    code = language_value(code)
    return PROVIDER_CODES.get(code, code)


def is_supported(code: str | Language) -> bool:
    """Whether the code is in the catalog."""
    return normalize_language_code(code) in LANGUAGE_NAMES


def get_language_by_code(code: str) -> Language | None:
    """Get Language enum by code."""
    code = normalize_language_code(code)
    try:
        return Language(code)
    except ValueError:
        return None


def resolve_language_code(code: str | Language) -> str:
    """
    Code the engine works with.

    Catalog codes and language names are normalized ("Hindi" -> "hi");
    anything else is kept verbatim so the provider sees exactly what the
    caller asked for.
    """
    value = language_value(code).strip()
    language = get_language_by_code(value)
    return language.value if language is not None else value
