"""
LLM-backed translation provider using DSPy.

Supports Gemini (primary), OpenAI, and Anthropic through litellm model
prefixes.
"""

from __future__ import annotations

import asyncio
import logging

import dspy

from doclingo.config import Settings
from doclingo.languages import get_language_name
from doclingo.providers.base import TranslationProvider

logger = logging.getLogger(__name__)

DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-latest",
}


class TranslateText(dspy.Signature):
    """Translate text while preserving meaning, tone, and style. Keep numbers, units and names unchanged."""

    text: str = dspy.InputField(desc="Text to translate")
    source_language: str = dspy.InputField(desc="Source language name (e.g., 'English')")
    target_language: str = dspy.InputField(desc="Target language name (e.g., 'Hindi')")

    translated_text: str = dspy.OutputField(desc="Translated text only, no commentary")


def get_lm(settings: Settings) -> dspy.LM:
    """
    Build the language model described by ``settings``.

    Raises:
        ValueError: unknown provider or missing API key.
    """
    provider = settings.llm_provider
    if provider not in DEFAULT_MODELS:
        raise ValueError(f"Unknown LLM provider: {provider}")

    model = settings.llm_model or DEFAULT_MODELS[provider]

    if provider == "gemini":
        api_key = settings.google_api_key or settings.gemini_api_key
    elif provider == "openai":
        api_key = settings.openai_api_key
    else:
        api_key = settings.anthropic_api_key

    if not api_key:
        raise ValueError(f"No API key configured for LLM provider '{provider}'")

    return dspy.LM(model=f"{provider}/{model}", api_key=api_key)


class LLMTranslationProvider(TranslationProvider):
    """
    Translates one string per LLM call.

    DSPy predictors are synchronous, so each call runs in a worker thread
    to keep the event loop free for other leaves.
    """

    name = "llm"

    def __init__(self, lm: dspy.LM, predictor: dspy.Predict | None = None):
        self.lm = lm
        self.predictor = predictor or dspy.Predict(TranslateText)

    def _predict(self, text: str, source_language: str, target_language: str) -> str:
        with dspy.context(lm=self.lm):
            result = self.predictor(
                text=text,
                source_language=get_language_name(source_language),
                target_language=get_language_name(target_language),
            )
        return result.translated_text

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        try:
            translated = await asyncio.to_thread(
                self._predict, text, source_language, target_language
            )
        except Exception as e:
            raise self.error(f"LLM call failed: {e}", source_language, target_language) from e

        if not isinstance(translated, str) or not translated.strip():
            raise self.error("empty response", source_language, target_language)
        return translated.strip()
