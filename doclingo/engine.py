"""
Recursive document translation with caching.

Walks any JSON-shaped value (str/int/float/bool/None, lists, dicts) and
returns a structurally identical copy whose natural-language strings are
translated. IDs, URLs, numbers, dates and values under technical keys
pass through untouched.

Usage:
    engine = TranslationEngine(GoogleTranslateProvider())

    # Whole document
    weather_hi = await engine.translate(weather, target="hi")

    # Independent strings, order preserved
    labels_fr = await engine.translate_batch(["Sunny", "Cloudy"], target="fr")

    # Only fields the caller knows are human-readable
    crop_ta = await engine.translate_fields(crop, "ta", ["cropName", "tips"])
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, fields as dataclass_fields
from typing import Any, Union

from doclingo.cache import CacheKey, TranslationCache
from doclingo.classifier import should_translate
from doclingo.config import Settings, get_settings
from doclingo.keys import should_skip_key
from doclingo.languages import Language, resolve_language_code
from doclingo.providers import ProviderError, TranslationProvider, create_provider

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, bool, None]
Document = Union[Scalar, list["Document"], dict[str, "Document"]]

DEFAULT_MAX_DEPTH = 10


# =============================================================================
# Diagnostics
# =============================================================================


@dataclass
class TranslationStats:
    """
    Counters describing what the engine did.

    Translation never fails loudly; these are how a caller finds out how
    many leaves fell back to their original text.
    """

    requests: int = 0        # leaves routed to the cache/provider
    cache_hits: int = 0
    cache_misses: int = 0
    provider_calls: int = 0
    failures: int = 0        # provider errors, original text returned
    skipped: int = 0         # leaves classified as non-linguistic
    truncated: int = 0       # subtrees returned as-is past max_depth

    def reset(self) -> None:
        for f in dataclass_fields(self):
            setattr(self, f.name, 0)

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


# =============================================================================
# Engine
# =============================================================================


class TranslationEngine:
    """
    Cache-backed recursive translator.

    The cache and provider are injected so their lifetime is the caller's
    choice (per process, per request, per test).
    """

    def __init__(
        self,
        provider: TranslationProvider,
        cache: TranslationCache | None = None,
        *,
        default_language: str | Language = "en",
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_concurrency: int | None = None,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else TranslationCache()
        self.default_language = resolve_language_code(default_language)
        self.max_depth = max_depth
        self.max_concurrency = max_concurrency if max_concurrency and max_concurrency > 0 else None
        self._limiter: tuple[asyncio.AbstractEventLoop, asyncio.Semaphore] | None = None
        self.stats = TranslationStats()

    # -------------------------------------------------------------------------
    # Language handling
    # -------------------------------------------------------------------------

    def _languages(
        self,
        target: str | Language,
        source: str | Language | None,
    ) -> tuple[str, str]:
        target = resolve_language_code(target)
        source = resolve_language_code(source) if source else self.default_language
        return target, source

    def _is_noop(self, target: str, source: str) -> bool:
        return target == source or target == self.default_language

    # -------------------------------------------------------------------------
    # Leaf primitive
    # -------------------------------------------------------------------------

    def _semaphore(self) -> asyncio.Semaphore | None:
        # A semaphore binds to the loop it first waits on; keep one per running loop
        if self.max_concurrency is None:
            return None
        loop = asyncio.get_running_loop()
        if self._limiter is None or self._limiter[0] is not loop:
            self._limiter = (loop, asyncio.Semaphore(self.max_concurrency))
        return self._limiter[1]

    async def _call_provider(self, text: str, source: str, target: str) -> str:
        self.stats.provider_calls += 1
        limiter = self._semaphore()
        if limiter is None:
            return await self.provider.translate(text, source, target)
        async with limiter:
            return await self.provider.translate(text, source, target)

    async def _translate_leaf(self, text: str, target: str, source: str) -> str:
        self.stats.requests += 1
        key = CacheKey(source, target, text)

        cached = self.cache.get(key)
        if cached is not None:
            self.stats.cache_hits += 1
            return cached
        self.stats.cache_misses += 1

        try:
            translated = await self._call_provider(text, source, target)
        except ProviderError as e:
            self.stats.failures += 1
            logger.warning("Translation %s->%s failed, keeping original: %s", source, target, e)
            return text

        self.cache.put(key, translated)
        return translated

    async def translate_text(
        self,
        text: str,
        target: str | Language,
        source: str | Language | None = None,
    ) -> str:
        """
        Translate a single string through the cache.

        No classification is applied: callers of this method already know
        the text is human-readable. Non-strings and empty strings come back
        unchanged, as does everything when no translation is needed.
        """
        if not isinstance(text, str) or not text:
            return text

        target, source = self._languages(target, source)
        if self._is_noop(target, source):
            return text

        return await self._translate_leaf(text, target, source)

    # -------------------------------------------------------------------------
    # Recursive document translation
    # -------------------------------------------------------------------------

    async def translate(
        self,
        document: Document,
        target: str | Language,
        source: str | Language | None = None,
        depth: int = 0,
    ) -> Document:
        """
        Translate every natural-language string in ``document``.

        Args:
            document: Any JSON-shaped value. Never mutated.
            target: Target language code
            source: Source language (defaults to the engine's default language)
            depth: Starting depth, for callers resuming inside a larger walk

        Returns:
            A new document with the same shape and key order. Never raises
            for provider failures; affected strings stay untranslated.
        """
        if document is None:
            return document

        target, source = self._languages(target, source)
        if self._is_noop(target, source):
            return document

        return await self._walk(document, target, source, depth)

    async def _walk(self, node: Any, target: str, source: str, depth: int) -> Any:
        if depth > self.max_depth:
            self.stats.truncated += 1
            logger.debug("Depth %d exceeds %d, leaving subtree as-is", depth, self.max_depth)
            return node

        if isinstance(node, str):
            if not should_translate(node):
                self.stats.skipped += 1
                return node
            return await self._translate_leaf(node, target, source)

        if isinstance(node, Mapping):
            return await self._walk_mapping(node, target, source, depth)

        if isinstance(node, (list, tuple)):
            items = await asyncio.gather(
                *(self._walk(item, target, source, depth + 1) for item in node)
            )
            return tuple(items) if isinstance(node, tuple) else list(items)

        # None, bool, int, float and anything not JSON-shaped
        return node

    async def _walk_mapping(
        self,
        node: Mapping[Any, Any],
        target: str,
        source: str,
        depth: int,
    ) -> dict[Any, Any]:
        # Copy first so skipped keys keep their value and every key keeps its position
        result = dict(node)
        pending = [key for key in node if not should_skip_key(str(key))]

        translated = await asyncio.gather(
            *(self._walk(node[key], target, source, depth + 1) for key in pending)
        )
        for key, value in zip(pending, translated):
            result[key] = value
        return result

    # -------------------------------------------------------------------------
    # Batch and labelled-subset helpers
    # -------------------------------------------------------------------------

    async def translate_batch(
        self,
        texts: Sequence[str],
        target: str | Language,
        source: str | Language | None = None,
    ) -> list[str]:
        """
        Translate independent strings concurrently.

        Each item is treated like a leaf of a document (classified, cached).
        Output has the same length and order as ``texts``.
        """
        if not texts:
            return []

        target, source = self._languages(target, source)
        if self._is_noop(target, source):
            return list(texts)

        return list(
            await asyncio.gather(*(self._walk(text, target, source, 0) for text in texts))
        )

    async def translate_fields(
        self,
        mapping: Mapping[str, Any] | None,
        target: str | Language,
        fields: Sequence[str],
        source: str | Language | None = None,
    ) -> Mapping[str, Any] | None:
        """
        Translate only the listed top-level string fields of ``mapping``.

        For callers that know which fields are human-readable. Other fields
        are copied as-is; nothing is classified or recursed into.
        """
        if not mapping:
            return mapping

        target, source = self._languages(target, source)
        if self._is_noop(target, source):
            return mapping

        result = dict(mapping)
        names = [name for name in fields if isinstance(mapping.get(name), str) and mapping[name]]
        translated = await asyncio.gather(
            *(self._translate_leaf(mapping[name], target, source) for name in names)
        )
        for name, value in zip(names, translated):
            result[name] = value
        return result

    async def translate_records(
        self,
        records: Sequence[Any] | None,
        target: str | Language,
        fields: Sequence[str],
        source: str | Language | None = None,
    ) -> Sequence[Any] | None:
        """Apply translate_fields to each mapping in ``records``, order preserved."""
        if not records:
            return records

        async def one(record: Any) -> Any:
            if isinstance(record, Mapping):
                return await self.translate_fields(record, target, fields, source)
            return record

        return list(await asyncio.gather(*(one(record) for record in records)))


# =============================================================================
# Module-level convenience functions
# =============================================================================


_engine: TranslationEngine | None = None


def build_engine(settings: Settings | None = None) -> TranslationEngine:
    """Create an engine with a fresh cache and the configured provider."""
    settings = settings or get_settings()
    cache = TranslationCache(
        max_size=settings.cache_max_size,
        ttl_seconds=settings.cache_ttl_seconds,
    )
    return TranslationEngine(
        create_provider(settings),
        cache,
        default_language=settings.default_language,
        max_depth=settings.max_depth,
        max_concurrency=settings.concurrency_limit,
    )


def get_engine() -> TranslationEngine:
    """Get or create the process-wide engine."""
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def reset_engine() -> None:
    """Drop the process-wide engine (and with it, its cache)."""
    global _engine
    _engine = None


async def translate(
    document: Document,
    target: str | Language,
    source: str | Language | None = None,
) -> Document:
    """Translate a document (convenience function)."""
    return await get_engine().translate(document, target, source)


async def translate_text(
    text: str,
    target: str | Language,
    source: str | Language | None = None,
) -> str:
    """Translate one string (convenience function)."""
    return await get_engine().translate_text(text, target, source)


async def translate_batch(
    texts: Sequence[str],
    target: str | Language,
    source: str | Language | None = None,
) -> list[str]:
    """Translate multiple strings (convenience function)."""
    return await get_engine().translate_batch(texts, target, source)


async def translate_fields(
    mapping: Mapping[str, Any] | None,
    target: str | Language,
    fields: Sequence[str],
    source: str | Language | None = None,
) -> Mapping[str, Any] | None:
    """Translate selected fields of a mapping (convenience function)."""
    return await get_engine().translate_fields(mapping, target, fields, source)
