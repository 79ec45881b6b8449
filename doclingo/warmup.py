"""
Cache warming for translations.

Pre-translates known strings (labels, messages, canned advice) into a set
of languages so the first real request is served from cache.

The cache is in-memory only, so warming is useful inside the process that
will go on to serve translations, e.g. at application startup:

    engine = build_engine()
    texts = load_strings(["config/ui_strings.yaml"])
    await warm_translation_cache(engine, texts, languages=["hi", "ta"])

The CLI does the same in one process and reports what it did, which is
mainly a way to check provider connectivity and content coverage:

    python -m doclingo.warmup -l hi ta -- config/ui_strings.yaml
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from doclingo.cache import CacheKey
from doclingo.classifier import should_translate
from doclingo.config import configure_logging
from doclingo.engine import TranslationEngine, build_engine
from doclingo.keys import should_skip_key
from doclingo.languages import Language, SUPPORTED_LANGUAGES, get_language_name, resolve_language_code

logger = logging.getLogger(__name__)


# =============================================================================
# Content Loaders
# =============================================================================


def collect_strings(node: Any) -> list[str]:
    """Every translatable leaf string in a document, in traversal order."""
    found: list[str] = []

    def visit(value: Any) -> None:
        if isinstance(value, str):
            if should_translate(value):
                found.append(value)
        elif isinstance(value, dict):
            for key, item in value.items():
                if not should_skip_key(str(key)):
                    visit(item)
        elif isinstance(value, (list, tuple)):
            for item in value:
                visit(item)

    visit(node)
    return found


def load_strings(paths: Iterable[str | Path]) -> list[str]:
    """
    Load translatable strings from YAML files.

    Directories are searched for *.yaml / *.yml. Duplicates are dropped,
    first occurrence wins.
    """
    files: list[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(sorted(path.glob("*.yaml")))
            files.extend(sorted(path.glob("*.yml")))
        elif path.exists():
            files.append(path)
        else:
            logger.warning("Warm-up source not found: %s", path)

    texts: list[str] = []
    for file in files:
        with open(file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        found = collect_strings(data)
        texts.extend(found)
        logger.info("Loaded %d strings from %s", len(found), file.name)

    return list(dict.fromkeys(texts))


# =============================================================================
# Cache Warming
# =============================================================================


async def warm_translation_cache(
    engine: TranslationEngine,
    texts: list[str],
    languages: list[str | Language] | None = None,
    batch_size: int = 20,
) -> dict[str, int]:
    """
    Pre-translate ``texts`` into each language.

    Args:
        engine: Engine whose cache should be warmed
        texts: Source-language strings
        languages: Target languages (defaults to every supported language)
        batch_size: Texts per translate_batch call

    Returns:
        Stats dict with counts
    """
    if languages is None:
        languages = list(SUPPORTED_LANGUAGES)

    lang_codes = [resolve_language_code(lang) for lang in languages]
    source = engine.default_language
    texts = [t for t in dict.fromkeys(texts) if t and should_translate(t)]

    stats = {
        "languages": len(lang_codes),
        "texts": len(texts),
        "translations": 0,
        "cached": 0,
        "errors": 0,
    }

    for lang in lang_codes:
        if lang == source:
            continue
        logger.info("Warming %s (%s): %d texts", get_language_name(lang), lang, len(texts))

        for i in range(0, len(texts), batch_size):
            batch = texts[i:i + batch_size]

            uncached = []
            for text in batch:
                if engine.cache.get(CacheKey(source, lang, text)) is not None:
                    stats["cached"] += 1
                else:
                    uncached.append(text)

            if not uncached:
                continue

            failures_before = engine.stats.failures
            await engine.translate_batch(uncached, target=lang, source=source)
            failed = engine.stats.failures - failures_before
            stats["errors"] += failed
            stats["translations"] += len(uncached) - failed

    logger.info(
        "Warm-up complete: %d new, %d already cached, %d errors",
        stats["translations"], stats["cached"], stats["errors"],
    )
    return stats


# =============================================================================
# CLI Entry Point
# =============================================================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Warm the translation cache for a set of languages"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="YAML files or directories with strings to pre-translate",
    )
    parser.add_argument(
        "--languages", "-l",
        nargs="+",
        help="Languages to warm (default: all supported languages)",
    )
    parser.add_argument(
        "--all", "-a",
        action="store_true",
        help="Warm every supported language (overrides --languages)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings",
    )
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> dict[str, int]:
    engine = build_engine()
    try:
        texts = load_strings(args.files)
        languages = None if args.all else args.languages
        return await warm_translation_cache(engine, texts, languages=languages)
    finally:
        await engine.provider.aclose()


def main(argv: list[str] | None = None) -> int:
    """Run cache warm-up from command line."""
    args = parse_args(argv)
    configure_logging("WARNING" if args.quiet else None)

    stats = asyncio.run(_run(args))
    print(
        f"{stats['texts']} texts x {stats['languages']} languages: "
        f"{stats['translations']} translated, {stats['cached']} cached, "
        f"{stats['errors']} errors"
    )
    return 1 if stats["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
