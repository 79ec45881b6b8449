"""
Shared fixtures: a call-counting stub provider and engines built on it.
"""

from __future__ import annotations

import asyncio

import pytest

from doclingo.cache import TranslationCache
from doclingo.engine import TranslationEngine
from doclingo.providers.base import TranslationProvider


class StubProvider(TranslationProvider):
    """
    Deterministic fake backend.

    Translates to "<target>:<text>", counts calls, and can be told to fail
    for specific texts or to delay specific texts (to shuffle completion order).
    """

    name = "stub"

    def __init__(self, fail_on: set[str] | None = None, delays: dict[str, float] | None = None):
        self.calls: list[tuple[str, str, str]] = []
        self.fail_on = fail_on or set()
        self.delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        self.calls.append((text, source_language, target_language))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(text, 0))
            if text in self.fail_on:
                raise self.error("boom", source_language, target_language)
            return f"{target_language}:{text}"
        finally:
            self.in_flight -= 1

    @property
    def texts(self) -> list[str]:
        return [text for text, _, _ in self.calls]


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def cache():
    return TranslationCache()


@pytest.fixture
def engine(provider, cache):
    """Fresh engine with its own cache."""
    return TranslationEngine(provider, cache)
