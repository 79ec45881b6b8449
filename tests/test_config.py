"""
Tests for settings and engine construction.
"""

import pytest

from doclingo import engine as engine_module
from doclingo.config import Settings
from doclingo.engine import build_engine, get_engine, reset_engine
from doclingo.providers import GoogleTranslateProvider


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.default_language == "en"
        assert settings.max_depth == 10
        assert settings.cache_max_size == 0
        assert settings.translation_provider == "google"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DOCLINGO_MAX_DEPTH", "3")
        monkeypatch.setenv("DOCLINGO_DEFAULT_LANGUAGE", "hi")

        settings = Settings()

        assert settings.max_depth == 3
        assert settings.default_language == "hi"

    @pytest.mark.parametrize("value, expected", [(8, 8), (0, None), (-1, None)])
    def test_concurrency_limit(self, value, expected):
        assert Settings(max_concurrency=value).concurrency_limit == expected


class TestBuildEngine:
    def test_from_settings(self):
        engine = build_engine(
            Settings(max_depth=4, max_concurrency=3, cache_max_size=100, cache_ttl_seconds=60)
        )

        assert isinstance(engine.provider, GoogleTranslateProvider)
        assert engine.max_depth == 4
        assert engine.max_concurrency == 3
        assert engine.cache.max_size == 100
        assert engine.cache.ttl_seconds == 60

    def test_unbounded_defaults(self):
        engine = build_engine(Settings(max_concurrency=0))

        assert engine.max_concurrency is None
        assert engine.cache.max_size is None
        assert engine.cache.ttl_seconds is None

    def test_each_build_gets_a_fresh_cache(self):
        assert build_engine(Settings()).cache is not build_engine(Settings()).cache

    def test_global_engine_lifecycle(self, monkeypatch):
        monkeypatch.setattr(engine_module, "build_engine", lambda settings=None: object())
        reset_engine()
        try:
            first = get_engine()
            assert get_engine() is first

            reset_engine()
            assert get_engine() is not first
        finally:
            reset_engine()
