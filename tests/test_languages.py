"""
Tests for the language catalog helpers.
"""

import pytest

from doclingo.languages import (
    Language,
    SUPPORTED_LANGUAGES,
    get_language_by_code,
    get_language_name,
    is_supported,
    normalize_language_code,
    provider_language_code,
    resolve_language_code,
)


class TestLanguageHelpers:
    def test_catalog(self):
        codes = {lang.value for lang in SUPPORTED_LANGUAGES}
        assert codes == {"en", "hi", "ta", "te", "kn", "ml", "mr", "bn", "gu", "pa", "es", "fr", "de", "zh", "ja"}

    @pytest.mark.parametrize(
        "raw, expected",
        [("hi", "hi"), (" HI ", "hi"), ("Hindi", "hi"), ("bangla", "bn"), (Language.TA, "ta")],
    )
    def test_normalize(self, raw, expected):
        assert normalize_language_code(raw) == expected

    def test_resolve_keeps_unknown_codes_verbatim(self):
        assert resolve_language_code("xx-Custom") == "xx-Custom"
        assert resolve_language_code(" Marathi ") == "mr"
        assert resolve_language_code(Language.JA) == "ja"

    def test_provider_codes(self):
        assert provider_language_code("zh") == "zh"
        assert provider_language_code(Language.GU) == "gu"
        assert provider_language_code("or") == "or"

    def test_names(self):
        assert get_language_name("kn") == "Kannada"
        assert get_language_name(Language.PA) == "Punjabi"
        assert get_language_name("xx") == "xx"

    def test_supported(self):
        assert is_supported("Tamil")
        assert not is_supported("or")

    def test_lookup(self):
        assert get_language_by_code("telugu") is Language.TE
        assert get_language_by_code("or") is None
