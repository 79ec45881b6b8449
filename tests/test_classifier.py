"""
Tests for leaf string classification.
"""

import pytest

from doclingo.classifier import EXCLUSION_RULES, exclusion_reason, should_translate


# =============================================================================
# Exclusions
# =============================================================================


class TestExclusions:
    @pytest.mark.parametrize(
        "text, reason",
        [
            ("", "too_short"),
            ("a", "too_short"),
            ("550e8400-e29b-41d4-a716-446655440000", "uuid"),
            ("550E8400-E29B-41D4-A716-446655440000", "uuid"),
            ("ok", "short_token"),
            ("low", "short_token"),
            ("a-b", "short_token"),
            ("x_1", "short_token"),
            ("http://example.com", "url"),
            ("https://example.com/weather?q=pune", "url"),
            ("farmer@example.com", "email"),
            ("/api/weather", "path"),
            ("images/sun.png", "path"),
            ('{"rain": true}', "serialized"),
            ("[1, 2, 3]", "serialized"),
            ("12345", "number_or_date"),
            ("2024-06-01", "number_or_date"),
            ("2024-06-01T10:30:00Z", "number_or_date"),
            ("18.5204", "coordinate"),
            ("-73.8567", "coordinate"),
            ("UV", "abbreviation"),
            ("ABC", "abbreviation"),
        ],
    )
    def test_excluded(self, text, reason):
        assert exclusion_reason(text) == reason
        assert not should_translate(text)

    def test_uppercase_code_hits_abbreviation_not_short_token(self):
        # Short-token rule only covers lowercase; codes fall to the later rule
        assert exclusion_reason("NPK") == "abbreviation"
        assert exclusion_reason("npk") == "short_token"

    @pytest.mark.parametrize("text", ["Ok", "No", "Low"])
    def test_mixed_case_short_words_are_translated(self, text):
        assert exclusion_reason(text) is None
        assert should_translate(text)

    def test_first_matching_rule_wins(self):
        # Both a URL and a path; the URL rule comes first
        assert exclusion_reason("https://example.com/a.png") == "url"
        # Both an email and a path
        assert exclusion_reason("a@b.com/x") == "email"

    def test_rule_order(self):
        assert [name for name, _ in EXCLUSION_RULES] == [
            "too_short",
            "uuid",
            "short_token",
            "url",
            "email",
            "path",
            "serialized",
            "number_or_date",
            "coordinate",
            "abbreviation",
        ]


# =============================================================================
# Natural language
# =============================================================================


class TestNaturalLanguage:
    @pytest.mark.parametrize(
        "text",
        [
            "Sunny",
            "Low",
            "rain",
            "Clear skies",
            "Partly cloudy with light rain",
            "Wind 12 km/h",
            "Irrigate early, e.g. before 8am",
            "Apply 20 kg urea per acre",
        ],
    )
    def test_translatable(self, text):
        assert exclusion_reason(text) is None
        assert should_translate(text)

    def test_deterministic(self):
        samples = ["Sunny", "ok", "18.5204", "Clear skies"]
        first = [should_translate(s) for s in samples]
        second = [should_translate(s) for s in samples]
        assert first == second == [True, False, False, True]
