"""
Leaf string classification.

Decides whether a string found in a document is natural language worth
sending to a translator, or a technical token (ID, URL, number, code)
that must pass through untouched.

Rules are checked in order and the first match excludes the string.
The order matters: e.g. "ABC" is caught by the abbreviation rule even
though it is also shorter than four characters.
"""

from __future__ import annotations

import re
from typing import Callable

_UUID = re.compile(r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}", re.IGNORECASE)
_SHORT_TOKEN = re.compile(r"[a-z0-9_-]+")
_DIGITS = re.compile(r"[0-9]+")
_ISO_DATE_PREFIX = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DECIMAL = re.compile(r"-?[0-9]+\.[0-9]+")
_UPPERCASE = re.compile(r"[A-Z]+")


def _too_short(s: str) -> bool:
    return len(s) < 2


def _uuid(s: str) -> bool:
    return _UUID.fullmatch(s) is not None


def _short_token(s: str) -> bool:
    return len(s) < 4 and _SHORT_TOKEN.fullmatch(s) is not None


def _url(s: str) -> bool:
    return s.startswith(("http://", "https://"))


def _email(s: str) -> bool:
    return "@" in s and "." in s


def _path(s: str) -> bool:
    return "/" in s and ("." in s or s.startswith("/"))


def _serialized(s: str) -> bool:
    return (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]"))


def _number_or_date(s: str) -> bool:
    return _DIGITS.fullmatch(s) is not None or _ISO_DATE_PREFIX.match(s) is not None


def _coordinate(s: str) -> bool:
    return _DECIMAL.fullmatch(s) is not None


def _abbreviation(s: str) -> bool:
    return len(s) == 1 or (len(s) <= 3 and _UPPERCASE.fullmatch(s) is not None)


EXCLUSION_RULES: list[tuple[str, Callable[[str], bool]]] = [
    ("too_short", _too_short),
    ("uuid", _uuid),
    ("short_token", _short_token),
    ("url", _url),
    ("email", _email),
    ("path", _path),
    ("serialized", _serialized),
    ("number_or_date", _number_or_date),
    ("coordinate", _coordinate),
    ("abbreviation", _abbreviation),
]


def exclusion_reason(s: str) -> str | None:
    """Name of the first rule that excludes ``s``, or None if translatable."""
    for name, rule in EXCLUSION_RULES:
        if rule(s):
            return name
    return None


def should_translate(s: str) -> bool:
    """True if ``s`` looks like natural language."""
    return exclusion_reason(s) is None
