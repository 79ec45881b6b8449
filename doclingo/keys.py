"""
Mapping-key filter.

Values under these keys are copied verbatim, subtree included: nothing
below a skipped key is classified or translated.
"""

from __future__ import annotations

import re

# Compared against the lowercased key.
SKIP_KEYS: frozenset[str] = frozenset(
    name.lower()
    for name in (
        # identifiers
        "id", "userId", "landId", "uuid", "guid",
        # coordinates
        "lat", "lng", "latitude", "longitude",
        "coordinates", "coords", "bounds", "bbox",
        # timestamps
        "timestamp", "createdAt", "updatedAt", "date", "time",
        # urls, paths, secrets
        "url", "href", "src", "path", "apiKey", "token",
        # hashes and versions
        "hash", "checksum", "version", "build", "revision",
        # status and process codes
        "status", "code", "errno", "pid",
        # numeric / statistical
        "length", "size", "count", "total",
        "min", "max", "avg", "mean", "median",
        # weather measurements
        "temp", "humidity", "pressure", "windSpeed", "windDirection",
        "precipitation", "uv", "visibility",
    )
)

_DIGITS = re.compile(r"[0-9]+")


def should_skip_key(key: str) -> bool:
    """True if the value stored under ``key`` must not be translated."""
    return (
        key.lower() in SKIP_KEYS
        or key.endswith(("Id", "_id", "At"))
        or key.startswith("_")
        or _DIGITS.fullmatch(key) is not None
    )
