"""
Google Translate provider (public web endpoint, no API key).

Transient failures (connection errors, 429, 5xx) are retried with
exponential backoff before giving up with ProviderError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from doclingo.languages import provider_language_code
from doclingo.providers.base import TranslationProvider

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False


def parse_response(data: Any) -> str:
    """
    Extract translated text from the endpoint's nested-list payload.

    Shape: [[["<translated>", "<original>", ...], ...], ...]. Long inputs
    come back split into several segments which are concatenated.
    """
    if not isinstance(data, list) or not data or not isinstance(data[0], list):
        raise ValueError("unexpected response shape")

    segments = [
        segment[0]
        for segment in data[0]
        if isinstance(segment, list) and segment and isinstance(segment[0], str)
    ]
    if not segments:
        raise ValueError("no translated segments in response")

    translated = "".join(segments)
    if not translated.strip():
        raise ValueError("empty translation")
    return translated


class GoogleTranslateProvider(TranslationProvider):
    """Calls translate.googleapis.com with the ``gtx`` client."""

    name = "google"

    def __init__(
        self,
        *,
        url: str = GOOGLE_TRANSLATE_URL,
        timeout: float = 10.0,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.max_retries = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        params = {
            "client": "gtx",
            "sl": provider_language_code(source_language),
            "tl": provider_language_code(target_language),
            "dt": "t",
            "q": text,
        }

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=self.backoff_seconds, max=10),
                retry=retry_if_exception(_is_transient),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.get(self.url, params=params)
                    response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise self.error(f"request failed: {e}", source_language, target_language) from e
        except ValueError as e:
            raise self.error(f"invalid JSON: {e}", source_language, target_language) from e

        try:
            return parse_response(data)
        except ValueError as e:
            logger.debug("Unparseable Google response: %r", data)
            raise self.error(str(e), source_language, target_language) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
