"""
Translation provider interface.

A provider is the only part of the system that talks to a translation
backend. The engine depends on nothing but this narrow contract, so any
backend can be swapped in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProviderError(Exception):
    """Raised by a provider when a translation could not be obtained."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "",
        source_language: str = "",
        target_language: str = "",
    ):
        super().__init__(message)
        self.provider = provider
        self.source_language = source_language
        self.target_language = target_language

    def __str__(self) -> str:
        base = super().__str__()
        if self.provider:
            return f"[{self.provider} {self.source_language}->{self.target_language}] {base}"
        return base


class TranslationProvider(ABC):
    """
    Base class for translation backends.

    Example:
        class UppercaseProvider(TranslationProvider):
            name = "upper"

            async def translate(self, text, source_language, target_language):
                return text.upper()
    """

    name: str = "provider"

    @abstractmethod
    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """
        Translate ``text``.

        Returns the translated text. Raises ProviderError on any failure
        (network, quota, malformed response).
        """
        pass

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        pass

    def error(self, message: str, source_language: str, target_language: str) -> ProviderError:
        return ProviderError(
            message,
            provider=self.name,
            source_language=source_language,
            target_language=target_language,
        )
