"""Abstract base classes for pluggable collaborator backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lingualens.backends.types import Annotation, LanguageCandidate


class TextDetectionBackend(ABC):
    """Abstract interface for OCR text detection services."""

    @abstractmethod
    async def detect(self, image: bytes) -> list[Annotation]:
        """Detect text in an image.

        Args:
            image: Raw image bytes, already validated by the caller.

        Returns:
            Annotations in the order the service reported them.

        Raises:
            DetectionError: On transport or service failure.
        """


class LanguageDetectionBackend(ABC):
    """Abstract interface for text language detection services."""

    @abstractmethod
    async def detect_language(self, text: str) -> list[LanguageCandidate]:
        """Detect the language of a text fragment.

        Returns:
            Candidates ranked best first. May be empty.

        Raises:
            LanguageDetectionError: On transport or service failure.
        """


class TranslationBackend(ABC):
    """Abstract interface for machine translation services."""

    @abstractmethod
    async def translate(self, text: str, tgt_lang: str, src_lang: str | None = None) -> str:
        """Translate a single text fragment.

        Args:
            text: Text to translate.
            tgt_lang: Target language code.
            src_lang: Source language code, or None to let the service detect it.

        Raises:
            TranslationError: On transport or service failure.
        """
