"""Pluggable backend factory functions.

Each factory returns a singleton backend instance based on environment variables.
Only the selected backend is imported (lazy), so an alternative provider can be
added without touching the pipeline.

Environment variables:
    DETECTION_BACKEND: "google_vision" (default)
    LANGDETECT_BACKEND: "google_translate" (default)
    MT_BACKEND: "google_translate" (default)
"""

from __future__ import annotations

import os
from functools import lru_cache

from lingualens.backends.base import (
    LanguageDetectionBackend,
    TextDetectionBackend,
    TranslationBackend,
)


@lru_cache(maxsize=1)
def get_detection_backend() -> TextDetectionBackend:
    """Get the configured text detection backend singleton."""
    name = os.getenv("DETECTION_BACKEND", "google_vision")
    if name == "google_vision":
        from lingualens.backends.detection.google_vision import GoogleVisionBackend

        return GoogleVisionBackend()
    raise ValueError(f"Unknown detection backend: {name}")


@lru_cache(maxsize=1)
def get_language_backend() -> LanguageDetectionBackend:
    """Get the configured language detection backend singleton."""
    name = os.getenv("LANGDETECT_BACKEND", "google_translate")
    if name == "google_translate":
        from lingualens.backends.language.google_translate import (
            GoogleLanguageDetectionBackend,
        )

        return GoogleLanguageDetectionBackend()
    raise ValueError(f"Unknown language detection backend: {name}")


@lru_cache(maxsize=1)
def get_translation_backend() -> TranslationBackend:
    """Get the configured translation backend singleton."""
    name = os.getenv("MT_BACKEND", "google_translate")
    if name == "google_translate":
        from lingualens.backends.translation.google_translate import GoogleTranslateBackend

        return GoogleTranslateBackend()
    raise ValueError(f"Unknown translation backend: {name}")
