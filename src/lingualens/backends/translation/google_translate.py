"""Cloud Translation v2 backend.

Requests plain-text output so translated fragments come back without HTML
entity escaping.
"""

from __future__ import annotations

import httpx

from lingualens.backends.base import TranslationBackend
from lingualens.backends.google_api import post_json
from lingualens.config import TRANSLATE_API_URL
from lingualens.errors import TranslationError


class GoogleTranslateBackend(TranslationBackend):
    """Single-fragment translation via the Cloud Translation REST API."""

    def __init__(
        self,
        url: str = TRANSLATE_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._transport = transport

    async def translate(self, text: str, tgt_lang: str, src_lang: str | None = None) -> str:
        payload = {"q": text, "target": tgt_lang, "format": "text"}
        if src_lang:
            payload["source"] = src_lang

        data = await post_json(
            self.url,
            payload,
            error_cls=TranslationError,
            transport=self._transport,
        )

        try:
            translated = data["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationError(f"Malformed translate response: {e!r}") from e
        if not isinstance(translated, str):
            raise TranslationError("translatedText is not a string")
        return translated
