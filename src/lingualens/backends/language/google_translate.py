"""Language detection via the Cloud Translation v2 detect endpoint."""

from __future__ import annotations

import httpx

from lingualens.backends.base import LanguageDetectionBackend
from lingualens.backends.google_api import post_json
from lingualens.backends.types import LanguageCandidate
from lingualens.config import TRANSLATE_API_URL
from lingualens.errors import LanguageDetectionError


class GoogleLanguageDetectionBackend(LanguageDetectionBackend):
    """Ranked language candidates for one text fragment."""

    def __init__(
        self,
        url: str = TRANSLATE_API_URL.rstrip("/") + "/detect",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._transport = transport

    async def detect_language(self, text: str) -> list[LanguageCandidate]:
        data = await post_json(
            self.url,
            {"q": text},
            error_cls=LanguageDetectionError,
            transport=self._transport,
        )

        # data.detections holds one ranked candidate list per query string
        try:
            detections = data["data"]["detections"][0]
            candidates = [
                LanguageCandidate(
                    language=entry["language"],
                    confidence=float(entry.get("confidence", 0.0)),
                )
                for entry in detections
            ]
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise LanguageDetectionError(f"Malformed detect response: {e!r}") from e

        return candidates
