"""Google Cloud Vision text detection backend.

Sends one images:annotate request with the TEXT_DETECTION feature. The first
returned annotation is the full text block, followed by one entry per word;
both are passed through unchanged.
"""

from __future__ import annotations

import base64

import httpx

from lingualens.backends.base import TextDetectionBackend
from lingualens.backends.google_api import post_json
from lingualens.backends.types import Annotation, BoundingRegion, Vertex
from lingualens.config import VISION_API_URL
from lingualens.errors import DetectionError


def _parse_region(raw: dict | None) -> BoundingRegion | None:
    if not raw:
        return None
    # Vision omits zero-valued coordinates
    vertices = tuple(
        Vertex(x=int(v.get("x", 0)), y=int(v.get("y", 0))) for v in raw.get("vertices", [])
    )
    return BoundingRegion(vertices=vertices)


class GoogleVisionBackend(TextDetectionBackend):
    """Text detection via the Cloud Vision REST API."""

    def __init__(
        self,
        url: str = VISION_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._transport = transport

    def build_request(self, image: bytes) -> dict:
        return {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image).decode("ascii")},
                    "features": [{"type": "TEXT_DETECTION"}],
                }
            ]
        }

    async def detect(self, image: bytes) -> list[Annotation]:
        data = await post_json(
            self.url,
            self.build_request(image),
            error_cls=DetectionError,
            transport=self._transport,
        )

        responses = data.get("responses")
        if not isinstance(responses, list) or not responses or not isinstance(responses[0], dict):
            raise DetectionError("Vision response has no 'responses' entry")

        first = responses[0]
        error = first.get("error")
        if error:
            raise DetectionError(f"Vision error {error.get('code')}: {error.get('message')}")

        try:
            return [
                Annotation(
                    description=entry["description"],
                    region=_parse_region(entry.get("boundingPoly")),
                )
                for entry in first.get("textAnnotations", [])
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise DetectionError(f"Malformed text annotation: {e}") from e
