"""Shared HTTP plumbing for the Google Cloud REST backends.

Every call opens its own httpx.AsyncClient and closes it on return, so no
connection pool outlives a request. Failures of any kind (missing key,
transport error, non-2xx status, service error object, non-JSON body) are
re-raised as the caller's typed error class.
"""

from __future__ import annotations

import httpx

from lingualens.config import HTTP_TIMEOUT_SEC, get_api_key
from lingualens.errors import PipelineError


async def post_json(
    url: str,
    payload: dict,
    *,
    error_cls: type[PipelineError],
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> dict:
    """POST a JSON payload with the shared API key and return the decoded body."""
    api_key = get_api_key()
    if not api_key:
        raise error_cls("GOOGLE_API_KEY is not set")

    try:
        async with httpx.AsyncClient(
            transport=transport,
            timeout=timeout if timeout is not None else HTTP_TIMEOUT_SEC,
        ) as client:
            response = await client.post(url, params={"key": api_key}, json=payload)
    except httpx.HTTPError as e:
        raise error_cls(f"Request to {url} failed: {e}") from e

    try:
        data = response.json()
    except ValueError as e:
        raise error_cls(f"Non-JSON response from {url} (HTTP {response.status_code})") from e

    if not isinstance(data, dict):
        raise error_cls(f"Unexpected response shape from {url}")

    error = data.get("error")
    if error or response.is_error:
        message = error.get("message") if isinstance(error, dict) else None
        raise error_cls(f"HTTP {response.status_code} from {url}: {message or response.reason_phrase}")

    return data
