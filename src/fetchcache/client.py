"""Request helper that folds every common failure into a result object.

Callers check ``result.error`` instead of catching exceptions::

    result = await ApiClient(http).get("/api/messages")
    if result.error:
        ...

Only exceptions other than httpx errors and JSON encoding or decoding
errors escape from ``request``.
"""

from __future__ import annotations

import json
import math
from typing import Any

import httpx
import structlog

from fetchcache.models.request import MethodType, RequestError, RequestResult

log = structlog.get_logger()

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def merge_headers(headers: dict[str, str] | None = None) -> httpx.Headers:
    """Default headers overlaid with *headers*; caller keys win, case-insensitively."""
    merged = httpx.Headers(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return merged


def encode_body(body: Any) -> str | bytes | None:
    """Strings and bytes pass through, None means no body, anything else becomes JSON."""
    if body is None or isinstance(body, (str, bytes)):
        return body
    return json.dumps(body)


def _is_json(response: httpx.Response) -> bool:
    return "json" in response.headers.get("content-type", "").lower()


def _structured_error(response: httpx.Response) -> RequestError | None:
    """Extract ``{"code", "message"}`` from a JSON error body, if it has both."""
    if not _is_json(response):
        return None
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    code = payload.get("code")
    message = payload.get("message")
    # bool is an int subclass; True is not an error code
    if isinstance(code, bool) or not isinstance(code, (int, float)) or not code:
        return None
    if not math.isfinite(code):
        return None
    if not isinstance(message, str) or not message:
        return None
    return RequestError(code=code, message=message)


class ApiClient:
    """Thin wrapper over an ``httpx.AsyncClient`` returning ``RequestResult``.

    Relative resources resolve against the client's ``base_url``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def request(
        self,
        method: MethodType | str,
        resource: str | httpx.URL,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> RequestResult:
        """Send *method* to *resource* and normalise the outcome.

        Args:
            method: One of GET, POST, PUT, DELETE. Other values raise ValueError.
            resource: Absolute URL or path relative to the client's base URL.
            body: Optional body. Strings are sent verbatim, other values as JSON.
            headers: Extra headers, merged over ``Content-Type: application/json``.

        Returns:
            ``RequestResult`` with ``error`` on failure; otherwise ``text``, plus
            parsed ``data`` when the response content type is JSON.
        """
        method = MethodType(method.upper() if isinstance(method, str) else method)
        try:
            response = await self._client.request(
                method.value,
                resource,
                headers=merge_headers(headers),
                content=encode_body(body),
            )

            if not response.is_success:
                error = _structured_error(response)
                if error is None:
                    error = RequestError(message=f"{response.status_code} {response.reason_phrase}")
                log.info(
                    "request_failed",
                    method=method.value,
                    url=str(response.request.url),
                    status_code=response.status_code,
                )
                return RequestResult(error=error)

            text = response.text
            if _is_json(response):
                return RequestResult(data=json.loads(text), text=text)
            return RequestResult(text=text)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as exc:
            message = str(exc) or type(exc).__name__
            log.info("request_failed", method=method.value, url=str(resource), reason=message)
            return RequestResult(error=RequestError(message=message))

    async def get(self, url: str, headers: dict[str, str] | None = None) -> RequestResult:
        return await self.request(MethodType.GET, url, None, headers)

    async def post(
        self, url: str, body: Any = None, headers: dict[str, str] | None = None
    ) -> RequestResult:
        return await self.request(MethodType.POST, url, body, headers)

    async def put(
        self, url: str, body: Any = None, headers: dict[str, str] | None = None
    ) -> RequestResult:
        return await self.request(MethodType.PUT, url, body, headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> RequestResult:
        return await self.request(MethodType.DELETE, url, None, headers)
