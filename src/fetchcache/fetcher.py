"""HTTP fetch collaborator used by the disk cache on a miss."""

from __future__ import annotations

import httpx
import structlog

from fetchcache.config import HttpSettings
from fetchcache.errors import ErrorCode, NetworkError

log = structlog.get_logger()


def build_http_client(settings: HttpSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx.AsyncClient from HTTP settings."""
    if settings is None:
        settings = HttpSettings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers={"User-Agent": settings.user_agent},
    )


class HttpFetcher:
    """Fetch response bodies over HTTP; implements the BodyFetcher protocol.

    The body is returned verbatim. Status codes outside 2xx and transport
    failures both raise ``NetworkError``; 5xx and transport errors are marked
    recoverable, 4xx is not.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_body(self, url: str) -> str:
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            log.warning("fetch_failed", url=url, reason=str(exc) or type(exc).__name__)
            raise NetworkError(
                ErrorCode.FETCH_FAILED,
                f"Network error fetching {url}: {exc}",
                recoverable=True,
            ) from exc

        if not response.is_success:
            status = response.status_code
            log.warning("fetch_failed", url=url, status_code=status)
            raise NetworkError(
                ErrorCode.HTTP_STATUS,
                f"{status} {response.reason_phrase}",
                recoverable=status >= 500,
                status_code=status,
            )

        log.debug("fetch_success", url=url, size=len(response.content))
        return response.text
