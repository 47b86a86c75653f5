"""HTTP fetcher for the page under analysis."""

from __future__ import annotations

import logging

import httpx

from urlinfo.analyzer.errors import FetchError
from urlinfo.analyzer.models import RawPage
from urlinfo.config import settings

logger = logging.getLogger(__name__)


def default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


async def fetch_url(url: str, *, timeout: float | None = None) -> RawPage:
    """Fetch *url* with a single GET and return a :class:`RawPage`.

    Redirects are followed; the final response must be exactly ``200 OK``.
    There are no retries.

    Raises:
        FetchError: On any transport failure or a non-200 status code.
    """
    logger.debug("fetching page", extra={"url": url})

    try:
        async with httpx.AsyncClient(
            headers=default_headers(),
            timeout=timeout if timeout is not None else settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"Error retrieving document: {exc}", url=url) from exc

    if response.status_code != 200:
        raise FetchError(
            f"Error retrieving document: HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    logger.debug(
        "page fetched",
        extra={"url": url, "status_code": response.status_code, "bytes": len(response.content)},
    )
    return RawPage(
        url=url,
        html=response.text,
        content=response.content,
        status_code=response.status_code,
    )
