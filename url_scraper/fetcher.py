"""HTTP fetcher: one GET, body returned as text.

The fetcher is a pass-through over ``httpx``.  It never inspects the status
code, never retries and adds no timeout of its own beyond what the client it
is given was configured with.
"""

from __future__ import annotations

import logging

import httpx

from url_scraper.config import settings
from url_scraper.errors import RequestError

logger = logging.getLogger(__name__)


def default_client() -> httpx.AsyncClient:
    """Build the client used when the caller does not supply one.

    Unless `REQUEST_TIMEOUT` is set the client has no timeout, overriding
    httpx's own 5 s default.
    """
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    )


async def fetch_html(url: httpx.URL, client: httpx.AsyncClient) -> str:
    """GET *url* with *client* and return the decoded response body.

    A 4xx/5xx response is returned like any other; only transport-level
    problems are errors.

    Raises:
        RequestError: Wraps any ``httpx.HTTPError`` (connect, TLS, timeout,
            decoding, unsupported protocol, too many redirects, ...).
    """
    logger.debug("GET %s", url)
    try:
        response = await client.get(url)
        html = response.text
    except httpx.HTTPError as exc:
        logger.debug("GET %s failed: %s", url, exc)
        raise RequestError(exc) from exc

    logger.debug("GET %s -> HTTP %s, %d chars", url, response.status_code, len(html))
    return html
