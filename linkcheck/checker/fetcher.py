"""Plain page fetcher used by the crawl step.

Unlike :mod:`linkcheck.checker.prober` there is no race here: the request
is a single synchronous ``GET`` bounded only by ``settings.fetch_timeout``.
"""

from __future__ import annotations

import logging
from typing import List

import httpx

from linkcheck.checker.extractor import extract_links
from linkcheck.config import settings

LOGGER = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when no HTTP response could be obtained for a page."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"could not fetch {url}: {cause}")
        self.url = url
        self.cause = cause


def fetch_page(url: str) -> str:
    """Fetch *url* and return its body as text.

    The status code is not checked: error pages are returned like any other
    page.  The body is decoded by httpx with the declared charset (UTF-8 when
    it is missing or unknown); undecodable bytes are replaced.  A failure
    while reading the body yields ``""``.

    Raises:
        FetchError: If the request fails before a response arrives.
    """
    with httpx.Client(
        headers=settings.request_headers,
        timeout=settings.fetch_timeout,
        follow_redirects=True,
    ) as client:
        try:
            with client.stream("GET", url) as response:
                LOGGER.debug("GET %s -> HTTP %s", url, response.status_code)
                try:
                    response.read()
                except httpx.HTTPError as exc:
                    LOGGER.warning("Failed reading body of %s: %s", url, exc)
                    return ""
                return response.text
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise FetchError(url, exc) from exc


def fetch_and_extract(url: str) -> List[str]:
    """Fetch *url* and return every anchor ``href`` in its body."""
    return extract_links(fetch_page(url))
