"""One crawl step: fetch a page, extract its links, probe each of them."""

from __future__ import annotations

import logging
from typing import List, Tuple

from linkcheck.checker.fetcher import fetch_and_extract
from linkcheck.checker.models import ProbeOutcome
from linkcheck.checker.prober import Prober

LOGGER = logging.getLogger(__name__)


def check_page(url: str, prober: Prober | None = None) -> List[Tuple[str, ProbeOutcome]]:
    """Probe every link found on the page at *url*.

    Links are resolved against *url* itself, so relative hrefs point where a
    browser would send them.  Returns ``(href, outcome)`` pairs in document
    order; repeated links are probed each time they appear.

    Raises:
        FetchError: If the page itself cannot be fetched.
    """
    prober = prober or Prober()
    links = fetch_and_extract(url)
    LOGGER.info("Found %d link(s) on %s", len(links), url)

    outcomes = prober.probe_many(url, links)
    return list(zip(links, outcomes))
