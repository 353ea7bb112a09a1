"""Bounded-time reachability probes.

A probe races two participants that report into a single-slot queue:

* a worker thread issuing ``GET <url>`` through ``httpx``;
* a ``threading.Timer`` that reports :class:`TimedOut` after the deadline.

The caller takes the first outcome from the queue.  The loser is abandoned,
not cancelled: a late fetch result lands in a queue nobody reads again, and
the worker's ``httpx.Client`` context still closes the connection when the
request eventually finishes.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

import httpx

from linkcheck.checker.models import (
    Accessible,
    BadStatus,
    ConnectionFailed,
    Malformed,
    ProbeOutcome,
    TimedOut,
)
from linkcheck.checker.urls import MalformedUrlError, build_url
from linkcheck.config import settings

LOGGER = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.Client]


class Prober:
    """Probe URLs with a fixed per-call deadline.

    Args:
        timeout: Seconds from probe start to a :class:`TimedOut` decision.
            Defaults to ``settings.probe_timeout``.
        client_factory: Zero-argument callable returning a fresh
            ``httpx.Client``.  Each probe opens and closes its own client so
            probes share no state.
    """

    def __init__(
        self,
        timeout: float | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.timeout = settings.probe_timeout if timeout is None else timeout
        self._client_factory = client_factory or self._default_client

    def _default_client(self) -> httpx.Client:
        # The client timeout only bounds abandoned workers; the race timer
        # always fires first.
        return httpx.Client(
            headers=settings.request_headers,
            timeout=self.timeout,
            follow_redirects=True,
        )

    # ------------------------------------------------------------------
    # Race participants
    # ------------------------------------------------------------------
    def _fetch(self, url: str) -> ProbeOutcome:
        try:
            with self._client_factory() as client:
                response = client.get(url)
        except httpx.TimeoutException:
            return TimedOut(url)
        except httpx.RequestError as exc:
            LOGGER.debug("Connection to %s failed: %s", url, exc)
            return ConnectionFailed(url)
        except Exception:
            # Reported rather than raised: an exception dying with the worker
            # would leave the caller waiting for the timer.
            LOGGER.exception("Unexpected error while probing %s", url)
            return ConnectionFailed(url)

        # Only an exact 200 counts; 201, 204 and friends are BadStatus.
        if response.status_code == httpx.codes.OK:
            return Accessible(url)
        return BadStatus(url, response.status_code)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def probe(self, domain: str, path: str) -> ProbeOutcome:
        """Resolve *path* against *domain* and probe it.

        Returns exactly one :class:`ProbeOutcome`.  Never raises for bad
        input, transport failures or timeouts, and never blocks for longer
        than ``self.timeout`` plus scheduling jitter.
        """
        try:
            url = build_url(domain, path)
        except MalformedUrlError as exc:
            LOGGER.debug("Not probing %r: %s", path, exc)
            return Malformed(path)

        slot: queue.Queue[ProbeOutcome] = queue.Queue(maxsize=1)

        def report(outcome: ProbeOutcome) -> None:
            try:
                slot.put_nowait(outcome)
            except queue.Full:
                LOGGER.debug("Dropping late outcome for %s: %s", url, outcome)

        timer = threading.Timer(self.timeout, report, args=(TimedOut(url),))
        timer.daemon = True
        worker = threading.Thread(
            target=lambda: report(self._fetch(url)),
            name=f"probe {url}",
            daemon=True,
        )

        timer.start()
        worker.start()
        outcome = slot.get()
        timer.cancel()

        LOGGER.debug("Probed %s: %s", url, type(outcome).__name__)
        return outcome

    def probe_many(self, domain: str, paths: Iterable[str]) -> list[ProbeOutcome]:
        """Probe each of *paths* against *domain* concurrently.

        Runs at most ``settings.max_concurrent_probes`` probes at a time and
        returns outcomes in the same order as *paths*.
        """
        paths = list(paths)
        if not paths:
            return []

        workers = max(1, min(settings.max_concurrent_probes, len(paths)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="prober") as pool:
            return list(pool.map(lambda path: self.probe(domain, path), paths))


def probe(domain: str, path: str, timeout: float | None = None) -> ProbeOutcome:
    """Probe a single URL with a default :class:`Prober`."""
    return Prober(timeout=timeout).probe(domain, path)
