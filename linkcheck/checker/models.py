"""Probe outcomes.

A probe produces exactly one of five variants.  Each renders to the canonical
``!! ...`` line consumed by reports and logs, so ``__str__`` must not change.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeOutcome:
    """Base class for the result of a single probe."""

    @property
    def ok(self) -> bool:
        """``True`` only when the URL answered with ``200 OK``."""
        return False


@dataclass(frozen=True)
class Accessible(ProbeOutcome):
    """The GET succeeded with status 200."""

    url: str

    @property
    def ok(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"!! {self.url}"


@dataclass(frozen=True)
class BadStatus(ProbeOutcome):
    """The server answered, but not with status 200."""

    url: str
    status: int

    def __str__(self) -> str:
        return f"!! {self.url} ({self.status})"


@dataclass(frozen=True)
class ConnectionFailed(ProbeOutcome):
    """Transport-level failure: DNS, refused, reset, TLS, and so on."""

    url: str

    def __str__(self) -> str:
        return f"!! {self.url} (connection failed)"


@dataclass(frozen=True)
class TimedOut(ProbeOutcome):
    """No response arrived before the probe deadline."""

    url: str

    def __str__(self) -> str:
        return f"!! {self.url} (timed out)"


@dataclass(frozen=True)
class Malformed(ProbeOutcome):
    """The domain and path could not be resolved into a URL."""

    path: str

    def __str__(self) -> str:
        return f"!! {self.path} (malformed)"
