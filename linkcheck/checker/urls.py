"""Resolve a (domain, path) pair into an absolute URL."""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit, urlunsplit

import httpx

from linkcheck.config import settings

_ALLOWED_SCHEMES = ("http", "https")
_SCHEME_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_SEGMENT_END = re.compile(r"[/?#]")


class MalformedUrlError(ValueError):
    """Raised when a domain and path do not resolve to a usable URL."""


def _check_absolute(url: str) -> None:
    """Raise :class:`MalformedUrlError` unless *url* is a fetchable http(s) URL."""
    try:
        parts = urlsplit(url)
        # Accessing .port validates it (non-numeric or out of range raises).
        parts.port
    except ValueError as exc:
        raise MalformedUrlError(f"{url!r}: {exc}") from exc

    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        raise MalformedUrlError(f"{url!r}: unsupported scheme {parts.scheme!r}")
    host = parts.hostname or ""
    if not host or any(ch.isspace() for ch in host):
        raise MalformedUrlError(f"{url!r}: missing or invalid host")


def _base_url(domain: str) -> str:
    domain = domain.strip()
    if not domain:
        raise MalformedUrlError("empty domain")
    if "://" not in domain:
        domain = f"{settings.default_scheme}://{domain}"
    _check_absolute(domain)
    return domain


def _check_reference(path: str) -> None:
    """Reject references that are neither absolute URIs nor relative refs.

    A relative reference may not carry a colon in its first path segment,
    otherwise it would read as a scheme (``://bad::url`` is neither).
    """
    if _SCHEME_PREFIX.match(path):
        return
    first_segment = _SEGMENT_END.split(path, 1)[0]
    if ":" in first_segment:
        raise MalformedUrlError(f"{path!r}: colon in first path segment")


def build_url(domain: str, path: str) -> str:
    """Resolve *path* against *domain* and return the absolute URL.

    *domain* is treated as the base; ``http://`` (``settings.default_scheme``)
    is assumed when it carries no scheme.  *path* follows standard reference
    resolution, so an absolute URL replaces the base entirely.  The fragment
    is dropped, an empty path becomes ``/`` and characters httpx would
    percent-encode on the wire (spaces, for one) are encoded here too.

    Raises:
        MalformedUrlError: If the base or the resolved URL is not a valid
            http(s) URL.
    """
    base = _base_url(domain)
    reference = path.strip()
    _check_reference(reference)

    resolved = urljoin(base, reference)
    _check_absolute(resolved)

    parts = urlsplit(resolved)
    normalised = urlunsplit(
        (parts.scheme.lower(), parts.netloc, parts.path or "/", parts.query, "")
    )

    try:
        wire_url = httpx.URL(normalised)
    except httpx.InvalidURL as exc:
        raise MalformedUrlError(f"{normalised!r}: {exc}") from exc

    return str(wire_url)
