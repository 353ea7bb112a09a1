"""Checker package — reachability probes & link extraction."""

from linkcheck.checker.extractor import extract_links, iter_elements, parse_html
from linkcheck.checker.fetcher import FetchError, fetch_and_extract, fetch_page
from linkcheck.checker.models import (
    Accessible,
    BadStatus,
    ConnectionFailed,
    Malformed,
    ProbeOutcome,
    TimedOut,
)
from linkcheck.checker.pipeline import check_page
from linkcheck.checker.prober import Prober, probe
from linkcheck.checker.urls import MalformedUrlError, build_url

__all__ = [
    # Outcomes
    "ProbeOutcome",
    "Accessible",
    "BadStatus",
    "ConnectionFailed",
    "TimedOut",
    "Malformed",
    # Probing
    "Prober",
    "probe",
    "build_url",
    "MalformedUrlError",
    # Extraction
    "parse_html",
    "iter_elements",
    "extract_links",
    "fetch_page",
    "fetch_and_extract",
    "FetchError",
    "check_page",
]
