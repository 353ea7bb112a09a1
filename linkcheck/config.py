"""Centralised settings for the link checker.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Prober
    # ------------------------------------------------------------------
    probe_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PROBE_TIMEOUT", "10.0"))
    )
    max_concurrent_probes: int = field(
        default_factory=lambda: int(os.environ.get("MAX_CONCURRENT_PROBES", "8"))
    )
    default_scheme: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_SCHEME", "http")
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    fetch_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FETCH_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKCHECK_USER_AGENT",
            "Mozilla/5.0 (compatible; linkcheck/0.1; +https://github.com/linkcheck)",
        )
    )

    @property
    def request_headers(self) -> dict[str, str]:
        """Headers sent with every probe and page fetch."""
        return {"User-Agent": self.user_agent}


# Module-level singleton; import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
