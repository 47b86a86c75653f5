"""Centralised settings for the url-info analyzer.

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
    # Page fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("URLINFO_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "URLINFO_USER_AGENT",
            "Mozilla/5.0 (compatible; url-info/1.0; +https://github.com/url-info)",
        )
    )

    # ------------------------------------------------------------------
    # Link probing
    # ------------------------------------------------------------------
    probe_timeout: float = field(
        default_factory=lambda: float(os.environ.get("URLINFO_PROBE_TIMEOUT", "5.0"))
    )
    collection_window: float = field(
        default_factory=lambda: float(os.environ.get("URLINFO_COLLECTION_WINDOW", "0.01"))
    )
    max_concurrent_probes: int = field(
        default_factory=lambda: int(os.environ.get("URLINFO_MAX_CONCURRENT_PROBES", "32"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("URLINFO_LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from urlinfo.config import settings
settings = Settings()
