"""Centralised settings for url-scraper.

Values only shape the *default* HTTP client built by
:func:`url_scraper.fetcher.default_client` and the CLI's logging setup.  A
client supplied by the caller is always used as-is.  Everything can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from url_scraper.version import __version__

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_timeout(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Default HTTP client
    # ------------------------------------------------------------------
    # Unset means no timeout at all.
    request_timeout: float | None = field(
        default_factory=lambda: _env_timeout("REQUEST_TIMEOUT")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SCRAPER_USER_AGENT", f"url-scraper/{__version__}"
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: _env_flag("FOLLOW_REDIRECTS", "true")
    )

    # ------------------------------------------------------------------
    # CLI
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("SCRAPER_LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton — import this everywhere:
#   from url_scraper.config import settings
settings = Settings()
