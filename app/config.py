"""Process configuration read from the environment (and an optional ``.env`` file)."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.firecrawl.dev"
DEFAULT_SCRAPE_TIMEOUT = 60.0  # seconds
DEFAULT_CRAWL_TIMEOUT = 300.0  # seconds
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}.")
    return value


def get_api_key() -> Optional[str]:
    """Return the Firecrawl credential, or *None* when it is unset or blank."""
    key = os.getenv("FIRECRAWL_API_KEY", "").strip()
    return key or None


def get_api_url() -> str:
    return os.getenv("FIRECRAWL_API_URL", "").strip() or DEFAULT_API_URL


def get_scrape_timeout() -> float:
    return _float_env("FIRECRAWL_TIMEOUT", DEFAULT_SCRAPE_TIMEOUT)


def get_crawl_timeout() -> float:
    return _float_env("FIRECRAWL_CRAWL_TIMEOUT", DEFAULT_CRAWL_TIMEOUT)


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_bind() -> tuple[str, int]:
    """Return the ``(host, port)`` pair used by ``python -m app``."""
    host = os.getenv("HOST", "").strip() or DEFAULT_HOST
    raw_port = os.getenv("PORT", "").strip()
    return host, int(raw_port) if raw_port else DEFAULT_PORT
