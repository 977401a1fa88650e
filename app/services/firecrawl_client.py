"""Thin async adapter around the Firecrawl SDK.

Options built by :mod:`app.services.translator` are mapped onto SDK keyword
arguments here, and SDK results are turned back into JSON-ready payloads that
use the service's camelCase wire names.
"""

import asyncio
import logging
import re
from typing import Any, Awaitable, Callable, Dict, Optional

from firecrawl import AsyncFirecrawl
from firecrawl.v2.types import ScrapeOptions as FirecrawlScrapeOptions

from app.models.options import CrawlOptions, ExtractOptions, Format, ScrapeOptions

logger = logging.getLogger(__name__)

# The service names structured-extraction output "json"; callers ask for it as "extract"
_SERVICE_EXTRACT_KEY = "json"
_EXTRACT_KEY = "extract"
# Values under these keys are shaped by the caller's schema and are never rewritten
_OPAQUE_KEYS = {_SERVICE_EXTRACT_KEY, _EXTRACT_KEY}

# Wire names the SDK snake-cases irregularly; the rest follow plain camelCase
_WIRE_NAMES = {"source_url": "sourceURL"}

_SNAKE_KEY = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)+$")


class FirecrawlClientError(RuntimeError):
    """Raised when Firecrawl cannot be reached or fails a request."""


def create_client(api_key: Optional[str], api_url: Optional[str] = None) -> AsyncFirecrawl:
    """Build the shared SDK client.

    Raises:
        FirecrawlClientError: if *api_key* is missing or the SDK rejects the
            configuration.
    """
    if not api_key or not api_key.strip():
        raise FirecrawlClientError("FIRECRAWL_API_KEY must be set.")

    kwargs: Dict[str, Any] = {"api_key": api_key.strip()}
    if api_url:
        kwargs["api_url"] = api_url
    try:
        return AsyncFirecrawl(**kwargs)
    except Exception as exc:
        raise FirecrawlClientError(f"Failed to initialise Firecrawl client: {exc}") from exc


async def scrape(
    client: AsyncFirecrawl, url: str, options: ScrapeOptions, *, timeout: Optional[float] = None
) -> Dict[str, Any]:
    """Scrape a single *url* and return the document as a JSON-ready dict."""
    formats = [_format_option(fmt, options.extract) for fmt in options.formats]
    document = await _call(
        "scrape", lambda: client.scrape(url=url, formats=formats), timeout
    )

    payload = to_payload(document)
    if isinstance(payload, dict) and _SERVICE_EXTRACT_KEY in payload and _EXTRACT_KEY not in payload:
        payload[_EXTRACT_KEY] = payload.pop(_SERVICE_EXTRACT_KEY)
    return payload


async def crawl(
    client: AsyncFirecrawl, url: str, options: CrawlOptions, *, timeout: Optional[float] = None
) -> Dict[str, Any]:
    """Crawl from *url*, wait for the job to finish, and return it as a JSON-ready dict."""
    formats = [_format_option(fmt, None) for fmt in options.formats]
    job = await _call(
        "crawl",
        lambda: client.crawl(
            url=url,
            limit=options.limit,
            scrape_options=FirecrawlScrapeOptions(formats=formats),
        ),
        timeout,
    )
    return to_payload(job)


def to_payload(result: Any) -> Any:
    """Convert an SDK result into plain JSON data keyed by the service's wire names."""
    if hasattr(result, "model_dump"):
        result = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    return _camelize(result)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

async def _call(
    operation: str, request: Callable[[], Awaitable[Any]], timeout: Optional[float]
) -> Any:
    """Run *request* under *timeout*, wrapping every failure in FirecrawlClientError."""
    logger.debug("Calling Firecrawl %s (timeout=%s)", operation, timeout)
    try:
        return await asyncio.wait_for(request(), timeout=timeout)
    except asyncio.TimeoutError:
        raise FirecrawlClientError(
            f"Firecrawl {operation} timed out after {timeout:g} seconds."
        ) from None
    except FirecrawlClientError:
        raise
    except Exception as exc:
        raise FirecrawlClientError(str(exc) or type(exc).__name__) from exc


def _format_option(fmt: Format, extract: Optional[ExtractOptions]) -> Any:
    if fmt is not Format.EXTRACT:
        return fmt.value

    option: Dict[str, Any] = {"type": "json"}
    if extract is not None and extract.schema_ is not None:
        option["schema"] = extract.schema_
    return option


def _camel(key: str) -> str:
    if key in _WIRE_NAMES:
        return _WIRE_NAMES[key]
    if not _SNAKE_KEY.match(key):
        return key
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        converted: Dict[str, Any] = {}
        for key, item in value.items():
            if isinstance(key, str) and key in _OPAQUE_KEYS:
                converted[key] = item
            else:
                converted[_camel(key) if isinstance(key, str) else key] = _camelize(item)
        return converted
    if isinstance(value, list):
        return [_camelize(item) for item in value]
    return value
