"""Request translation: turns loosely-typed request fields into client options."""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from app.models.crawl_request import CrawlRequest
from app.models.options import CrawlOptions, ExtractOptions, Format, ScrapeOptions
from app.models.request import ScrapeRequest

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = Format.MARKDOWN
DEFAULT_CRAWL_LIMIT = 100

SCRAPE_FORMATS: Mapping[str, Format] = {
    "MARKDOWN": Format.MARKDOWN,
    "HTML": Format.HTML,
    "EXTRACT": Format.EXTRACT,
}

# Crawled pages cannot carry an extraction directive
CRAWL_FORMATS: Mapping[str, Format] = {
    "MARKDOWN": Format.MARKDOWN,
    "HTML": Format.HTML,
}


def normalize_formats(
    tokens: Optional[Iterable[Any]], vocabulary: Mapping[str, Format]
) -> List[Format]:
    """Map case-insensitive *tokens* onto *vocabulary*.

    Unknown tokens are dropped and repeats collapse to their first occurrence.
    The result is never empty: it falls back to ``[Format.MARKDOWN]``.
    """
    formats: List[Format] = []
    for token in tokens or ():
        if not isinstance(token, str):
            continue
        fmt = vocabulary.get(token.strip().upper())
        if fmt is None:
            logger.debug("Dropping unrecognised format %r", token)
            continue
        if fmt not in formats:
            formats.append(fmt)

    return formats or [DEFAULT_FORMAT]


def build_scrape_options(request: ScrapeRequest) -> ScrapeOptions:
    formats = normalize_formats(request.formats, SCRAPE_FORMATS)

    extract = None
    if request.schema_ is not None:
        extract = ExtractOptions(schema=request.schema_)
        if Format.EXTRACT not in formats:
            formats.append(Format.EXTRACT)

    logger.debug("Parsed scrape formats: %s", [f.value for f in formats])
    return ScrapeOptions(formats=formats, extract=extract)


def build_crawl_options(request: CrawlRequest) -> CrawlOptions:
    formats = normalize_formats(request.formats, CRAWL_FORMATS)
    limit = request.limit if request.limit is not None else DEFAULT_CRAWL_LIMIT

    logger.debug("Parsed crawl formats: %s (limit=%d)", [f.value for f in formats], limit)
    return CrawlOptions(formats=formats, limit=limit)
