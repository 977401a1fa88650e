import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from firecrawl import AsyncFirecrawl

from app.config import get_crawl_timeout
from app.dependencies import get_firecrawl
from app.models.crawl_request import CrawlRequest
from app.services import firecrawl_client
from app.services.firecrawl_client import FirecrawlClientError
from app.services.translator import build_crawl_options

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/crawl",
    summary="Crawl a site through Firecrawl",
    description=(
        "Starts a Firecrawl crawl job at *url*, waits for it to complete and "
        "returns the finished job (status, `creditsUsed`, `data`).  At most "
        "`limit` pages are crawled (default 100)."
    ),
    response_model=None,
    responses={500: {"description": "Firecrawl error", "content": {"text/plain": {}}}},
)
async def crawl_endpoint(
    body: CrawlRequest, client: AsyncFirecrawl = Depends(get_firecrawl)
) -> Dict[str, Any] | PlainTextResponse:
    options = build_crawl_options(body)
    logger.info(
        "Crawl request received",
        extra={
            "url": body.url,
            "limit": options.limit,
            "formats": [f.value for f in options.formats],
        },
    )

    try:
        return await firecrawl_client.crawl(
            client, body.url, options, timeout=get_crawl_timeout()
        )
    except FirecrawlClientError as exc:
        logger.error("Firecrawl crawl failed for %s: %s", body.url, exc)
        return PlainTextResponse(str(exc), status_code=500)
