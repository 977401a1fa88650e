import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from firecrawl import AsyncFirecrawl

from app.config import get_scrape_timeout
from app.dependencies import get_firecrawl
from app.models.request import ScrapeRequest
from app.services import firecrawl_client
from app.services.firecrawl_client import FirecrawlClientError
from app.services.translator import build_scrape_options

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/scrape",
    summary="Scrape a single page through Firecrawl",
    response_model=None,
    responses={500: {"description": "Firecrawl error", "content": {"text/plain": {}}}},
)
async def scrape(
    body: ScrapeRequest, client: AsyncFirecrawl = Depends(get_firecrawl)
) -> Dict[str, Any] | PlainTextResponse:
    """Scrape *url* and relay the Firecrawl document verbatim.

    Unrecognised ``formats`` are ignored; an empty or missing list means
    ``["markdown"]``.  Supplying ``schema`` adds the ``extract`` format and
    returns structured data under the ``extract`` key.
    """
    options = build_scrape_options(body)
    logger.info(
        "Scrape request received",
        extra={"url": body.url, "formats": [f.value for f in options.formats]},
    )

    try:
        return await firecrawl_client.scrape(
            client, body.url, options, timeout=get_scrape_timeout()
        )
    except FirecrawlClientError as exc:
        logger.error("Firecrawl scrape failed for %s: %s", body.url, exc)
        return PlainTextResponse(str(exc), status_code=500)
