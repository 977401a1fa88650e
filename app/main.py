import logging
import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.config import (
    get_api_key,
    get_api_url,
    get_crawl_timeout,
    get_log_level,
    get_scrape_timeout,
)
from app.routers.crawl import router as crawl_router
from app.routers.scrape import router as scrape_router
from app.services.firecrawl_client import create_client

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": get_log_level(), "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing key, a malformed timeout or a rejected client configuration aborts startup
    scrape_timeout, crawl_timeout = get_scrape_timeout(), get_crawl_timeout()
    app.state.firecrawl = create_client(get_api_key(), get_api_url())
    logger.info(
        "Firecrawl client ready",
        extra={
            "api_url": get_api_url(),
            "scrape_timeout": scrape_timeout,
            "crawl_timeout": crawl_timeout,
        },
    )
    yield


app = FastAPI(
    title="Firecrawl Relay",
    description="Scrapes and crawls web pages through the Firecrawl API and relays the results.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return PlainTextResponse("An unexpected error occurred.", status_code=500)


app.include_router(scrape_router)
app.include_router(crawl_router)
