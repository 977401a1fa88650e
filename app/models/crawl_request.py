from typing import Any, List, Optional

from pydantic import BaseModel, Field


class CrawlRequest(BaseModel):
    url: str = Field(description="Seed URL of the crawl.")
    limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of pages to crawl (defaults to 100).",
    )
    formats: Optional[List[Any]] = Field(
        default=None,
        description="Output formats per page, case-insensitive: markdown, html.",
        examples=[["markdown"]],
    )
